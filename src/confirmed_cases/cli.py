"""Command line interface for the confirmed cases formatter."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import dotenv
import logging

from confirmed_cases.config.constants import KeyStyle
from confirmed_cases.config.loader import load_config
from confirmed_cases.data.case_tree import iter_case_nodes
from confirmed_cases.data.loader import load_case_tree
from confirmed_cases.export.writer import render_record, save_record
from confirmed_cases.formatting.confirmed_cases import format_confirmed_cases
from confirmed_cases.logging import configure_logging

app = typer.Typer(help="Confirmed cases formatter CLI")

# Ensure .env is loaded with highest priority
dotenv.load_dotenv(override=True)


@app.command()
def format(
    config: Path = typer.Option(..., help="Path to YAML config."),
    input: Optional[Path] = typer.Option(None, help="Override data.path."),
    output: Optional[Path] = typer.Option(None, help="Override output.path."),
    chart_keys: Optional[bool] = typer.Option(
        None, "--chart-keys/--python-keys", help="Override output.key_style."
    ),
) -> None:
    """Flatten the summary tree into the confirmed cases record.

    Args:
        config: Path to configuration YAML file.
        input: Optional dashboard JSON path override.
        output: Optional destination path override.
        chart_keys: Optional key style override.
    """
    cfg = load_config(config)
    configure_logging(cfg.logging)
    logging.getLogger(__name__).info("Starting format")

    tree = load_case_tree(input or cfg.data.path, summary_key=cfg.data.summary_key)
    record = format_confirmed_cases(tree)

    use_chart_keys = cfg.output.key_style is KeyStyle.CHART if chart_keys is None else chart_keys
    output_path = output or cfg.output.path
    if output_path is not None:
        save_record(record, output_path, chart_keys=use_chart_keys)
    typer.echo(render_record(record, chart_keys=use_chart_keys))


@app.command()
def inspect(
    config: Path = typer.Option(..., help="Path to YAML config."),
    input: Optional[Path] = typer.Option(None, help="Override data.path."),
) -> None:
    """Print the summary tree in preorder.

    Args:
        config: Path to configuration YAML file.
        input: Optional dashboard JSON path override.
    """
    cfg = load_config(config)
    configure_logging(cfg.logging)

    tree = load_case_tree(input or cfg.data.path, summary_key=cfg.data.summary_key)
    for depth, node in iter_case_nodes(tree):
        typer.echo(f"{'  ' * depth}{node['label']}: {node['value']}")


def main() -> None:
    """Entrypoint for console_scripts."""
    app()


if __name__ == "__main__":
    main()
