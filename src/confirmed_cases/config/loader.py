"""Config loader utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from confirmed_cases.config.schema import AppConfig

# (section, key) pairs holding filesystem paths
PATH_FIELDS: tuple[tuple[str, str], ...] = (
    ("data", "path"),
    ("output", "path"),
    ("logging", "log_dir"),
)


def load_config(path: Path) -> AppConfig:
    """Load application config from YAML.

    Relative paths written in the file are taken relative to the directory
    holding the config, so a config works from any working directory.
    Defaults that the file does not set stay relative to the working directory.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Parsed `AppConfig` object.
    """
    with path.open("r", encoding="utf-8") as fp:
        data: dict[str, Any] = yaml.safe_load(fp) or {}
    return AppConfig(**_anchor_paths(data, path.resolve().parent))


def _anchor_paths(data: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Return a copy of `data` with relative path fields joined onto `base_dir`."""
    anchored = {key: dict(value) if isinstance(value, dict) else value for key, value in data.items()}
    for section, key in PATH_FIELDS:
        block = anchored.get(section)
        if not isinstance(block, dict) or block.get(key) is None:
            continue
        candidate = Path(str(block[key])).expanduser()
        block[key] = candidate if candidate.is_absolute() else base_dir / candidate
    return anchored


__all__ = ["load_config"]
