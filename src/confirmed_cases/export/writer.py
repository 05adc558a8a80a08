"""Writers for flattened chart records."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Mapping

from confirmed_cases.formatting.confirmed_cases import ConfirmedCases, to_chart_record

logger = logging.getLogger(__name__)


def render_record(record: ConfirmedCases, *, chart_keys: bool = False) -> str:
    """Serialize a record to pretty JSON.

    Args:
        record: Flattened record.
        chart_keys: Use the chart's Japanese keys instead of field names.

    Returns:
        JSON text.
    """
    payload: Mapping[str, int] = to_chart_record(record) if chart_keys else record
    return json.dumps(payload, ensure_ascii=False, indent=2)


def save_record(record: ConfirmedCases, output_path: Path, *, chart_keys: bool = False) -> None:
    """Save a record to a JSON file.

    Args:
        record: Flattened record.
        output_path: Destination file path.
        chart_keys: Use the chart's Japanese keys instead of field names.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_record(record, chart_keys=chart_keys), encoding="utf-8")
    logger.info("Wrote confirmed cases record to %s", output_path)


__all__ = ["render_record", "save_record"]
