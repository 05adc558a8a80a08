"""Export helpers for chart records."""

from confirmed_cases.export.writer import render_record, save_record

__all__ = ["render_record", "save_record"]
