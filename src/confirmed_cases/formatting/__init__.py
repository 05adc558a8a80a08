"""Formatters turning summary trees into chart records."""

from confirmed_cases.formatting.confirmed_cases import (
    CHART_KEYS,
    CONFIRMED_CASES_FIELDS,
    ConfirmedCases,
    extract_value,
    format_confirmed_cases,
    to_chart_record,
)

__all__ = [
    "CHART_KEYS",
    "CONFIRMED_CASES_FIELDS",
    "ConfirmedCases",
    "extract_value",
    "format_confirmed_cases",
    "to_chart_record",
]
