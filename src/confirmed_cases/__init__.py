"""Flatten COVID-19 dashboard summary trees into chart records."""

from confirmed_cases.data.case_tree import LabeledNode
from confirmed_cases.formatting.confirmed_cases import (
    ConfirmedCases,
    extract_value,
    format_confirmed_cases,
)

__all__ = ["LabeledNode", "ConfirmedCases", "extract_value", "format_confirmed_cases"]
