"""Flatten the confirmed cases summary tree for chart components."""
from __future__ import annotations

from typing import Optional, TypedDict, cast

from confirmed_cases.data.case_tree import LabeledNode


class ConfirmedCases(TypedDict):
    """Flat record consumed by the confirmed cases chart."""

    tests_performed: int
    confirmed_positive: int
    hospitalized: int
    in_facility: int
    awaiting_admission: int
    deceased: int
    discharged: int


# (output key, source label). 自宅療養 and 調査中 are in the tree but not
# charted; neither is the 軽症中等症 / 重症 split.
CONFIRMED_CASES_FIELDS: tuple[tuple[str, str], ...] = (
    ("tests_performed", "検査実施人数"),
    ("confirmed_positive", "陽性患者数"),
    ("hospitalized", "入院中"),
    ("in_facility", "宿泊療養施設に入所中"),
    ("awaiting_admission", "入院調整中"),
    ("deceased", "死亡"),
    ("discharged", "退院"),
)

CHART_KEYS: dict[str, str] = {
    "tests_performed": "検査実施人数",
    "confirmed_positive": "陽性者数",
    "hospitalized": "入院中",
    "in_facility": "宿泊療養施設に入所中",
    "awaiting_admission": "入院調整中",
    "deceased": "死亡",
    "discharged": "退院",
}


def _find_value(node: LabeledNode, wanted_label: str) -> Optional[int]:
    """Return the value of the first preorder match, or None."""
    if node["label"] == wanted_label:
        return node["value"]
    for child in node.get("children") or []:
        found = _find_value(child, wanted_label)
        if found is not None:
            return found
    return None


def extract_value(tree: LabeledNode, wanted_label: str) -> int:
    """Look up a counter by label.

    The tree is searched depth-first in preorder, so the root is checked
    before its children and earlier children before later ones. The first
    match wins.

    Args:
        tree: Root of the summary tree.
        wanted_label: Label to look for.

    Returns:
        Value of the first matching node, or 0 when no node matches.
    """
    found = _find_value(tree, wanted_label)
    return 0 if found is None else found


def format_confirmed_cases(tree: LabeledNode) -> ConfirmedCases:
    """Format the summary tree for the confirmed cases chart.

    Args:
        tree: Root of the summary tree.

    Returns:
        `ConfirmedCases` with every field present; missing counters are 0.
    """
    return cast(
        ConfirmedCases,
        {key: extract_value(tree, label) for key, label in CONFIRMED_CASES_FIELDS},
    )


def to_chart_record(record: ConfirmedCases) -> dict[str, int]:
    """Rename a `ConfirmedCases` record to the chart's Japanese keys."""
    return {CHART_KEYS[key]: value for key, value in record.items()}


__all__ = [
    "ConfirmedCases",
    "CONFIRMED_CASES_FIELDS",
    "CHART_KEYS",
    "extract_value",
    "format_confirmed_cases",
    "to_chart_record",
]
