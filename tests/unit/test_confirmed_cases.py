"""Tests for flattening the confirmed cases summary tree."""
from __future__ import annotations

from confirmed_cases.data.case_tree import LabeledNode
from confirmed_cases.formatting.confirmed_cases import (
    CHART_KEYS,
    CONFIRMED_CASES_FIELDS,
    extract_value,
    format_confirmed_cases,
    to_chart_record,
)

EXPECTED_KEYS = [
    "tests_performed",
    "confirmed_positive",
    "hospitalized",
    "in_facility",
    "awaiting_admission",
    "deceased",
    "discharged",
]


def _sample_tree() -> LabeledNode:
    """Build a three-level summary tree with every known label."""

    return {
        "label": "検査実施人数",
        "value": 100,
        "children": [
            {
                "label": "陽性患者数",
                "value": 40,
                "children": [
                    {"label": "入院中", "value": 10},
                    {"label": "宿泊療養施設に入所中", "value": 5},
                    {"label": "入院調整中", "value": 3},
                    {"label": "自宅療養", "value": 2},
                    {"label": "調査中", "value": 1},
                    {"label": "退院", "value": 18},
                    {"label": "死亡", "value": 1},
                ],
            }
        ],
    }


def test_extract_value_finds_root_middle_and_leaf() -> None:
    """A label present once resolves wherever it sits in the tree."""

    tree = _sample_tree()
    assert extract_value(tree, "検査実施人数") == 100
    assert extract_value(tree, "陽性患者数") == 40
    assert extract_value(tree, "退院") == 18


def test_extract_value_returns_zero_when_absent() -> None:
    """Unknown labels default to 0."""

    assert extract_value(_sample_tree(), "重症") == 0
    assert extract_value({"label": "検査実施人数", "value": 7}, "入院中") == 0


def test_extract_value_is_deterministic() -> None:
    """Repeated lookups give the same answer."""

    tree = _sample_tree()
    assert {extract_value(tree, "入院中") for _ in range(5)} == {10}


def test_extract_value_prefers_preorder_first_duplicate() -> None:
    """Root beats children and an earlier subtree beats a later sibling."""

    tree: LabeledNode = {
        "label": "root",
        "value": 0,
        "children": [
            {"label": "a", "value": 1, "children": [{"label": "dup", "value": 11}]},
            {"label": "dup", "value": 22},
        ],
    }
    assert extract_value(tree, "dup") == 11

    tree["children"].insert(0, {"label": "dup", "value": 33})
    assert extract_value(tree, "dup") == 33

    assert extract_value({"label": "dup", "value": 44, "children": tree["children"]}, "dup") == 44


def test_extract_value_stops_at_zero_valued_match() -> None:
    """A matching node with value 0 is a match; later duplicates are ignored."""

    tree: LabeledNode = {
        "label": "root",
        "value": 1,
        "children": [{"label": "dup", "value": 0}, {"label": "dup", "value": 9}],
    }
    assert extract_value(tree, "dup") == 0


def test_format_confirmed_cases_full_tree_drops_unqueried_labels() -> None:
    """Home care and under-investigation counts never reach the record."""

    record = format_confirmed_cases(_sample_tree())

    assert record == {
        "tests_performed": 100,
        "confirmed_positive": 40,
        "hospitalized": 10,
        "in_facility": 5,
        "awaiting_admission": 3,
        "deceased": 1,
        "discharged": 18,
    }
    assert list(record) == EXPECTED_KEYS


def test_format_confirmed_cases_empty_tree_is_all_zero() -> None:
    """A bare root with value 0 flattens to zeros for every field."""

    record = format_confirmed_cases({"label": "検査実施人数", "value": 0, "children": []})
    assert record == {key: 0 for key in EXPECTED_KEYS}


def test_format_confirmed_cases_without_positive_subtree() -> None:
    """Descendant fields default to 0 while the root still resolves."""

    record = format_confirmed_cases({"label": "検査実施人数", "value": 250})

    assert record["tests_performed"] == 250
    for key in EXPECTED_KEYS[1:]:
        assert record[key] == 0


def test_field_table_covers_the_record_exactly() -> None:
    """Field table, chart keys and the record share one key set."""

    assert [key for key, _ in CONFIRMED_CASES_FIELDS] == EXPECTED_KEYS
    assert list(CHART_KEYS) == EXPECTED_KEYS
    labels = {label for _, label in CONFIRMED_CASES_FIELDS}
    assert "自宅療養" not in labels
    assert "調査中" not in labels


def test_to_chart_record_uses_chart_spelling() -> None:
    """Confirmed positive is charted as 陽性者数, not the source label."""

    chart = to_chart_record(format_confirmed_cases(_sample_tree()))

    assert chart["陽性者数"] == 40
    assert "陽性患者数" not in chart
    assert list(chart) == [
        "検査実施人数",
        "陽性者数",
        "入院中",
        "宿泊療養施設に入所中",
        "入院調整中",
        "死亡",
        "退院",
    ]


def test_extract_value_treats_null_children_as_leaf() -> None:
    """`children: None` behaves like a missing subtree."""

    tree: LabeledNode = {
        "label": "検査実施人数",
        "value": 12,
        "children": [{"label": "陽性患者数", "value": 4, "children": None}],
    }

    assert extract_value(tree, "死亡") == 0
    assert extract_value({"label": "検査実施人数", "value": 1, "children": None}, "入院中") == 0
    assert format_confirmed_cases(tree)["confirmed_positive"] == 4


def test_extract_value_searches_past_three_levels() -> None:
    """Labels nested well below the usual depth are still found."""

    leaf: LabeledNode = {"label": "死亡", "value": 7}
    node = leaf
    for depth in range(7, 0, -1):
        node = {
            "label": f"level-{depth}",
            "value": depth,
            "children": [{"label": f"sibling-{depth}", "value": 0}, node],
        }

    assert extract_value(node, "死亡") == 7
    assert extract_value(node, "level-5") == 5
    assert format_confirmed_cases(node)["deceased"] == 7
