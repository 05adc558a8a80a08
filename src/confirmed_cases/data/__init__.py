"""Data structures and loaders for the dashboard summary tree."""

from confirmed_cases.data.case_tree import LabeledNode, iter_case_nodes
from confirmed_cases.data.loader import CaseTreeError, load_case_tree, parse_case_tree

__all__ = [
    "LabeledNode",
    "iter_case_nodes",
    "CaseTreeError",
    "load_case_tree",
    "parse_case_tree",
]
