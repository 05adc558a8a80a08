"""Loader for the dashboard summary tree."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from confirmed_cases.data.case_tree import LabeledNode, iter_case_nodes

logger = logging.getLogger(__name__)


class CaseTreeError(ValueError):
    """Raised when the dashboard data does not hold a well-typed summary tree."""


class _CaseNodeModel(BaseModel):
    """Validation model for one node; `attr` is the key used by data.json."""

    model_config = ConfigDict(extra="ignore")

    label: StrictStr = Field(..., validation_alias=AliasChoices("attr", "label"))
    value: StrictInt = Field(..., ge=0)
    children: list[_CaseNodeModel] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def _none_as_empty(cls, v: object) -> object:
        return [] if v is None else v


def _to_labeled_node(model: _CaseNodeModel) -> LabeledNode:
    return {
        "label": model.label,
        "value": model.value,
        "children": [_to_labeled_node(child) for child in model.children],
    }


def parse_case_tree(raw: Any, *, summary_key: Optional[str] = "main_summary") -> LabeledNode:
    """Validate decoded JSON and build a `LabeledNode` tree.

    Args:
        raw: Decoded JSON document.
        summary_key: Top-level key holding the tree. When the key is absent the
            document itself is treated as the root node.

    Returns:
        Root `LabeledNode`.

    Raises:
        CaseTreeError: When the document is not a well-typed tree.
    """
    if not isinstance(raw, dict):
        raise CaseTreeError(f"Summary tree must be a JSON object, got {type(raw).__name__}")
    if summary_key and summary_key in raw:
        raw = raw[summary_key]
    try:
        model = _CaseNodeModel.model_validate(raw)
    except ValidationError as exc:
        raise CaseTreeError(f"Invalid summary tree: {exc}") from exc
    return _to_labeled_node(model)


def load_case_tree(path: Path, *, summary_key: Optional[str] = "main_summary") -> LabeledNode:
    """Load the summary tree from a dashboard JSON file.

    Args:
        path: Path to the JSON file (typically `data.json`).
        summary_key: Top-level key holding the tree.

    Returns:
        Root `LabeledNode`.

    Raises:
        FileNotFoundError: When `path` does not exist.
        CaseTreeError: When the file is not valid JSON or not a well-typed tree.
    """
    logger.debug("Loading summary tree from %s", path)
    with path.open("r", encoding="utf-8") as fp:
        try:
            loaded = json.load(fp)
        except json.JSONDecodeError as exc:
            raise CaseTreeError(f"{path} is not valid JSON: {exc}") from exc

    tree = parse_case_tree(loaded, summary_key=summary_key)
    logger.info("Loaded summary tree from %s (%d nodes)", path, len(iter_case_nodes(tree)))
    return tree


__all__ = ["CaseTreeError", "load_case_tree", "parse_case_tree"]
