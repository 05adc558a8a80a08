"""Constant enumerations for configuration options."""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class ConfigOption(NamedTuple):
    """Metadata for a configuration option."""

    value: str
    description: str
    default: bool = False


class KeyStyle(Enum):
    """Key spelling used when exporting a flattened record."""

    PYTHON = ConfigOption("python", "snake_case field names", True)
    CHART = ConfigOption("chart", "Japanese keys expected by the chart components")


class LogLevel(Enum):
    """Logging level options."""

    DEBUG = ConfigOption("DEBUG", "Verbose debug logging")
    INFO = ConfigOption("INFO", "Standard info logging", True)
    WARNING = ConfigOption("WARNING", "Warnings only")
    ERROR = ConfigOption("ERROR", "Errors only")


__all__ = [
    "ConfigOption",
    "KeyStyle",
    "LogLevel",
]
