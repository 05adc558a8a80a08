"""Configuration schema definitions using Pydantic."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from confirmed_cases.config.constants import KeyStyle, LogLevel


class DataConfig(BaseModel):
    """Location of the dashboard data file."""

    path: Path = Field(..., description="Path to the dashboard JSON file")
    summary_key: Optional[str] = Field(
        "main_summary", description="Top-level key holding the summary tree, or None"
    )


class OutputConfig(BaseModel):
    """Where and how the flattened record is written."""

    path: Optional[Path] = Field(None, description="Destination JSON path, or None to only echo")
    key_style: KeyStyle = Field(KeyStyle.PYTHON, description="Key spelling of the exported record")

    @field_validator("key_style", mode="before")
    @classmethod
    def _coerce_key_style(cls, v: object) -> KeyStyle:
        return _coerce_config_enum(KeyStyle, v)


def _coerce_config_enum(enum_cls: type, value: object):
    """Coerce string or enum value to the given ConfigOption Enum."""

    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:  # type: ignore[attr-defined]
            # member.value is ConfigOption; member.value.value is the string in config
            if getattr(member.value, "value", None) == value or member.name == value:
                return member
    raise ValueError(f"Invalid value {value!r} for enum {enum_cls.__name__}")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    log_dir: Path = Field(Path("./logs"), description="Directory for run.log")

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_log_level(cls, v: object) -> LogLevel:
        return _coerce_config_enum(LogLevel, v)


class AppConfig(BaseModel):
    """Full application configuration."""

    data: DataConfig
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["AppConfig", "DataConfig", "OutputConfig", "LoggingConfig"]
