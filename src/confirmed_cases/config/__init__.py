"""Configuration utilities for the confirmed cases formatter."""

from confirmed_cases.config.loader import load_config
from confirmed_cases.config.schema import AppConfig

__all__ = ["load_config", "AppConfig"]
