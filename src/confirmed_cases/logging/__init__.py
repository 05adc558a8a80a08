"""Logging helpers for the confirmed cases formatter."""

from confirmed_cases.logging.setup import LOG_FORMAT, configure_logging

__all__ = ["LOG_FORMAT", "configure_logging"]
