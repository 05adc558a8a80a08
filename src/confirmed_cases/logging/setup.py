"""Logging setup utilities."""
from __future__ import annotations

import logging

from confirmed_cases.config.schema import LoggingConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILE_NAME = "run.log"


def configure_logging(cfg: LoggingConfig) -> None:
    """Send records to stderr and to `<log_dir>/run.log` at the configured level.

    Args:
        cfg: Logging configuration.
    """
    fmt = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)

    cfg.log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(cfg.log_dir / LOG_FILE_NAME, encoding="utf-8")
    file_handler.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(cfg.level.value.value)  # LogLevel -> ConfigOption -> str
    root.handlers = [stream_handler, file_handler]


__all__ = ["LOG_FORMAT", "LOG_FILE_NAME", "configure_logging"]
