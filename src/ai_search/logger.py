"""
Logger Configuration Module

Handles logging setup for search pipeline runs.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def create_logger(log_dir: str = "logs", level: int = logging.INFO) -> logging.Logger:
    # Create logs directory if it doesn't exist
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    # Package logger; module loggers propagate to it
    pipeline_logger = logging.getLogger("ai_search")
    pipeline_logger.setLevel(level)

    file_handler = logging.FileHandler(
        Path(log_dir) / "ai_search.log", encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pipeline_logger.addHandler(file_handler)

    return pipeline_logger


pipeline_logger: logging.Logger | None = None


def setup_logging(log_dir: str = "logs", level: int = logging.INFO) -> logging.Logger:
    global pipeline_logger
    if pipeline_logger is None:
        pipeline_logger = create_logger(log_dir, level)
    return pipeline_logger


def add_console_handler(level: int = logging.WARNING) -> logging.Handler:
    """Echo pipeline failures to stderr; returns the existing handler if already added."""
    pipeline_logger = logging.getLogger("ai_search")
    for handler in pipeline_logger.handlers:
        if getattr(handler, "console", False):
            return handler

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.console = True
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    pipeline_logger.addHandler(console_handler)
    return console_handler
