"""Application-wide logging configuration."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from inventrack.infrastructure.config import settings


def setup_logging(level: str | None = None) -> None:
    """Install a single rich handler on the root logger.

    Logs go to stderr so command output on stdout stays clean. Calling
    this again replaces the handler instead of stacking a second one.
    """
    log_level_str = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        tracebacks_word_wrap=True,
    )
    root_logger.handlers = [rich_handler]
