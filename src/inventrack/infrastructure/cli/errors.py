"""Translation of storage failures into CLI errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from inventrack.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors() -> Iterator[None]:
    """Log a StorageError and re-raise it as a ClickException (exit code 1)."""
    try:
        yield
    except StorageError as exc:
        logger.error("Storage failure: %s", exc)
        raise click.ClickException(str(exc)) from exc
