"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from inventrack.domain.exceptions import StorageError
from inventrack.domain.repository.unit_of_work import UnitOfWorkFactory
from inventrack.infrastructure.config import settings
from inventrack.infrastructure.persistence.json_store import JsonStore
from inventrack.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def json_store(path: Path | None = None) -> JsonStore:
    path = path or settings.store_path
    try:
        return JsonStore(path, lock_timeout=settings.LOCK_TIMEOUT)
    except OSError as exc:
        raise StorageError(f"Could not open store at {path}", exc) from exc


def unit_of_work_factory(store: JsonStore | None = None) -> UnitOfWorkFactory:
    """Return a factory producing units of work that share one store.

    Units from one factory share the store's thread lock. Units from
    other factories or processes on the same file wait on its file lock.
    """
    store = store or json_store()
    return lambda: JsonUnitOfWork(store)
