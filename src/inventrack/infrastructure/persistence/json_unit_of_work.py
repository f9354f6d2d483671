"""Unit of work over a JsonStore.

Entering the unit takes the store locks and loads a private working copy
of the document; the repositories read and write that copy. ``commit()``
writes it back in one atomic file replace. Leaving without committing
drops the working copy.
"""

from __future__ import annotations

import copy
import logging

from filelock import Timeout

from inventrack.domain.exceptions import StorageError
from inventrack.domain.repository.unit_of_work import UnitOfWork
from inventrack.infrastructure.persistence.json_product_repository import JsonProductRepository
from inventrack.infrastructure.persistence.json_store import JsonStore
from inventrack.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonStore) -> None:
        self._store = store
        self._committed: dict = {}
        self._document: dict = {}

    def _begin(self) -> None:
        try:
            self._store.acquire()
        except Timeout as exc:
            raise StorageError(f"Timed out waiting for {self._store.lock_path}", exc) from exc
        try:
            self._committed = self._store.load()
        except (OSError, ValueError) as exc:
            self._store.release()
            raise StorageError(f"Could not read {self._store.file_path}", exc) from exc
        self._reset_working_copy()

    def _end(self) -> None:
        self._store.release()

    def commit(self) -> None:
        try:
            self._store.write(self._document)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Commit to %s failed, rolling back: %s", self._store.file_path, exc)
            self.rollback()
            raise StorageError(f"Could not write {self._store.file_path}", exc) from exc
        self._committed = copy.deepcopy(self._document)

    def rollback(self) -> None:
        self._reset_working_copy()

    def _reset_working_copy(self) -> None:
        self._document = copy.deepcopy(self._committed)
        self.products = JsonProductRepository(self._document)
        self.transactions = JsonTransactionRepository(self._document)
