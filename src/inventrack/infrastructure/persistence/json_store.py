"""A single JSON document holding products, ledger and ID sequences.

Keeping both collections in one file is what makes a commit atomic: the
whole document is written to a temporary file next to the store and
swapped in with ``os.replace``. Readers see either the old document or
the new one, never a mix.

A unit of work holds the store for as long as it is open. Two locks are
taken: a re-entrant thread lock for units sharing this ``JsonStore``, and
an exclusive lock on ``<store>.lock`` for other stores and other
processes opening the same file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from filelock import FileLock

logger = logging.getLogger(__name__)


def empty_document() -> dict:
    return {
        "sequences": {"product": 0, "transaction": 0},
        "products": [],
        "transactions": [],
    }


class JsonStore:

    def __init__(self, file_path: Path, lock_timeout: float = -1) -> None:
        self._file_path = Path(file_path)
        self.lock = threading.RLock()
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_lock = FileLock(str(self.lock_path), timeout=lock_timeout)
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def lock_path(self) -> Path:
        return self._file_path.with_name(self._file_path.name + ".lock")

    def acquire(self) -> None:
        """Take the thread lock, then the file lock.

        Raises ``filelock.Timeout`` if another holder keeps the file lock
        past the configured timeout; the thread lock is released first.
        """
        self.lock.acquire()
        try:
            self._file_lock.acquire()
        except BaseException:
            self.lock.release()
            raise
        logger.debug("Acquired %s", self.lock_path)

    def release(self) -> None:
        try:
            self._file_lock.release()
        finally:
            self.lock.release()

    def load(self) -> dict:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError("store document must be a JSON object")
        base = empty_document()
        base["sequences"].update(document.get("sequences", {}))
        base["products"] = document.get("products", [])
        base["transactions"] = document.get("transactions", [])
        return base

    def write(self, document: dict) -> None:
        """Atomically replace the store file with *document*."""
        payload = json.dumps(document, indent=2) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self._file_path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        logger.debug("Wrote %d bytes to %s", len(payload), self._file_path)

    def _ensure_file(self) -> None:
        # Re-check under the lock: another process may create it first
        if self._file_path.exists():
            return
        self.acquire()
        try:
            if not self._file_path.exists():
                self.write(empty_document())
        finally:
            self.release()
