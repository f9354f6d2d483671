"""Application settings, read from the environment (and a local ``.env``)."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings:
    DATA_DIR: Path = Path(os.getenv("INVENTRACK_DATA_DIR", str(_DEFAULT_DATA_DIR)))
    STORE_FILE: str = os.getenv("INVENTRACK_STORE_FILE", "inventory.json")
    # Seconds to wait for the store lock; negative waits forever
    LOCK_TIMEOUT: float = float(os.getenv("INVENTRACK_LOCK_TIMEOUT", "30"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")  # DEBUG, INFO, WARNING, ERROR

    @property
    def store_path(self) -> Path:
        return Path(self.DATA_DIR) / self.STORE_FILE


settings = Settings()
