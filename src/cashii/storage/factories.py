"""Storage factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from cashii.storage.base import LedgerStorage
from cashii.storage.json_file import JSONFileStorage
from cashii.storage.sqlalchemy_store import SQLAlchemyStorage

SQLITE_SUFFIXES = {".db", ".sqlite", ".sqlite3"}


def default_ledger_path() -> Path:
    """Return ~/.cashii.json."""
    return Path.home() / ".cashii.json"


def create_storage(ledger_path: Optional[str] = None) -> LedgerStorage:
    """Create a storage provider for a ledger path.

    Args:
        ledger_path: Path to the ledger. If None, checks the CASHII_LEDGER_PATH
            environment variable, then defaults to ~/.cashii.json. Paths ending
            in .db, .sqlite or .sqlite3 are stored in SQLite, anything else
            as a JSON file.

    Returns:
        LedgerStorage instance
    """
    if ledger_path is None:
        ledger_path = os.environ.get("CASHII_LEDGER_PATH")

    path = Path(ledger_path).expanduser() if ledger_path else default_ledger_path()

    if path.suffix.lower() in SQLITE_SUFFIXES:
        return SQLAlchemyStorage(f"sqlite:///{path}")
    return JSONFileStorage(path)
