"""Storage layer for cashii application."""

from cashii.storage.base import LedgerStorage
from cashii.storage.factories import create_storage

__all__ = ["LedgerStorage", "create_storage"]
