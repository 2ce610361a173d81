"""Domain layer for cashii application."""

from cashii.domain.trigger import Trigger
from cashii.domain.entities import AccountRecord, Ledger, Transaction, compare
from cashii.domain.account import Account
from cashii.domain.ledger import LedgerService

__all__ = [
    "Trigger",
    "Transaction",
    "AccountRecord",
    "Ledger",
    "compare",
    "Account",
    "LedgerService",
]
