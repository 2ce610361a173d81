"""Ledger domain service."""

from __future__ import annotations

import logging
from calendar import monthrange
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from cashii.domain.account import Account
from cashii.domain.entities import AccountRecord, Ledger, Transaction
from cashii.domain.errors import (
    NotFoundError,
    ValidationError,
    invalid_date_range,
    transaction_not_found,
)
from cashii.domain.trigger import Trigger

if TYPE_CHECKING:
    from cashii.storage.base import LedgerStorage

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for managing the transactions of one ledger."""

    def __init__(self, storage: LedgerStorage):
        """Initialize ledger service.

        Args:
            storage: Storage provider the ledger is loaded from and saved to
        """
        self.storage = storage
        self._ledger: Optional[Ledger] = None

    @property
    def ledger(self) -> Ledger:
        """The loaded ledger, read from storage on first access."""
        if self._ledger is None:
            self.load()
        return self._ledger

    def load(self) -> Ledger:
        """(Re)load the ledger from storage."""
        self._ledger = self.storage.load()
        return self._ledger

    def save(self) -> None:
        """Write the ledger back to storage."""
        self.storage.save(self.ledger)

    def add_transaction(
        self,
        memo: Optional[str],
        amount: Decimal,
        date: date,
        trigger: Trigger = Trigger.ONCE,
    ) -> tuple[int, Transaction]:
        """Append a transaction and save.

        Args:
            memo: Optional label
            amount: Signed amount, positive for inflows
            date: First occurrence
            trigger: Recurrence kind

        Returns:
            Tuple of (transaction ID, transaction)

        Raises:
            ValidationError: If amount is not finite
        """
        if not amount.is_finite():
            raise ValidationError(f"Amount must be a finite number, got {amount}")

        transaction = Transaction(memo=memo, amount=amount, date=date, trigger=trigger)
        transactions = self.ledger.transactions
        transactions.append(transaction)
        try:
            self.save()
        except Exception:
            transactions.pop()
            raise
        index = len(transactions) - 1
        logger.debug("Added transaction %d: %r", index, transaction)
        return index, transaction

    def transfer(
        self,
        memo: Optional[str],
        amount: Decimal,
        date: date,
        trigger: Trigger = Trigger.ONCE,
        scalar: int = 1,
    ) -> tuple[int, Transaction]:
        """Record money coming in (``scalar=1``) or going out (``scalar=-1``).

        The sign of ``amount`` is ignored; the direction comes from ``scalar``.
        """
        return self.add_transaction(memo, abs(amount) * scalar, date, trigger)

    def remove_transaction(self, index: int) -> Transaction:
        """Remove a transaction by ID and save.

        Raises:
            NotFoundError: If no transaction has this ID
        """
        transactions = self.ledger.transactions
        if not 0 <= index < len(transactions):
            raise NotFoundError(transaction_not_found(index, len(transactions)))

        removed = transactions.pop(index)
        try:
            self.save()
        except Exception:
            transactions.insert(index, removed)
            raise
        logger.debug("Removed transaction %d: %r", index, removed)
        return removed

    def list_transactions(self) -> list[Transaction]:
        """List transactions in stored order; the position is the ID."""
        return list(self.ledger.transactions)

    def account(self) -> Account:
        """Snapshot of the ledger for statement queries."""
        return Account(self.ledger.transactions)

    def statement(self, start: date, end: date) -> list[AccountRecord]:
        """Build the statement for ``[start, end]``.

        Raises:
            ValidationError: If end is before start
        """
        if end < start:
            raise ValidationError(invalid_date_range(start, end))
        return self.account().view(start, end)

    def month_statement(self, year: int, month: int) -> list[AccountRecord]:
        """Build the statement for one calendar month."""
        start, end = month_bounds(year, month)
        return self.statement(start, end)

    def balance_before(self, cutoff: date) -> Decimal:
        """Balance carried into ``cutoff``."""
        return self.account().total_before(cutoff)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month.

    Raises:
        ValidationError: If month or year is out of range
    """
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {month}")
    if not 1 <= year <= 9999:
        raise ValidationError(f"Invalid year: {year}")
    return date(year, month, 1), date(year, month, monthrange(year, month)[1])
