"""Domain model entities for cashii.

A ``Transaction`` is a template: one-time transactions are their own single
occurrence, recurring ones expand into one-time copies pinned to concrete
dates. Occurrences and statement rows are never stored.
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import date as Date
from decimal import Decimal
from functools import cmp_to_key
from typing import Optional

from cashii.domain.recurrence import occurrence_dates
from cashii.domain.trigger import Trigger


@dataclass(frozen=True)
class Transaction:
    """A financial movement, possibly recurring.

    ``date`` and ``amount`` are only unset for entries recovered from a
    damaged ledger file; such entries never produce occurrences.
    """

    memo: Optional[str] = None
    amount: Optional[Decimal] = None
    date: Optional[Date] = None
    trigger: Trigger = Trigger.ONCE

    @property
    def is_complete(self) -> bool:
        return self.date is not None and self.amount is not None

    def expand(self, start: Date, end: Date) -> list["Transaction"]:
        """Get every occurrence inside the closed range ``[start, end]``.

        Args:
            start: First day of the range
            end: Last day of the range, occurrences on it are included

        Returns:
            One-time transactions in date order
        """
        if not self.is_complete:
            return []
        if self.trigger is Trigger.ONCE:
            return [self] if start <= self.date <= end else []
        return [
            self.collapse(day)
            for day in occurrence_dates(self.date, self.trigger, start=start, end=end)
        ]

    def expand_before(self, cutoff: Date) -> list["Transaction"]:
        """Get every occurrence strictly before ``cutoff``."""
        if not self.is_complete:
            return []
        if self.trigger is Trigger.ONCE:
            return [self] if self.date < cutoff else []
        return [
            self.collapse(day)
            for day in occurrence_dates(
                self.date, self.trigger, end=cutoff, include_end=False
            )
        ]

    def collapse(self, date: Date) -> "Transaction":
        """Clone into a one-time transaction on a new date."""
        return dataclasses.replace(self, date=date, trigger=Trigger.ONCE)


@dataclass(frozen=True)
class AccountRecord:
    """One statement line: an occurrence and the balance right after it."""

    transaction: Transaction
    running_total: Decimal


@dataclass
class Ledger:
    """The persisted collection of transaction templates."""

    transactions: list[Transaction] = field(default_factory=list)


def compare(a: Transaction, b: Transaction) -> int:
    """Order by date ascending, then amount descending.

    Undated transactions sort last and missing amounts count as zero.
    """
    if a.date != b.date:
        if a.date is None:
            return 1
        if b.date is None:
            return -1
        return -1 if a.date < b.date else 1

    a_amount = a.amount if a.amount is not None else Decimal(0)
    b_amount = b.amount if b.amount is not None else Decimal(0)
    if a_amount > b_amount:
        return -1
    if a_amount < b_amount:
        return 1
    return 0


def sort_transactions(transactions: list[Transaction]) -> list[Transaction]:
    """Return a stably sorted copy using ``compare``."""
    return sorted(transactions, key=cmp_to_key(compare))
