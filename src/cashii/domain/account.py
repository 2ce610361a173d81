"""Statement construction over a set of transaction templates."""

from datetime import date
from decimal import Decimal
from typing import Iterable

from cashii.domain.entities import AccountRecord, Transaction, sort_transactions


class Account:
    """Running-balance view over a collection of transactions."""

    def __init__(self, transactions: Iterable[Transaction] = ()):
        """Initialize account.

        Args:
            transactions: Transaction templates; the account keeps its own
                snapshot so later changes to the source do not leak in
        """
        self.transactions: tuple[Transaction, ...] = tuple(transactions)

    def view(self, start: date, end: date) -> list[AccountRecord]:
        """Build the statement for the closed range ``[start, end]``.

        The running total is seeded with the balance carried in from before
        ``start``.

        Args:
            start: First day of the statement
            end: Last day of the statement

        Returns:
            Records sorted by date ascending, then amount descending
        """
        occurrences: list[Transaction] = []
        for transaction in self.transactions:
            occurrences.extend(transaction.expand(start, end))

        total = self.total_before(start)
        records = []
        for occurrence in sort_transactions(occurrences):
            total += occurrence.amount
            records.append(AccountRecord(transaction=occurrence, running_total=total))
        return records

    def total_before(self, cutoff: date) -> Decimal:
        """Sum every occurrence strictly before ``cutoff``."""
        total = Decimal(0)
        for transaction in self.transactions:
            for occurrence in transaction.expand_before(cutoff):
                total += occurrence.amount
        return total
