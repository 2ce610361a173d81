"""Mapper functions to convert between domain entities and stored records.

Loading is lenient: each field is validated on its own and a bad field is
dropped (or, for the trigger, defaulted to ONCE) instead of failing the whole
ledger.
"""

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from dateutil import parser as date_parser

from cashii.domain.entities import Ledger, Transaction
from cashii.domain.trigger import Trigger
from cashii.storage.models import TransactionRow

logger = logging.getLogger(__name__)


def _parse_amount(value: Any) -> Optional[Decimal]:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return amount if amount.is_finite() else None


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date_parser.isoparse(value).date()
    except (ValueError, OverflowError):
        return None


def transaction_from_dict(data: dict[str, Any]) -> Transaction:
    """Build a transaction from a stored mapping, dropping invalid fields."""
    memo = data.get("memo")
    if memo is not None and not isinstance(memo, str):
        logger.warning("Dropping non-string memo %r", memo)
        memo = None

    amount = _parse_amount(data.get("amount"))
    if amount is None and data.get("amount") is not None:
        logger.warning("Dropping invalid amount %r", data.get("amount"))

    txn_date = _parse_date(data.get("date"))
    if txn_date is None and data.get("date") is not None:
        logger.warning("Dropping invalid date %r", data.get("date"))

    trigger = Trigger.parse(data.get("trigger"))
    if "trigger" in data and trigger.value != data["trigger"]:
        logger.warning("Unknown trigger %r, using ONCE", data["trigger"])

    return Transaction(memo=memo, amount=amount, date=txn_date, trigger=trigger)


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    """Convert a transaction to a JSON-ready mapping, omitting unset fields."""
    data: dict[str, Any] = {}
    if transaction.memo is not None:
        data["memo"] = transaction.memo
    if transaction.amount is not None:
        data["amount"] = transaction.amount
    if transaction.date is not None:
        data["date"] = transaction.date.isoformat()
    data["trigger"] = transaction.trigger.value
    return data


def ledger_from_dict(data: Any) -> Ledger:
    """Build a ledger from a stored document."""
    if not isinstance(data, dict):
        logger.warning("Ledger document is not an object, starting empty")
        return Ledger()

    entries = data.get("transactions", [])
    if not isinstance(entries, list):
        logger.warning("Ledger 'transactions' is not a list, starting empty")
        return Ledger()

    transactions = []
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning("Skipping transaction %d: not an object", position)
            continue
        transactions.append(transaction_from_dict(entry))
    return Ledger(transactions=transactions)


def ledger_to_dict(ledger: Ledger) -> dict[str, Any]:
    """Convert a ledger to a JSON-ready document."""
    return {"transactions": [transaction_to_dict(t) for t in ledger.transactions]}


def transaction_row_to_domain(row: TransactionRow) -> Transaction:
    """Convert SQLAlchemy TransactionRow model to domain Transaction entity."""
    return Transaction(
        memo=row.memo,
        amount=Decimal(row.amount) if row.amount is not None else None,
        date=row.date,
        trigger=Trigger.parse(row.trigger),
    )


def transaction_to_row(transaction: Transaction, position: int) -> TransactionRow:
    """Convert domain Transaction entity to SQLAlchemy TransactionRow model."""
    return TransactionRow(
        position=position,
        memo=transaction.memo,
        amount=str(transaction.amount) if transaction.amount is not None else None,
        date=transaction.date,
        trigger=transaction.trigger.value,
    )
