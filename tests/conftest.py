"""Shared pytest fixtures for cashii tests."""

from datetime import date
from decimal import Decimal

import pytest

from cashii.domain.entities import Transaction
from cashii.domain.ledger import LedgerService
from cashii.domain.trigger import Trigger
from cashii.storage.json_file import JSONFileStorage


@pytest.fixture
def ledger_path(tmp_path):
    """Path to a ledger file that does not exist yet."""
    return tmp_path / "ledger.json"


@pytest.fixture
def json_storage(ledger_path):
    """Create JSON file storage in a temporary directory."""
    return JSONFileStorage(ledger_path)


@pytest.fixture
def ledger_service(json_storage):
    """Create a LedgerService backed by an empty temporary ledger."""
    return LedgerService(json_storage)


@pytest.fixture
def monthly_rent():
    """A monthly outflow of 50.00 anchored on January 15th, 2024."""
    return Transaction(
        memo="Rent",
        amount=Decimal("-50.00"),
        date=date(2024, 1, 15),
        trigger=Trigger.MONTHLY,
    )


@pytest.fixture
def sample_transactions(monthly_rent):
    """A mix of one-time and recurring transactions."""
    return [
        Transaction(memo="Salary", amount=Decimal("1000.00"), date=date(2024, 1, 1), trigger=Trigger.MONTHLY),
        monthly_rent,
        Transaction(memo="Coffee", amount=Decimal("-3.50"), date=date(2024, 1, 2), trigger=Trigger.WEEKLY),
        Transaction(memo="Gift", amount=Decimal("100.00"), date=date(2024, 2, 14)),
        Transaction(memo="Insurance", amount=Decimal("-300.00"), date=date(2023, 6, 1), trigger=Trigger.YEARLY),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
