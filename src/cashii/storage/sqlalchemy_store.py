"""Generic SQLAlchemy storage implementation."""

import logging
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cashii.domain.entities import Ledger
from cashii.domain.errors import StorageError
from cashii.storage.base import LedgerStorage
from cashii.storage.mappers import transaction_row_to_domain, transaction_to_row
from cashii.storage.models import TransactionRow, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyStorage(LedgerStorage):
    """SQLAlchemy-based implementation of LedgerStorage."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not open ledger '{database_url}': {e}") from e
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def close(self) -> None:
        """Close the underlying session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def load(self) -> Ledger:
        """Load all transactions in ledger order."""
        session = self._get_session()
        try:
            rows = session.query(TransactionRow).order_by(TransactionRow.position).all()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read ledger '{self.database_url}': {e}") from e

        logger.debug("Loaded %d transactions from %s", len(rows), self.database_url)
        return Ledger(transactions=[transaction_row_to_domain(row) for row in rows])

    def save(self, ledger: Ledger) -> None:
        """Replace every stored transaction in one database transaction."""
        session = self._get_session()
        try:
            session.execute(delete(TransactionRow))
            session.add_all(
                transaction_to_row(transaction, position)
                for position, transaction in enumerate(ledger.transactions)
            )
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StorageError(f"Could not write ledger '{self.database_url}': {e}") from e

        logger.debug("Saved %d transactions to %s", len(ledger.transactions), self.database_url)
