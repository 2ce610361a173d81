"""Abstract storage interface."""

from abc import ABC, abstractmethod

from cashii.domain.entities import Ledger


class LedgerStorage(ABC):
    """Abstract storage provider for a ledger."""

    @abstractmethod
    def load(self) -> Ledger:
        """Load the ledger. A missing store yields an empty ledger."""
        pass

    @abstractmethod
    def save(self, ledger: Ledger) -> None:
        """Overwrite the store with the full ledger."""
        pass

    def close(self) -> None:
        """Release any open resources."""
        pass
