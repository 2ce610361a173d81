"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested ledger entry does not exist."""


class StorageError(DomainError):
    """Persisted ledger could not be read or written."""


def transaction_not_found(index: int, count: int) -> str:
    """Return message for an out-of-range transaction index."""
    if count == 0:
        return f"Transaction {index} not found (the ledger is empty)"
    return f"Transaction {index} not found (valid IDs are 0 to {count - 1})"


def invalid_date_range(start, end) -> str:
    """Return message when a range ends before it starts."""
    return f"End date {end} is before start date {start}"
