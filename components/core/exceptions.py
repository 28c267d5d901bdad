"""Custom exception hierarchy for the ledger."""

from typing import Dict, Optional


class LedgerError(Exception):
    """Base exception for all ledger errors."""


class CustomerNotFoundError(LedgerError):
    """Raised when a referenced customer does not exist."""

    def __init__(self, message: str = "Customer not found") -> None:
        super().__init__(message)


class CustomerDeletionError(LedgerError):
    """Raised when the store fails while deleting a customer."""

    def __init__(self, message: str = "Failed to delete customer") -> None:
        super().__init__(message)


class MissingPayloadError(LedgerError):
    """Raised when an action is called without its required payload field."""


class FormValidationError(LedgerError):
    """Raised when a client-side form fails validation."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None) -> None:
        self.errors = errors
        super().__init__(message or "; ".join(errors.values()))


class LedgerRequestError(LedgerError):
    """Raised by the client when a ledger request fails."""
