"""Custom exception hierarchy for loan-ledger."""


class LoanLedgerError(Exception):
    """Base exception for all loan-ledger errors."""


class EntityNotFoundError(LoanLedgerError):
    """Raised when a referenced entity does not exist."""


class LoanNotFoundError(EntityNotFoundError):
    """Raised when a loan id is not present in the ledger."""


class DuplicateLoanError(LoanLedgerError):
    """Raised when a loan id is added to the ledger twice."""


class InvalidEntityStateError(LoanLedgerError):
    """Raised when an entity is in an invalid state for the operation."""


class InvalidStatusTransitionError(InvalidEntityStateError):
    """Raised when a loan status change is not allowed."""


class RejectedOperationError(LoanLedgerError):
    """Raised when an operation is refused and the ledger is left unchanged."""


class IncompleteDraftError(RejectedOperationError):
    """Raised when a loan draft misses required fields."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing or invalid fields: {', '.join(self.fields)}")


class PaymentRejectedError(RejectedOperationError):
    """Raised when a payment cannot be recorded."""


class ConfigurationError(LoanLedgerError):
    """Raised when configuration is invalid or missing."""


class NotificationError(LoanLedgerError):
    """Raised when a notifier fails to deliver a notification."""
