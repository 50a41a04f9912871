"""Domain models for the loan ledger."""

from loan_ledger.models.base import Event
from loan_ledger.models.draft import DerivedFields, LoanDraft, PaymentDraft
from loan_ledger.models.enums import LoanStatus, NotificationKind, PaymentKind
from loan_ledger.models.loan import Loan, Payment

__all__ = [
    "DerivedFields",
    "Event",
    "Loan",
    "LoanDraft",
    "LoanStatus",
    "NotificationKind",
    "Payment",
    "PaymentDraft",
    "PaymentKind",
]
