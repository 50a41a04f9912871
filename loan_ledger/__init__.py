"""loan-ledger: loan bookkeeping engine.

Usage::

    from loan_ledger import LedgerService, LoanDraft, PaymentDraft

    service = LedgerService()
    preview = service.preview(LoanDraft(amount="5 000 000", interest_rate="5"))
    loan = service.create_loan(draft)
    loan = service.record_payment(loan.loan_id, PaymentDraft(amount="875 000", date="2024-02-01"))
"""

from loan_ledger.config import LedgerConfig
from loan_ledger.models import (
    DerivedFields,
    Loan,
    LoanDraft,
    LoanStatus,
    NotificationKind,
    Payment,
    PaymentDraft,
    PaymentKind,
)
from loan_ledger.service import LedgerService
from loan_ledger.store import LoanLedger

__all__ = [
    "DerivedFields",
    "LedgerConfig",
    "LedgerService",
    "Loan",
    "LoanDraft",
    "LoanLedger",
    "LoanStatus",
    "NotificationKind",
    "Payment",
    "PaymentDraft",
    "PaymentKind",
]
