"""In-memory store for loan records."""

from loan_ledger.store.ledger import LoanLedger

__all__ = ["LoanLedger"]
