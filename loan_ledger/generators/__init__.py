"""Synthetic input generators for demos and tests."""

from loan_ledger.generators.loan_draft import LoanDraftGenerator, PaymentDraftGenerator

__all__ = ["LoanDraftGenerator", "PaymentDraftGenerator"]
