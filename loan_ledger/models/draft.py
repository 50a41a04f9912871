"""Presentation-boundary drafts and derived preview values.

Drafts carry raw form input: every field is a string, exactly as typed
(amounts may be digit-grouped, e.g. ``"5 000 000"``). Parsing happens in
``loan_ledger.engine.parsing``.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LoanDraft:
    """Loan form input prior to validation."""

    borrower_name: str = ""
    borrower_contact: str = ""
    lender_contact: str = ""
    amount: str = ""
    interest_rate: str = ""
    start_date: str = ""
    end_date: str = ""
    usdt_rate: str = ""
    crypto_tx_ref: str = ""


@dataclass(frozen=True)
class PaymentDraft:
    """Payment form input prior to validation."""

    amount: str = ""
    date: str = ""
    kind: str = "full"


@dataclass(frozen=True)
class DerivedFields:
    """Values computed from a draft; ``None`` means not yet computable."""

    interest_amount: int | None = None
    monthly_payment: int | None = None
    usdt_amount: Decimal | None = None
    months: int | None = None
