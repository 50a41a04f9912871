"""Loan and payment models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from loan_ledger.models.enums import LoanStatus, PaymentKind


@dataclass(frozen=True)
class Payment:
    """One recorded receipt of funds against a loan."""

    payment_id: str
    amount: int  # Smallest currency unit
    paid_on: date
    kind: PaymentKind  # User-asserted label


@dataclass(frozen=True)
class Loan:
    """Loan record.

    Instances are immutable; every mutation produces a new ``Loan`` which
    replaces the previous one in the ledger.
    """

    loan_id: str
    borrower_name: str
    borrower_contact: str
    lender_contact: str
    principal: int  # Smallest currency unit
    interest_rate: Decimal  # Percentage (e.g., 3.5 for 3.5%)
    interest_amount: int
    start_date: date
    end_date: date
    status: LoanStatus = LoanStatus.ACTIVE
    monthly_payment: int | None = None
    usdt_amount: Decimal | None = None
    usdt_rate: Decimal | None = None
    crypto_tx_ref: str | None = None
    payments: tuple[Payment, ...] = ()
    total_paid: int = 0
    remaining_amount: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def total_due(self) -> int:
        """Principal plus interest."""
        return self.principal + self.interest_amount

    @property
    def is_completed(self) -> bool:
        return self.status == LoanStatus.COMPLETED
