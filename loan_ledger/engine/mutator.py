"""Ledger mutator: loan creation, payment recording and status updates.

Every operation takes a ``Loan`` and returns a new one; the input is never
modified. Failures raise a ``RejectedOperationError`` subclass before any
new state is built, so a rejected call leaves the caller's ledger as it was.

Status machine::

    active  --(remaining <= 0)--> completed   (terminal)
    overdue --(remaining <= 0)--> completed
    active  <--(external update)--> overdue
"""

import uuid
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Callable

from loan_ledger.engine.calculator import derive
from loan_ledger.engine.parsing import parse_amount, parse_date, parse_decimal, parse_signed_amount
from loan_ledger.exceptions import (
    IncompleteDraftError,
    InvalidStatusTransitionError,
    PaymentRejectedError,
)
from loan_ledger.models.draft import DerivedFields, LoanDraft
from loan_ledger.models.enums import LoanStatus, PaymentKind
from loan_ledger.models.loan import Loan, Payment

IdFactory = Callable[[], str]

REQUIRED_TEXT_FIELDS = ("borrower_name", "borrower_contact", "lender_contact")


def new_id() -> str:
    """Generate a fresh, never reused identifier."""
    return str(uuid.uuid4())


def create_loan(
    draft: LoanDraft,
    derived: DerivedFields | None = None,
    *,
    loan_id: str | None = None,
    now: datetime | None = None,
) -> Loan:
    """Build a new active loan from a draft.

    Parameters
    ----------
    draft : LoanDraft
        Raw form input.
    derived : DerivedFields | None
        Last preview computed for the draft. Recomputed when omitted.
    loan_id : str | None
        Identifier to assign; a new UUID when omitted.
    now : datetime | None
        Creation timestamp; current time when omitted.

    Returns
    -------
    Loan
        Loan with no payments, zero paid and the full amount remaining.

    Raises
    ------
    IncompleteDraftError
        When a required field is blank or not parseable.
    """
    missing = [name for name in REQUIRED_TEXT_FIELDS if not getattr(draft, name).strip()]

    principal = parse_amount(draft.amount)
    if principal is None or principal <= 0:
        missing.append("amount")

    rate = parse_decimal(draft.interest_rate)
    if rate is None or rate < 0:
        missing.append("interest_rate")

    start = parse_date(draft.start_date)
    if start is None:
        missing.append("start_date")

    end = parse_date(draft.end_date)
    if end is None:
        missing.append("end_date")

    if missing:
        raise IncompleteDraftError(missing)

    if derived is None:
        derived = derive(draft)
    if derived.interest_amount is None:
        # Principal and rate parsed above, so a stale preview was passed in
        derived = derive(draft)

    usdt_rate = parse_decimal(draft.usdt_rate)
    if usdt_rate is not None and usdt_rate <= 0:
        usdt_rate = None

    interest_amount = derived.interest_amount
    return Loan(
        loan_id=loan_id or new_id(),
        borrower_name=draft.borrower_name.strip(),
        borrower_contact=draft.borrower_contact.strip(),
        lender_contact=draft.lender_contact.strip(),
        principal=principal,
        interest_rate=rate,
        interest_amount=interest_amount,
        start_date=start,
        end_date=end,
        status=LoanStatus.ACTIVE,
        monthly_payment=derived.monthly_payment,
        usdt_amount=derived.usdt_amount if usdt_rate is not None else None,
        usdt_rate=usdt_rate,
        crypto_tx_ref=draft.crypto_tx_ref.strip() or None,
        payments=(),
        total_paid=0,
        remaining_amount=principal + interest_amount,
        created_at=now or datetime.now(),
    )


def recompute_balances(loan: Loan) -> Loan:
    """Recompute total paid, remaining amount and status from history.

    The total is a full fold over ``loan.payments``. The remaining amount
    keeps its sign, so overpayment shows as a negative balance.
    """
    total_paid = sum(payment.amount for payment in loan.payments)
    remaining = loan.total_due - total_paid
    status = LoanStatus.COMPLETED if remaining <= 0 else loan.status
    return replace(loan, total_paid=total_paid, remaining_amount=remaining, status=status)


def record_payment(
    loan: Loan | None,
    amount: int | Decimal | str | None,
    paid_on: date | str | None,
    kind: PaymentKind | str = PaymentKind.FULL,
    *,
    id_factory: IdFactory = new_id,
) -> Loan:
    """Append a payment to ``loan`` and return the updated loan.

    Raises
    ------
    PaymentRejectedError
        When no loan is given, or the amount is missing, non-numeric,
        zero or negative, or the date or kind is not valid.
    """
    if loan is None:
        raise PaymentRejectedError("No loan selected")

    value = _whole_amount(amount)
    if value is None:
        raise PaymentRejectedError("Payment amount is missing or not a whole number")
    if value <= 0:
        raise PaymentRejectedError(f"Payment amount must be positive, got {value}")

    received = parse_date(paid_on) if isinstance(paid_on, str) else paid_on
    if received is None:
        raise PaymentRejectedError("Payment date is missing or invalid")

    try:
        payment_kind = PaymentKind(kind.strip().lower() if isinstance(kind, str) else kind)
    except ValueError:
        raise PaymentRejectedError(f"Unknown payment kind {kind!r}") from None

    payment = Payment(
        payment_id=id_factory(),
        amount=value,
        paid_on=received,
        kind=payment_kind,
    )
    return recompute_balances(replace(loan, payments=loan.payments + (payment,)))


def update_status(loan: Loan, status: LoanStatus | str) -> Loan:
    """Set a loan's status from outside the engine (e.g. an overdue check).

    Only ``active`` and ``overdue`` may be set this way. Completed loans
    cannot be reopened, and completion itself only follows from payments.

    Raises
    ------
    InvalidStatusTransitionError
        When the transition is not allowed.
    """
    try:
        target = LoanStatus(status)
    except ValueError:
        raise InvalidStatusTransitionError(f"Unknown loan status {status!r}") from None

    if loan.status == LoanStatus.COMPLETED:
        raise InvalidStatusTransitionError(f"Loan {loan.loan_id} is completed")
    if target == LoanStatus.COMPLETED:
        raise InvalidStatusTransitionError(
            "Completion is reached by recording payments, not set directly"
        )
    if target == loan.status:
        return loan
    return replace(loan, status=target)


def _whole_amount(amount: object) -> int | None:
    """Payment amount as an integer count of the smallest currency unit.

    Strings go through the grouped-amount parser. Decimals and floats are
    accepted only when finite and integral; anything else is None.
    """
    if isinstance(amount, str):
        return parse_signed_amount(amount)
    if isinstance(amount, bool) or amount is None:
        return None
    if isinstance(amount, int):
        return amount
    if isinstance(amount, (Decimal, float)):
        value = Decimal(amount)
        if not value.is_finite() or value != value.to_integral_value():
            return None
        return int(value)
    return None
