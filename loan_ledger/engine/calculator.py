"""Loan derivation calculator.

Pure functions computing the derived fields of a loan draft:

    interest_amount = round(principal * rate / 100)
    months          = (end.year - start.year) * 12 + (end.month - start.month)
    monthly_payment = round((principal + interest_amount) / months)   if months > 0
    usdt_amount     = round(principal / usdt_rate, 2)                 if usdt_rate

Rounding is half-up on exact decimals. Nothing here raises on partial or
malformed input; values that cannot be computed yet are returned as None.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from functools import lru_cache

from loan_ledger.engine.parsing import parse_amount, parse_date, parse_decimal
from loan_ledger.models.draft import DerivedFields, LoanDraft

HUNDRED = Decimal(100)
CENTS = Decimal("0.01")


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_interest_amount(principal: int, rate: Decimal) -> int:
    """Flat interest over the whole loan term."""
    return round_half_up(Decimal(principal) * Decimal(rate) / HUNDRED)


def months_between(start: date, end: date) -> int:
    """Calendar months between two dates, ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def compute_monthly_payment(principal: int, interest_amount: int, months: int) -> int | None:
    """Equal monthly share of principal plus interest.

    Returns None when ``months`` is not positive (same-month range or end
    before start).
    """
    if months <= 0:
        return None
    return round_half_up(Decimal(principal + interest_amount) / Decimal(months))


def compute_usdt_amount(principal: int, usdt_rate: Decimal | None) -> Decimal | None:
    """USDT equivalent of ``principal`` at ``usdt_rate``, to two places."""
    if usdt_rate is None or usdt_rate <= 0:
        return None
    return (Decimal(principal) / Decimal(usdt_rate)).quantize(CENTS, rounding=ROUND_HALF_UP)


def derive(draft: LoanDraft) -> DerivedFields:
    """Compute the preview values for a loan draft.

    Safe to call on every input change; results are cached by the input
    tuple.
    """
    return _derive(
        draft.amount,
        draft.interest_rate,
        draft.start_date,
        draft.end_date,
        draft.usdt_rate,
    )


@lru_cache(maxsize=512)
def _derive(
    amount: str,
    interest_rate: str,
    start_date: str,
    end_date: str,
    usdt_rate: str,
) -> DerivedFields:
    principal = parse_amount(amount)
    rate = parse_decimal(interest_rate)
    if rate is not None and rate < 0:
        rate = None

    usdt_amount = None
    if principal is not None:
        usdt_amount = compute_usdt_amount(principal, parse_decimal(usdt_rate))

    if principal is None or rate is None:
        return DerivedFields(usdt_amount=usdt_amount)

    interest_amount = compute_interest_amount(principal, rate)

    start = parse_date(start_date)
    end = parse_date(end_date)
    months = None
    monthly_payment = None
    if start is not None and end is not None:
        months = months_between(start, end)
        monthly_payment = compute_monthly_payment(principal, interest_amount, months)

    return DerivedFields(
        interest_amount=interest_amount,
        monthly_payment=monthly_payment,
        usdt_amount=usdt_amount,
        months=months,
    )


def clear_cache() -> None:
    """Drop memoized derivations."""
    _derive.cache_clear()
