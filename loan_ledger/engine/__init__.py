"""Loan ledger calculation engine."""

from loan_ledger.engine.calculator import (
    compute_interest_amount,
    compute_monthly_payment,
    compute_usdt_amount,
    derive,
    months_between,
)
from loan_ledger.engine.mutator import (
    create_loan,
    recompute_balances,
    record_payment,
    update_status,
)
from loan_ledger.engine.parsing import parse_amount, parse_date, parse_decimal

__all__ = [
    "compute_interest_amount",
    "compute_monthly_payment",
    "compute_usdt_amount",
    "create_loan",
    "derive",
    "months_between",
    "parse_amount",
    "parse_date",
    "parse_decimal",
    "recompute_balances",
    "record_payment",
    "update_status",
]
