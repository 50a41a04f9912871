"""Display formatting for ledger amounts."""

from decimal import Decimal

from loan_ledger.engine.parsing import digits_only

MISSING = "-"


def group_thousands(value: int, separator: str = " ") -> str:
    """Group an integer's digits by thousands: ``5000000`` -> ``"5 000 000"``."""
    return f"{value:,}".replace(",", separator)


def format_currency(amount: int | None, suffix: str = "Ar", separator: str = " ") -> str:
    """Render an amount with grouped thousands and a currency suffix."""
    if amount is None:
        return MISSING
    return f"{group_thousands(amount, separator)} {suffix}"


def format_amount_input(text: str, separator: str = " ") -> str:
    """Normalize an amount while it is being typed.

    Non-digits are dropped and the remaining digits regrouped, so
    ``"5000a000"`` becomes ``"5 000 000"``.
    """
    digits = digits_only(text)
    if not digits:
        return ""
    return group_thousands(int(digits), separator)


def format_usdt(amount: Decimal | None) -> str:
    """Render a USDT amount with two decimals."""
    if amount is None:
        return MISSING
    return f"{amount:.2f} USDT"
