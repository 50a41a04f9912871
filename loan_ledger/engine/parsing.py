"""Parsing of raw form strings into engine values.

All parsers are lenient: malformed input yields ``None`` rather than an
exception, so callers can treat "not parseable yet" the same as "empty".
"""

import re
from datetime import date
from decimal import Decimal, InvalidOperation

_NON_DIGITS = re.compile(r"\D")
_GROUPING = re.compile(r"[\s_']")


def digits_only(text: str | None) -> str:
    """Strip every non-digit character from ``text``."""
    if not text:
        return ""
    return _NON_DIGITS.sub("", text)


def parse_amount(text: str | None) -> int | None:
    """Parse a digit-grouped amount such as ``"5 000 000"``.

    Separators of any kind are dropped before interpretation.

    Returns
    -------
    int | None
        The amount in the smallest currency unit, or None when the
        input contains no digits.
    """
    digits = digits_only(text)
    if not digits:
        return None
    return int(digits)


def parse_signed_amount(text: str | None) -> int | None:
    """Parse an amount, keeping a leading minus sign.

    Used where a negative value must be detected and refused rather than
    silently turned positive by separator stripping.
    """
    if text is None:
        return None
    stripped = text.strip()
    amount = parse_amount(stripped)
    if amount is None:
        return None
    return -amount if stripped.startswith("-") else amount


def parse_decimal(text: str | None) -> Decimal | None:
    """Parse a decimal such as ``"3.5"``, ``"3,5"`` or ``"3.5 %"``.

    Grouping spaces and a trailing percent sign are ignored. Returns None
    for blank, non-numeric or non-finite input.
    """
    if text is None:
        return None
    cleaned = _GROUPING.sub("", text.strip().removesuffix("%")).replace(",", ".")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def parse_date(text: str | None) -> date | None:
    """Parse an ISO calendar date (``YYYY-MM-DD``)."""
    if not text or not text.strip():
        return None
    try:
        return date.fromisoformat(text.strip())
    except ValueError:
        return None
