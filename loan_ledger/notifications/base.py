"""Notifier protocol and notification envelope construction."""

import uuid
from datetime import datetime
from typing import Protocol

from loan_ledger.config import DisplayConfig
from loan_ledger.formatting import format_currency
from loan_ledger.models.base import Event
from loan_ledger.models.enums import NotificationKind
from loan_ledger.models.loan import Loan


class Notifier(Protocol):
    """Destination for loan notifications."""

    def send(self, event: Event) -> None: ...

    def close(self) -> None: ...


def build_notification(
    loan: Loan,
    kind: NotificationKind,
    *,
    source: str = "loan-ledger",
    display: DisplayConfig | None = None,
) -> Event:
    """Wrap a loan notification in the standard event envelope.

    Parameters
    ----------
    loan : Loan
        Loan the notification is about.
    kind : NotificationKind
        ``creation`` or ``reminder``.
    source : str
        Name of the emitting system.
    display : DisplayConfig | None
        Currency formatting for the amounts in the payload.

    Returns
    -------
    Event
        Event with borrower and lender details in ``data``.
    """
    display = display or DisplayConfig()
    kind = NotificationKind(kind)

    def money(amount: int | None) -> str:
        return format_currency(amount, display.currency_suffix, display.thousands_separator)

    return Event(
        event_id=str(uuid.uuid4()),
        event_type=f"loan.{kind.value}",
        event_time=datetime.now(),
        source=source,
        subject=loan.loan_id,
        data={
            "kind": kind.value,
            "borrower": {
                "name": loan.borrower_name,
                "contact": loan.borrower_contact,
                "amount": money(loan.principal),
                "monthly_payment": money(loan.monthly_payment),
                "remaining_amount": money(loan.remaining_amount),
            },
            "lender": {
                "contact": loan.lender_contact,
            },
        },
    )


class NullNotifier:
    """Notifier that discards everything."""

    def send(self, event: Event) -> None:
        pass

    def close(self) -> None:
        pass
