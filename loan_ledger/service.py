"""Ledger service: the entry point a presentation layer talks to."""

from __future__ import annotations

import logging
from datetime import date

from loan_ledger.config import LedgerConfig
from loan_ledger.engine import calculator, mutator
from loan_ledger.exceptions import (
    InvalidStatusTransitionError,
    LoanNotFoundError,
    PaymentRejectedError,
    RejectedOperationError,
)
from loan_ledger.formatting import group_thousands
from loan_ledger.models.draft import DerivedFields, LoanDraft, PaymentDraft
from loan_ledger.models.enums import LoanStatus, NotificationKind, PaymentKind
from loan_ledger.models.loan import Loan, Payment
from loan_ledger.notifications import NotificationDispatcher, create_dispatcher
from loan_ledger.store.ledger import LoanLedger

logger = logging.getLogger(__name__)


class LedgerService:
    """Create loans, record payments and send notifications.

    All state lives in ``self.ledger``. Each operation either replaces one
    record completely or leaves the ledger untouched; notifications are
    dispatched afterwards and never affect the outcome.
    """

    def __init__(
        self,
        ledger: LoanLedger | None = None,
        dispatcher: NotificationDispatcher | None = None,
        config: LedgerConfig | None = None,
    ) -> None:
        self.config = config or LedgerConfig()
        self.ledger = ledger if ledger is not None else LoanLedger()
        self.dispatcher = dispatcher or create_dispatcher(self.config)

    def preview(self, draft: LoanDraft) -> DerivedFields:
        """Derived values for a loan draft, for display while typing."""
        return calculator.derive(draft)

    def create_loan(self, draft: LoanDraft) -> Loan:
        """Create a loan from a confirmed draft and add it to the ledger.

        Raises
        ------
        IncompleteDraftError
            When required fields are missing; the ledger is unchanged.
        """
        try:
            loan = mutator.create_loan(draft, self.preview(draft))
        except RejectedOperationError as exc:
            logger.warning("Loan creation rejected: %s", exc)
            raise
        self.ledger.add(loan)
        logger.info(
            "Created loan %s for %s: principal=%d interest=%d",
            loan.loan_id,
            loan.borrower_name,
            loan.principal,
            loan.interest_amount,
            extra={"loan_id": loan.loan_id},
        )
        self.dispatcher.notify(loan, NotificationKind.CREATION)
        return loan

    def record_payment(self, loan_id: str | None, draft: PaymentDraft) -> Loan:
        """Record a payment against a loan in the ledger.

        Raises
        ------
        PaymentRejectedError
            When no loan is selected or the payment input is invalid; the
            ledger is unchanged.
        """
        try:
            loan = self._selected(loan_id)
            updated = mutator.record_payment(loan, draft.amount, draft.date, draft.kind)
        except PaymentRejectedError as exc:
            logger.warning("Payment rejected for loan %s: %s", loan_id, exc)
            raise
        self.ledger.replace(updated)
        logger.info(
            "Recorded payment on loan %s: paid=%d remaining=%d status=%s",
            updated.loan_id,
            updated.total_paid,
            updated.remaining_amount,
            updated.status.value,
            extra={"loan_id": updated.loan_id},
        )
        return updated

    def send_reminder(self, loan_id: str) -> None:
        """Dispatch a payment reminder for a loan."""
        loan = self.ledger.get(loan_id)
        self.dispatcher.notify(loan, NotificationKind.REMINDER)

    def update_status(self, loan_id: str, status: LoanStatus | str) -> Loan:
        """Apply an externally decided status, e.g. from an overdue check."""
        loan = self.ledger.get(loan_id)
        try:
            updated = mutator.update_status(loan, status)
        except InvalidStatusTransitionError as exc:
            logger.warning("Status update rejected for loan %s: %s", loan_id, exc)
            raise
        if updated is not loan:
            self.ledger.replace(updated)
            logger.info("Loan %s status set to %s", loan_id, updated.status.value)
        return updated

    def payment_draft_for(self, loan_id: str, today: date | None = None) -> PaymentDraft:
        """Payment form prefilled with the monthly payment and today's date."""
        loan = self.ledger.get(loan_id)
        amount = ""
        if loan.monthly_payment is not None:
            amount = group_thousands(loan.monthly_payment, self.config.display.thousands_separator)
        return PaymentDraft(
            amount=amount,
            date=(today or date.today()).isoformat(),
            kind=PaymentKind.FULL.value,
        )

    def payment_history(self, loan_id: str) -> list[Payment]:
        return self.ledger.payment_history(loan_id)

    def search(self, term: str) -> list[Loan]:
        return self.ledger.search(term)

    def summary(self) -> dict[str, int]:
        return self.ledger.summary()

    def close(self) -> None:
        """Wait for pending notifications and close the notifier."""
        self.dispatcher.shutdown(wait=True)

    def _selected(self, loan_id: str | None) -> Loan | None:
        if not loan_id:
            return None
        try:
            return self.ledger.get(loan_id)
        except LoanNotFoundError:
            return None
