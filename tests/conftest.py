"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from typing import Any, Callable

import pytest

from loan_ledger.models import Loan, LoanDraft, LoanStatus
from loan_ledger.notifications import NotificationDispatcher
from loan_ledger.service import LedgerService
from loan_ledger.store import LoanLedger

from tests.notifiers import RecordingNotifier


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def notifier() -> RecordingNotifier:
    """Notifier recording events."""
    return RecordingNotifier()


@pytest.fixture
def service(notifier: RecordingNotifier) -> LedgerService:
    """Service with an empty ledger and inline notifications."""
    return LedgerService(
        ledger=LoanLedger(),
        dispatcher=NotificationDispatcher(notifier, background=False),
    )


@pytest.fixture
def sample_draft() -> LoanDraft:
    """Complete loan draft: 5 000 000 at 5% over six months."""
    return LoanDraft(
        borrower_name="Jean Dupont",
        borrower_contact="jean.dupont@email.com",
        lender_contact="preteur@email.com",
        amount="5 000 000",
        interest_rate="5",
        start_date="2024-01-01",
        end_date="2024-07-01",
        usdt_rate="4900",
        crypto_tx_ref="TX123456789",
    )


@pytest.fixture
def make_loan() -> Callable[..., Loan]:
    """Factory for loans with consistent balances."""

    def _make(**overrides: Any) -> Loan:
        fields: dict[str, Any] = {
            "loan_id": "loan-test-001",
            "borrower_name": "Marie Martin",
            "borrower_contact": "marie.martin@email.com",
            "lender_contact": "preteur@email.com",
            "principal": 1_000_000,
            "interest_rate": Decimal("5"),
            "interest_amount": 50_000,
            "start_date": date(2024, 1, 1),
            "end_date": date(2025, 1, 1),
            "status": LoanStatus.ACTIVE,
            "monthly_payment": 87_500,
        }
        fields.update(overrides)
        fields.setdefault(
            "remaining_amount", fields["principal"] + fields["interest_amount"]
        )
        return Loan(**fields)

    return _make
