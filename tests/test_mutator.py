"""Tests for loan creation, payment recording and status updates."""

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal
from typing import Callable

import pytest
from hypothesis import given
from hypothesis import strategies as st

from loan_ledger.engine.mutator import (
    create_loan,
    recompute_balances,
    record_payment,
    update_status,
)
from loan_ledger.exceptions import (
    IncompleteDraftError,
    InvalidStatusTransitionError,
    PaymentRejectedError,
)
from loan_ledger.models import DerivedFields, Loan, LoanDraft, LoanStatus, PaymentKind


class TestCreateLoan:
    """Tests for create_loan."""

    def test_initial_state(self, sample_draft: LoanDraft) -> None:
        now = datetime(2024, 1, 1, 9, 0)
        loan = create_loan(sample_draft, loan_id="loan-1", now=now)

        assert loan.loan_id == "loan-1"
        assert loan.borrower_name == "Jean Dupont"
        assert loan.principal == 5_000_000
        assert loan.interest_rate == Decimal("5")
        assert loan.interest_amount == 250_000
        assert loan.monthly_payment == 875_000
        assert loan.start_date == date(2024, 1, 1)
        assert loan.end_date == date(2024, 7, 1)
        assert loan.status == LoanStatus.ACTIVE
        assert loan.payments == ()
        assert loan.total_paid == 0
        assert loan.remaining_amount == 5_250_000
        assert loan.usdt_rate == Decimal("4900")
        assert loan.usdt_amount == Decimal("1020.41")
        assert loan.crypto_tx_ref == "TX123456789"
        assert loan.created_at == now

    def test_optional_fields_stay_unset(self, sample_draft: LoanDraft) -> None:
        loan = create_loan(replace(sample_draft, usdt_rate="", crypto_tx_ref="  "))

        assert loan.usdt_rate is None
        assert loan.usdt_amount is None
        assert loan.crypto_tx_ref is None

    def test_ids_are_unique(self, sample_draft: LoanDraft) -> None:
        ids = {create_loan(sample_draft).loan_id for _ in range(20)}
        assert len(ids) == 20

    def test_copies_supplied_preview(self, sample_draft: LoanDraft) -> None:
        derived = DerivedFields(interest_amount=250_000, monthly_payment=875_000, months=6)
        loan = create_loan(sample_draft, derived)

        assert loan.monthly_payment == 875_000

    def test_same_month_range_leaves_monthly_payment_unset(self, sample_draft: LoanDraft) -> None:
        loan = create_loan(replace(sample_draft, end_date="2024-01-20"))

        assert loan.monthly_payment is None
        assert loan.remaining_amount == 5_250_000

    def test_blank_draft_lists_every_required_field(self) -> None:
        with pytest.raises(IncompleteDraftError) as exc_info:
            create_loan(LoanDraft())

        assert exc_info.value.fields == [
            "borrower_name",
            "borrower_contact",
            "lender_contact",
            "amount",
            "interest_rate",
            "start_date",
            "end_date",
        ]

    @pytest.mark.parametrize(
        "field,value",
        [
            ("amount", "abc"),
            ("amount", "0"),
            ("interest_rate", "five"),
            ("interest_rate", "-1"),
            ("start_date", "01/01/2024"),
            ("lender_contact", "   "),
        ],
    )
    def test_invalid_required_field(self, sample_draft: LoanDraft, field: str, value: str) -> None:
        with pytest.raises(IncompleteDraftError) as exc_info:
            create_loan(replace(sample_draft, **{field: value}))

        assert exc_info.value.fields == [field]


class TestRecordPayment:
    """Tests for record_payment."""

    def test_full_repayment_completes_loan(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan()
        assert loan.remaining_amount == 1_050_000

        updated = record_payment(loan, "1 050 000", "2024-02-01", "full")

        assert updated.remaining_amount == 0
        assert updated.total_paid == 1_050_000
        assert updated.status == LoanStatus.COMPLETED
        assert len(updated.payments) == 1

    def test_partial_payment(self, make_loan: Callable[..., Loan]) -> None:
        updated = record_payment(make_loan(), 87_500, date(2024, 2, 1), PaymentKind.FULL)

        assert updated.total_paid == 87_500
        assert updated.remaining_amount == 962_500
        assert updated.status == LoanStatus.ACTIVE

    def test_payment_fields(self, make_loan: Callable[..., Loan]) -> None:
        updated = record_payment(
            make_loan(), "87 500", "2024-02-03", "partial", id_factory=lambda: "pay-1"
        )
        payment = updated.payments[0]

        assert payment.payment_id == "pay-1"
        assert payment.amount == 87_500
        assert payment.paid_on == date(2024, 2, 3)
        assert payment.kind == PaymentKind.PARTIAL

    def test_kind_is_a_label(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan()
        updated = record_payment(loan, loan.monthly_payment, "2024-02-01", "partial")

        assert updated.payments[0].kind == PaymentKind.PARTIAL

    def test_input_loan_untouched(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan()
        record_payment(loan, "1000", "2024-02-01")

        assert loan.payments == ()
        assert loan.total_paid == 0

    def test_overpayment_goes_negative(self, make_loan: Callable[..., Loan]) -> None:
        updated = record_payment(make_loan(), "2 000 000", "2024-02-01")

        assert updated.remaining_amount == -950_000
        assert updated.status == LoanStatus.COMPLETED

    def test_completed_stays_completed(self, make_loan: Callable[..., Loan]) -> None:
        done = record_payment(make_loan(), "1 050 000", "2024-02-01")
        again = record_payment(done, "10", "2024-03-01")

        assert again.status == LoanStatus.COMPLETED
        assert again.remaining_amount == -10

    def test_overdue_loan_completes(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan(status=LoanStatus.OVERDUE)

        assert record_payment(loan, "500", "2024-02-01").status == LoanStatus.OVERDUE
        assert record_payment(loan, "1 050 000", "2024-02-01").status == LoanStatus.COMPLETED

    @pytest.mark.parametrize("amount", ["0", "", "abc", None, "-500", -5, 0, "   "])
    def test_invalid_amount_rejected(self, make_loan: Callable[..., Loan], amount: object) -> None:
        loan = make_loan()
        with pytest.raises(PaymentRejectedError):
            record_payment(loan, amount, "2024-02-01")

        assert loan.payments == ()

    @pytest.mark.parametrize(
        "amount",
        [0.5, Decimal("0.9"), 1000.25, Decimal("NaN"), Decimal("sNaN"), float("inf"), True],
    )
    def test_fractional_or_non_finite_amount_rejected(
        self, make_loan: Callable[..., Loan], amount: object
    ) -> None:
        with pytest.raises(PaymentRejectedError):
            record_payment(make_loan(), amount, date(2024, 2, 1))

    @pytest.mark.parametrize("amount", [Decimal("87500"), 87500.0])
    def test_integral_numeric_amount_accepted(
        self, make_loan: Callable[..., Loan], amount: object
    ) -> None:
        updated = record_payment(make_loan(), amount, date(2024, 2, 1))

        assert updated.payments[0].amount == 87_500
        assert isinstance(updated.payments[0].amount, int)

    def test_no_loan_selected(self) -> None:
        with pytest.raises(PaymentRejectedError, match="No loan selected"):
            record_payment(None, "1000", "2024-02-01")

    def test_invalid_date_rejected(self, make_loan: Callable[..., Loan]) -> None:
        with pytest.raises(PaymentRejectedError):
            record_payment(make_loan(), "1000", "not a date")

    def test_unknown_kind_rejected(self, make_loan: Callable[..., Loan]) -> None:
        with pytest.raises(PaymentRejectedError):
            record_payment(make_loan(), "1000", "2024-02-01", "weekly")

    @given(
        amounts=st.lists(st.integers(min_value=1, max_value=2_000_000), min_size=1, max_size=15),
        data=st.data(),
    )
    def test_accumulation_is_order_independent(self, amounts: list[int], data: st.DataObject) -> None:
        base = Loan(
            loan_id="loan-prop",
            borrower_name="A",
            borrower_contact="a@example.com",
            lender_contact="l@example.com",
            principal=1_000_000,
            interest_rate=Decimal("5"),
            interest_amount=50_000,
            start_date=date(2024, 1, 1),
            end_date=date(2025, 1, 1),
            remaining_amount=1_050_000,
        )
        ordered = data.draw(st.permutations(amounts))

        loan = base
        completed_seen = False
        for amount in ordered:
            loan = record_payment(loan, amount, date(2024, 2, 1))
            completed_seen = completed_seen or loan.remaining_amount <= 0
            if completed_seen:
                assert loan.status == LoanStatus.COMPLETED

        assert loan.total_paid == sum(amounts)
        assert loan.remaining_amount == base.principal + base.interest_amount - sum(amounts)
        assert [p.amount for p in loan.payments] == list(ordered)


class TestRecomputeBalances:
    """Tests for the full-fold recomputation."""

    def test_recomputes_from_history(self, make_loan: Callable[..., Loan]) -> None:
        loan = record_payment(make_loan(), "50 000", "2024-02-01")
        loan = record_payment(loan, "50 000", "2024-03-01")
        edited = recompute_balances(replace(loan, payments=loan.payments[:1], total_paid=999))

        assert edited.total_paid == 50_000
        assert edited.remaining_amount == 1_000_000

    def test_completion_not_reverted(self, make_loan: Callable[..., Loan]) -> None:
        done = record_payment(make_loan(), "1 050 000", "2024-02-01")
        reverted = recompute_balances(replace(done, payments=()))

        assert reverted.remaining_amount == 1_050_000
        assert reverted.status == LoanStatus.COMPLETED


class TestUpdateStatus:
    """Tests for the external status update."""

    def test_active_to_overdue_and_back(self, make_loan: Callable[..., Loan]) -> None:
        overdue = update_status(make_loan(), "overdue")
        assert overdue.status == LoanStatus.OVERDUE

        active = update_status(overdue, LoanStatus.ACTIVE)
        assert active.status == LoanStatus.ACTIVE

    def test_same_status_is_noop(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan()
        assert update_status(loan, LoanStatus.ACTIVE) is loan

    def test_completed_cannot_reopen(self, make_loan: Callable[..., Loan]) -> None:
        done = record_payment(make_loan(), "1 050 000", "2024-02-01")
        with pytest.raises(InvalidStatusTransitionError):
            update_status(done, LoanStatus.OVERDUE)

    def test_completed_not_set_directly(self, make_loan: Callable[..., Loan]) -> None:
        with pytest.raises(InvalidStatusTransitionError):
            update_status(make_loan(), LoanStatus.COMPLETED)

    def test_unknown_status(self, make_loan: Callable[..., Loan]) -> None:
        with pytest.raises(InvalidStatusTransitionError):
            update_status(make_loan(), "late")
