"""Tests for custom exception hierarchy."""

from loan_ledger.exceptions import (
    ConfigurationError,
    DuplicateLoanError,
    EntityNotFoundError,
    IncompleteDraftError,
    InvalidEntityStateError,
    InvalidStatusTransitionError,
    LoanLedgerError,
    LoanNotFoundError,
    NotificationError,
    PaymentRejectedError,
    RejectedOperationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_loan_ledger_error_is_exception(self) -> None:
        assert isinstance(LoanLedgerError("test"), Exception)

    def test_loan_not_found_is_entity_not_found(self) -> None:
        err = LoanNotFoundError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, LoanLedgerError)

    def test_status_transition_is_invalid_state(self) -> None:
        assert isinstance(InvalidStatusTransitionError("test"), InvalidEntityStateError)

    def test_rejections_share_a_base(self) -> None:
        assert isinstance(IncompleteDraftError(["amount"]), RejectedOperationError)
        assert isinstance(PaymentRejectedError("test"), RejectedOperationError)

    def test_other_errors_are_loan_ledger_errors(self) -> None:
        for error in (DuplicateLoanError, ConfigurationError, NotificationError):
            assert isinstance(error("test"), LoanLedgerError)

    def test_incomplete_draft_lists_fields(self) -> None:
        err = IncompleteDraftError(["borrower_name", "amount"])

        assert err.fields == ["borrower_name", "amount"]
        assert str(err) == "Missing or invalid fields: borrower_name, amount"
