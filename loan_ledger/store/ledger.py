"""In-memory loan ledger."""

from dataclasses import dataclass, field
from typing import Iterator

from loan_ledger.exceptions import DuplicateLoanError, LoanNotFoundError
from loan_ledger.models.enums import LoanStatus
from loan_ledger.models.loan import Loan, Payment


@dataclass
class LoanLedger:
    """Ordered collection of loans keyed by loan id.

    Loans are immutable, so every update is a whole-record ``replace``.
    Insertion order is preserved; replacing a loan keeps its position.
    """

    _loans: dict[str, Loan] = field(default_factory=dict)

    def add(self, loan: Loan) -> None:
        """Add a new loan to the ledger."""
        if loan.loan_id in self._loans:
            raise DuplicateLoanError(f"Loan {loan.loan_id} already exists")
        self._loans[loan.loan_id] = loan

    def get(self, loan_id: str) -> Loan:
        """Get a loan by id."""
        try:
            return self._loans[loan_id]
        except KeyError:
            raise LoanNotFoundError(f"Loan {loan_id} not found") from None

    def replace(self, loan: Loan) -> None:
        """Replace the stored record for ``loan.loan_id``."""
        if loan.loan_id not in self._loans:
            raise LoanNotFoundError(f"Loan {loan.loan_id} not found")
        self._loans[loan.loan_id] = loan

    def __len__(self) -> int:
        return len(self._loans)

    def __iter__(self) -> Iterator[Loan]:
        return iter(list(self._loans.values()))

    def __contains__(self, loan_id: object) -> bool:
        return loan_id in self._loans

    def loans(self) -> list[Loan]:
        """All loans in insertion order."""
        return list(self._loans.values())

    # Query methods
    def search(self, term: str) -> list[Loan]:
        """Case-insensitive borrower-name search; a blank term matches all."""
        needle = term.strip().lower()
        if not needle:
            return self.loans()
        return [loan for loan in self._loans.values() if needle in loan.borrower_name.lower()]

    def by_status(self, status: LoanStatus) -> list[Loan]:
        """Get all loans with the given status."""
        return [loan for loan in self._loans.values() if loan.status == status]

    def payment_history(self, loan_id: str) -> list[Payment]:
        """Get a loan's payments in entry order."""
        return list(self.get(loan_id).payments)

    def total_principal(self) -> int:
        """Sum of principal over every loan."""
        return sum(loan.principal for loan in self._loans.values())

    def active_count(self) -> int:
        """Number of loans currently active."""
        return len(self.by_status(LoanStatus.ACTIVE))

    def summary(self) -> dict[str, int]:
        """Return summary counts and totals."""
        loans = self._loans.values()
        return {
            "loans": len(self._loans),
            "active": self.active_count(),
            "completed": len(self.by_status(LoanStatus.COMPLETED)),
            "overdue": len(self.by_status(LoanStatus.OVERDUE)),
            "total_principal": self.total_principal(),
            "total_paid": sum(loan.total_paid for loan in loans),
            "total_remaining": sum(loan.remaining_amount for loan in loans),
        }
