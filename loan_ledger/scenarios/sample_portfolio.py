"""Sample portfolio scenario populating a ledger end to end."""

from __future__ import annotations

from loan_ledger.generators import LoanDraftGenerator, PaymentDraftGenerator
from loan_ledger.logging import get_logger
from loan_ledger.service import LedgerService
from loan_ledger.store.ledger import LoanLedger

logger = get_logger(__name__)


class SamplePortfolioScenario:
    """Generate a loan portfolio with a payment history.

    This scenario creates:
    - Loans from generated drafts, through the ledger service
    - Up to ``payments_per_loan`` monthly payments per loan, some partial
    - Loans paid off along the way end up completed
    """

    def __init__(
        self,
        num_loans: int = 10,
        payments_per_loan: int = 6,
        seed: int | None = None,
        *,
        service: LedgerService,
    ) -> None:
        """Initialize sample portfolio scenario.

        Parameters
        ----------
        num_loans : int
            Number of loans to create.
        payments_per_loan : int
            Maximum number of payments recorded per loan.
        seed : int | None
            Random seed for reproducibility.
        service : LedgerService
            Service the loans and payments go through.
        """
        self.num_loans = num_loans
        self.payments_per_loan = payments_per_loan
        self.seed = seed
        self.service = service

        self._draft_gen = LoanDraftGenerator(seed=seed)
        self._payment_gen = PaymentDraftGenerator(seed=None if seed is None else seed + 1)

    def generate(self) -> LoanLedger:
        """Create all loans and payments.

        Returns
        -------
        LoanLedger
            The service's ledger, now populated.
        """
        logger.info(
            "Starting sample portfolio scenario: %d loans, up to %d payments each",
            self.num_loans,
            self.payments_per_loan,
        )

        for draft in self._draft_gen.generate_batch(self.num_loans):
            loan = self.service.create_loan(draft)
            count = self._payment_gen.rng.randint(0, self.payments_per_loan)
            for installment in range(1, count + 1):
                if loan.is_completed:
                    break
                payment = self._payment_gen.generate(loan, installment)
                loan = self.service.record_payment(loan.loan_id, payment)

        summary = self.service.summary()
        logger.info(
            "Generated %d loans (%d active, %d completed)",
            summary["loans"],
            summary["active"],
            summary["completed"],
        )
        return self.service.ledger
