"""Loan and payment draft generators."""

from datetime import date, timedelta
from typing import Iterator

from loan_ledger.formatting import group_thousands
from loan_ledger.generators.base import BaseGenerator
from loan_ledger.models.draft import LoanDraft, PaymentDraft
from loan_ledger.models.enums import PaymentKind
from loan_ledger.models.loan import Loan


class LoanDraftGenerator(BaseGenerator):
    """Generate loan form input as a user would type it."""

    TERM_MONTHS = [6, 12, 18, 24, 36, 48, 60]
    # Principal in Ariary, drawn in steps of 100 000
    PRINCIPAL_STEPS = (10, 2500)
    RATE_RANGE = (1.0, 8.0)
    USDT_RATE_RANGE = (4400, 5000)
    CRYPTO_SHARE = 0.5

    def __init__(self, seed: int | None = None, locale: str = "fr_FR") -> None:
        super().__init__(seed, locale)
        self._lender_contact = self.fake.email()

    def generate(self) -> LoanDraft:
        """Generate a single loan draft.

        Returns
        -------
        LoanDraft
            Draft with grouped amount, one-decimal rate and a
            month-aligned date range.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[LoanDraft]:
        """Generate multiple loan drafts.

        Parameters
        ----------
        count : int
            Number of drafts to generate.

        Yields
        ------
        LoanDraft
            Generated drafts.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> LoanDraft:
        principal = self.rng.randint(*self.PRINCIPAL_STEPS) * 100_000
        rate = round(self.rng.uniform(*self.RATE_RANGE), 1)
        term = self.rng.choice(self.TERM_MONTHS)

        start = self.fake.date_between(start_date="-2y", end_date="today").replace(day=1)
        end = _add_months(start, term)

        usdt_rate = ""
        crypto_tx_ref = ""
        if self.rng.random() < self.CRYPTO_SHARE:
            usdt_rate = str(self.rng.randint(*self.USDT_RATE_RANGE))
            crypto_tx_ref = "0x" + self.fake.sha256()[:40]

        return LoanDraft(
            borrower_name=self.fake.name(),
            borrower_contact=self.fake.email(),
            lender_contact=self._lender_contact,
            amount=group_thousands(principal),
            interest_rate=str(rate),
            start_date=start.isoformat(),
            end_date=end.isoformat(),
            usdt_rate=usdt_rate,
            crypto_tx_ref=crypto_tx_ref,
        )


class PaymentDraftGenerator(BaseGenerator):
    """Generate payment form input for an existing loan."""

    PARTIAL_SHARE = 0.2
    PARTIAL_RANGE = (0.3, 0.9)

    def generate(self, loan: Loan, installment: int = 1) -> PaymentDraft:
        """Generate the payment for the ``installment``-th month of ``loan``.

        Most payments are the full monthly amount; some are a partial
        fraction of it. Loans without a monthly payment get a payment of
        one twelfth of the total due.
        """
        monthly = loan.monthly_payment or max(1, loan.total_due // 12)
        if self.rng.random() < self.PARTIAL_SHARE:
            amount = max(1, int(monthly * self.rng.uniform(*self.PARTIAL_RANGE)))
            kind = PaymentKind.PARTIAL
        else:
            amount = monthly
            kind = PaymentKind.FULL

        paid_on = _add_months(loan.start_date, installment) + timedelta(
            days=self.rng.randint(-3, 5)
        )
        return PaymentDraft(
            amount=group_thousands(amount),
            date=paid_on.isoformat(),
            kind=kind.value,
        )


def _add_months(start: date, months: int) -> date:
    """Same day ``months`` later, clamped to the 28th for short months."""
    total = start.month - 1 + months
    return date(start.year + total // 12, total % 12 + 1, min(start.day, 28))
