#!/usr/bin/env python3
"""Run the loan ledger on sample data or preview a single loan.

Two modes:
- portfolio (default): create generated loans with payment histories and
  print the resulting ledger summary.
- preview: compute the derived fields for one loan draft given on the
  command line.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loan_ledger.config import LedgerConfig
from loan_ledger.formatting import format_currency, format_usdt
from loan_ledger.logging import setup_logging
from loan_ledger.models import LoanDraft
from loan_ledger.scenarios import SamplePortfolioScenario
from loan_ledger.service import LedgerService


def run_preview(args: argparse.Namespace, config: LedgerConfig) -> None:
    """Print derived fields for a draft built from the arguments."""
    service = LedgerService(config=config)
    draft = LoanDraft(
        amount=args.amount,
        interest_rate=args.rate,
        start_date=args.start or "",
        end_date=args.end or "",
        usdt_rate=args.usdt_rate or "",
    )
    derived = service.preview(draft)
    suffix = config.display.currency_suffix

    print(f"Interest amount: {format_currency(derived.interest_amount, suffix)}")
    print(f"Months:          {derived.months if derived.months is not None else '-'}")
    print(f"Monthly payment: {format_currency(derived.monthly_payment, suffix)}")
    print(f"USDT amount:     {format_usdt(derived.usdt_amount)}")
    service.close()


def run_portfolio(args: argparse.Namespace, config: LedgerConfig) -> None:
    """Populate a ledger with generated loans and print a summary."""
    service = LedgerService(config=config)
    scenario = SamplePortfolioScenario(
        num_loans=args.loans,
        payments_per_loan=args.payments,
        seed=args.seed,
        service=service,
    )
    ledger = scenario.generate()
    service.close()

    suffix = config.display.currency_suffix
    print(f"\n{'='*60}")
    print("Ledger")
    print("=" * 60)
    for loan in ledger:
        print(
            f"  {loan.borrower_name:<28} {loan.status.value:<10} "
            f"paid {format_currency(loan.total_paid, suffix):>18} "
            f"remaining {format_currency(loan.remaining_amount, suffix):>18}"
        )

    print(f"\n{'='*60}")
    print("Summary")
    print("=" * 60)
    for key, value in ledger.summary().items():
        print(f"  {key}: {value}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Loan ledger demo")
    parser.add_argument(
        "--mode",
        choices=["portfolio", "preview"],
        default="portfolio",
        help="Run a generated portfolio or preview one loan (default: portfolio)",
    )
    parser.add_argument(
        "--loans",
        type=int,
        default=10,
        help="Number of loans to generate (default: 10)",
    )
    parser.add_argument(
        "--payments",
        type=int,
        default=6,
        help="Maximum payments per loan (default: 6)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument("--amount", type=str, default="5 000 000", help="Principal, e.g. '5 000 000'")
    parser.add_argument("--rate", type=str, default="5", help="Interest rate in percent")
    parser.add_argument("--start", type=str, default=None, help="Start date (YYYY-MM-DD)")
    parser.add_argument("--end", type=str, default=None, help="End date (YYYY-MM-DD)")
    parser.add_argument("--usdt-rate", type=str, default=None, help="USDT rate in Ariary")
    parser.add_argument(
        "--notifier",
        choices=["console", "jsonl", "kafka", "none"],
        default=None,
        help="Notification backend (default: from LOAN_LEDGER_NOTIFIER or console)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: from LOG_LEVEL or INFO)",
    )
    args = parser.parse_args()

    config = LedgerConfig.from_env()
    if args.notifier:
        config.notifications.backend = args.notifier
    if args.log_level:
        config.log_level = args.log_level
    if args.seed is None:
        args.seed = config.seed
    config.validate()

    setup_logging(config.log_level, config.log_format)

    if args.mode == "preview":
        run_preview(args, config)
    else:
        run_portfolio(args, config)


if __name__ == "__main__":
    main()
