"""Scenarios for populating a ledger with realistic data."""

from loan_ledger.scenarios.sample_portfolio import SamplePortfolioScenario

__all__ = ["SamplePortfolioScenario"]
