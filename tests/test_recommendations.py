"""Tests for the recommendation engine."""

from datetime import date
from decimal import Decimal

import pytest

from finsight.database.fixtures import SAMPLE_ACCOUNTS, SAMPLE_TRANSACTIONS
from finsight.domain.entities import AccountType, RecommendationType
from finsight.domain.recommendations import RecommendationEngine, population_variance

TODAY = date(2024, 6, 15)


@pytest.fixture
def engine():
    return RecommendationEngine()


class TestSpendingPatterns:
    def test_top_three_categories(self, engine, make_transaction):
        transactions = [
            make_transaction("-900", "Groceries"),
            make_transaction("-1600", "Rent"),
            make_transaction("-300", "Dining Out"),
            make_transaction("-1200", "Shopping"),
        ]

        recs = engine.analyze_spending_patterns(transactions)

        assert [r.title for r in recs] == [
            "Reduce Rent expenses",
            "Reduce Shopping expenses",
            "Reduce Groceries expenses",
        ]
        assert [r.impact for r in recs] == [Decimal("320"), Decimal("240"), Decimal("180")]
        assert all(r.type == RecommendationType.SAVING for r in recs)
        assert len(recs[0].steps) == 3

    def test_ignores_income(self, engine, make_transaction):
        transactions = [
            make_transaction("5000", "Income"),
            make_transaction("-50", "Groceries"),
        ]
        recs = engine.analyze_spending_patterns(transactions)
        assert [r.title for r in recs] == ["Reduce Groceries expenses"]

    def test_no_expenses(self, engine):
        assert engine.analyze_spending_patterns([]) == []

    def test_ties_keep_first_seen_order(self, engine):
        spending = [("A", Decimal("10")), ("B", Decimal("20")), ("C", Decimal("10")), ("D", Decimal("10"))]
        top = engine.find_high_spending_categories(spending)
        assert [name for name, _ in top] == ["B", "A", "C"]

    def test_category_spending_spans_all_months(self, engine, make_transaction):
        transactions = [
            make_transaction("-10", "Rent", on=date(2023, 1, 1)),
            make_transaction("-15", "Rent", on=date(2024, 5, 1)),
        ]
        assert engine.get_category_spending(transactions) == [("Rent", Decimal("25"))]


class TestIncomeTrends:
    def test_monthly_income_covers_six_calendar_months(self, engine, make_transaction):
        transactions = [
            make_transaction("1000", "Income", on=date(2024, 6, 1)),
            make_transaction("500", "Income", on=date(2024, 1, 31)),
            make_transaction("700", "Income", on=date(2023, 12, 31)),
        ]

        monthly = engine.get_monthly_income(transactions, TODAY)

        assert [label for label, _ in monthly] == [
            "2024-06", "2024-05", "2024-04", "2024-03", "2024-02", "2024-01",
        ]
        assert monthly[0][1] == Decimal("1000")
        assert monthly[1][1] == Decimal("0")
        assert monthly[-1][1] == Decimal("500")

    def test_monthly_income_crosses_year_boundary(self, engine):
        monthly = engine.get_monthly_income([], date(2024, 2, 29))
        assert [label for label, _ in monthly][-1] == "2023-09"

    def test_unstable_income(self, engine, make_transaction):
        transactions = [make_transaction("5000", "Income", on=date(2024, 4, 1))]

        recs = engine.analyze_income_trends(transactions, TODAY)

        assert len(recs) == 1
        assert recs[0].type == RecommendationType.GENERAL
        assert recs[0].impact == Decimal("0")

    def test_steady_income(self, engine, make_transaction):
        transactions = [
            make_transaction("1", "Income", on=date(2024, month, 1)) for month in range(1, 7)
        ]
        assert engine.analyze_income_trends(transactions, TODAY) == []

    def test_no_income(self, engine):
        assert engine.analyze_income_trends([], TODAY) == []

    def test_population_variance(self):
        assert population_variance([Decimal("2"), Decimal("4")]) == Decimal("1")
        assert population_variance([]) == Decimal("0")


class TestInvestmentOpportunities:
    def test_large_savings_without_investments(self, engine, make_account):
        accounts = [
            make_account(AccountType.SAVINGS, "9000", id="s-1"),
            make_account(AccountType.SAVINGS, "6000", id="s-2"),
            make_account(AccountType.CHECKING, "50000", id="c-1"),
        ]

        recs = engine.analyze_investment_opportunities(accounts)

        assert len(recs) == 1
        assert recs[0].type == RecommendationType.INVESTING
        assert recs[0].impact == Decimal("750")

    def test_existing_investment_account(self, engine, make_account):
        accounts = [
            make_account(AccountType.SAVINGS, "20000", id="s-1"),
            make_account(AccountType.INVESTMENT, "0", id="i-1"),
        ]
        assert engine.analyze_investment_opportunities(accounts) == []

    def test_threshold_is_exclusive(self, engine, make_account):
        accounts = [make_account(AccountType.SAVINGS, "10000")]
        assert engine.analyze_investment_opportunities(accounts) == []


class TestGenerate:
    def test_sample_data(self, engine):
        recs = engine.generate(SAMPLE_ACCOUNTS, SAMPLE_TRANSACTIONS, TODAY)

        # Sample data holds an investment account and no income in the window
        assert [r.title for r in recs] == [
            "Reduce Rent expenses",
            "Reduce Transfer expenses",
            "Reduce Debt Payment expenses",
        ]

    def test_ids_are_unique(self, engine):
        recs = engine.generate(SAMPLE_ACCOUNTS, SAMPLE_TRANSACTIONS, TODAY)
        assert len({r.id for r in recs}) == len(recs)

    def test_order_of_analyses(self, engine, make_account, make_transaction):
        accounts = [make_account(AccountType.SAVINGS, "20000")]
        transactions = [
            make_transaction("-100", "Rent", on=date(2024, 6, 1)),
            make_transaction("3000", "Income", on=date(2024, 6, 1)),
        ]

        recs = engine.generate(accounts, transactions, TODAY)

        assert [r.type for r in recs] == [
            RecommendationType.SAVING,
            RecommendationType.GENERAL,
            RecommendationType.INVESTING,
        ]

    def test_filter_by_type(self, engine):
        recs = engine.generate(SAMPLE_ACCOUNTS, SAMPLE_TRANSACTIONS, TODAY)

        assert engine.filter_by_type(recs, RecommendationType.INVESTING) == []
        assert engine.filter_by_type(recs, None) == recs
        assert len(engine.filter_by_type(recs, RecommendationType.SAVING)) == 3
