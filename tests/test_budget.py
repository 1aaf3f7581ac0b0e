"""Tests for budget strategies."""

from datetime import date
from decimal import Decimal

import pytest

from finsight.domain.budget import (
    MISC_ENVELOPE,
    OVER_BUDGET,
    OVER_NEEDS,
    OVER_WANTS,
    ON_TRACK,
    UNDER_SAVINGS,
    BudgetStrategyName,
    EnvelopeStrategy,
    FixedRatioStrategy,
    ZeroBasedStrategy,
    create_budget_strategy,
)
from finsight.domain.errors import DuplicateError, NotFoundError, ValidationError


@pytest.fixture
def month_of(make_transaction):
    """Build a January 2024 transaction list from (amount, category) pairs."""

    def _build(*pairs):
        return [make_transaction(amount, category) for amount, category in pairs]

    return _build


class TestFixedRatioStrategy:
    def test_allocate_funds(self):
        allocation = FixedRatioStrategy().allocate_funds(Decimal("5000"))
        assert allocation == {
            "needs": Decimal("2500"),
            "wants": Decimal("1500"),
            "savings": Decimal("1000"),
        }

    def test_last_matching_status_wins(self, month_of):
        transactions = month_of(
            ("5000", "Income"),
            ("-1600", "Rent"),
            ("-1700", "Shopping"),
            ("-700", "Groceries"),
        )

        evaluation = FixedRatioStrategy().evaluate_budget(transactions, 1, 2024)

        # Over on wants as well, but under on savings is checked last
        assert evaluation.status == UNDER_SAVINGS
        assert evaluation.details["actual"] == {
            "needs": Decimal("2300"),
            "wants": Decimal("1700"),
            "savings": Decimal("0"),
        }
        assert evaluation.details["budget"]["wants"] == Decimal("1500")
        assert evaluation.details["income"] == Decimal("5000")

    def test_over_wants_when_savings_met(self, month_of):
        transactions = month_of(
            ("1000", "Income"),
            ("-400", "Shopping"),
            ("-200", "Savings"),
        )
        assert FixedRatioStrategy().evaluate_budget(transactions, 1, 2024).status == OVER_WANTS

    def test_over_needs_when_savings_met(self, month_of):
        transactions = month_of(
            ("1000", "Income"),
            ("-600", "Rent"),
            ("-250", "Retirement"),
        )
        assert FixedRatioStrategy().evaluate_budget(transactions, 1, 2024).status == OVER_NEEDS

    def test_on_track(self, month_of):
        transactions = month_of(
            ("1000", "Income"),
            ("-400", "Rent"),
            ("-200", "Dining Out"),
            ("-200", "Investment"),
        )
        evaluation = FixedRatioStrategy().evaluate_budget(transactions, 1, 2024)

        assert evaluation.status == ON_TRACK
        assert evaluation.details["percentages"]["needs"] == Decimal("50")
        assert evaluation.details["percentages"]["savings"] == Decimal("25")

    def test_unbucketed_categories_are_ignored(self, month_of):
        transactions = month_of(("1000", "Income"), ("-999", "Transfer"))
        evaluation = FixedRatioStrategy().evaluate_budget(transactions, 1, 2024)

        assert sum(evaluation.details["actual"].values()) == 0
        assert evaluation.details["percentages"]["needs"] == Decimal("0")

    def test_empty_month_is_on_track(self, month_of):
        # A zero savings budget is not undershot by zero savings
        evaluation = FixedRatioStrategy().evaluate_budget(month_of(), 1, 2024)
        assert evaluation.status == ON_TRACK


class TestZeroBasedStrategy:
    def test_default_allocation_sums_to_income(self):
        allocation = ZeroBasedStrategy().allocate_funds(Decimal("1000"))

        assert allocation["Rent"] == Decimal("300")
        assert sum(allocation.values()) == Decimal("1000")

    def test_update_within_tolerance_keeps_shares(self):
        strategy = ZeroBasedStrategy()
        strategy.update_category_allocation("Rent", Decimal("0.305"))

        assert strategy.categories["Rent"] == Decimal("0.305")
        assert strategy.categories["Other"] == Decimal("0.05")

    def test_update_renormalizes(self):
        strategy = ZeroBasedStrategy()
        strategy.update_category_allocation("Rent", Decimal("0.5"))

        categories = strategy.categories
        total = sum(categories.values())
        assert abs(total - 1) < Decimal("0.0001")
        assert categories["Rent"] == Decimal("0.5") / Decimal("1.2")

    def test_update_adds_new_category(self):
        strategy = ZeroBasedStrategy()
        strategy.update_category_allocation("Travel", Decimal("0.1"))

        assert "Travel" in strategy.categories
        assert abs(sum(strategy.categories.values()) - 1) < Decimal("0.0001")

    @pytest.mark.parametrize("percentage", [Decimal("-0.1"), Decimal("1.5")])
    def test_update_rejects_out_of_range(self, percentage):
        strategy = ZeroBasedStrategy()
        with pytest.raises(ValidationError, match="between 0 and 1"):
            strategy.update_category_allocation("Rent", percentage)
        assert strategy.categories == ZeroBasedStrategy.DEFAULT_CATEGORIES

    @pytest.mark.parametrize(
        "percentage", [Decimal("NaN"), float("nan"), "abc", Decimal("Infinity")]
    )
    def test_update_rejects_non_numbers(self, percentage):
        strategy = ZeroBasedStrategy()
        with pytest.raises(ValidationError, match="between 0 and 1"):
            strategy.update_category_allocation("Rent", percentage)
        assert strategy.categories == ZeroBasedStrategy.DEFAULT_CATEGORIES

    def test_update_accepts_float(self):
        strategy = ZeroBasedStrategy()
        strategy.update_category_allocation("Rent", 0.3)
        assert strategy.categories["Rent"] == Decimal("0.3")

    def test_categories_returns_copy(self):
        strategy = ZeroBasedStrategy()
        strategy.categories["Rent"] = Decimal("1")
        assert strategy.categories["Rent"] == Decimal("0.30")

    def test_evaluate_flags_overspent_categories(self, month_of):
        transactions = month_of(
            ("1000", "Income"),
            ("-350", "Rent"),
            ("-20", "Groceries"),
            ("-80", "Pet Supplies"),
        )

        evaluation = ZeroBasedStrategy().evaluate_budget(transactions, 1, 2024)

        assert evaluation.status == OVER_BUDGET
        # Unknown categories are charged to "Other" (budget 50)
        assert evaluation.details["actual"]["Other"] == Decimal("80")
        assert evaluation.details["overspent_categories"] == ["Rent", "Other"]

    def test_evaluate_on_track(self, month_of):
        transactions = month_of(("1000", "Income"), ("-300", "Rent"))
        assert ZeroBasedStrategy().evaluate_budget(transactions, 1, 2024).status == ON_TRACK


class TestEnvelopeStrategy:
    def test_default_envelopes(self):
        names = [e.name for e in EnvelopeStrategy().envelopes]
        assert names[-1] == MISC_ENVELOPE
        assert "Groceries" in names

    def test_allocate_funds_splits_evenly(self):
        strategy = EnvelopeStrategy()
        allocation = strategy.allocate_funds(Decimal("600"))

        assert set(allocation.values()) == {Decimal("100")}
        assert all(e.amount == Decimal("100") for e in strategy.envelopes)

    def test_set_envelope_amounts(self):
        strategy = EnvelopeStrategy()
        strategy.set_envelope_amounts({"Groceries": Decimal("300"), "Gifts": Decimal("50")})

        amounts = {e.name: e.amount for e in strategy.envelopes}
        assert amounts["Groceries"] == Decimal("300")
        assert amounts["Gifts"] == Decimal("50")
        assert list(amounts)[-1] == "Gifts"

    def test_set_envelope_amounts_rejects_negative(self):
        strategy = EnvelopeStrategy()
        with pytest.raises(ValidationError):
            strategy.set_envelope_amounts({"Groceries": Decimal("10"), "Shopping": Decimal("-1")})
        # Nothing applied
        assert all(e.amount == 0 for e in strategy.envelopes)

    @pytest.mark.parametrize("amount", [Decimal("NaN"), float("nan"), "abc"])
    def test_set_envelope_amounts_rejects_non_numbers(self, amount):
        strategy = EnvelopeStrategy()
        with pytest.raises(ValidationError, match="Invalid envelope amount"):
            strategy.set_envelope_amounts({"Groceries": Decimal("10"), "Shopping": amount})
        assert all(e.amount == 0 for e in strategy.envelopes)

    @pytest.mark.parametrize("amount", [Decimal("NaN"), float("nan"), "abc"])
    def test_add_envelope_rejects_non_numbers(self, amount):
        strategy = EnvelopeStrategy()
        with pytest.raises(ValidationError, match="Invalid envelope amount"):
            strategy.add_envelope("Gifts", amount)
        assert "Gifts" not in [e.name for e in strategy.envelopes]

    def test_add_envelope_accepts_numeric_string(self):
        strategy = EnvelopeStrategy()
        strategy.add_envelope("Gifts", "25.50")
        assert strategy.envelopes[-1].amount == Decimal("25.50")

    def test_add_duplicate_envelope(self):
        strategy = EnvelopeStrategy()
        with pytest.raises(DuplicateError, match="already exists"):
            strategy.add_envelope("Groceries", Decimal("10"))

    def test_add_and_remove_envelope(self):
        strategy = EnvelopeStrategy()
        strategy.add_envelope("Gifts", Decimal("40"))
        assert "Gifts" in [e.name for e in strategy.envelopes]

        strategy.remove_envelope("Gifts")
        assert "Gifts" not in [e.name for e in strategy.envelopes]

    def test_remove_missing_envelope(self):
        with pytest.raises(NotFoundError, match="not found"):
            EnvelopeStrategy().remove_envelope("Nope")

    def test_misc_cannot_be_removed(self):
        with pytest.raises(ValidationError):
            EnvelopeStrategy().remove_envelope(MISC_ENVELOPE)

    def test_envelopes_are_copies(self):
        strategy = EnvelopeStrategy()
        strategy.envelopes[0].amount = Decimal("999")
        assert strategy.envelopes[0].amount == Decimal("0")

    def test_evaluate_falls_back_to_misc(self, month_of):
        strategy = EnvelopeStrategy()
        strategy.set_envelope_amounts({
            "Groceries": Decimal("300"),
            MISC_ENVELOPE: Decimal("50"),
        })
        transactions = month_of(
            ("2000", "Income"),
            ("-120", "Groceries"),
            ("-75", "Pet Supplies"),
        )

        evaluation = strategy.evaluate_budget(transactions, 1, 2024)

        assert evaluation.status == OVER_BUDGET
        assert evaluation.details["actual"][MISC_ENVELOPE] == Decimal("75")
        assert evaluation.details["overspent_envelopes"] == [MISC_ENVELOPE]
        assert evaluation.details["remaining_amounts"]["Groceries"] == Decimal("180")
        assert evaluation.details["remaining_amounts"][MISC_ENVELOPE] == Decimal("-25")

    def test_evaluate_on_track(self, month_of):
        strategy = EnvelopeStrategy()
        strategy.set_envelope_amounts({"Groceries": Decimal("300")})
        evaluation = strategy.evaluate_budget(month_of(("-120", "Groceries")), 1, 2024)
        assert evaluation.status == ON_TRACK


class TestCreateBudgetStrategy:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("FIFTY_THIRTY_TWENTY", FixedRatioStrategy),
            ("zero_based", ZeroBasedStrategy),
            (BudgetStrategyName.ENVELOPE, EnvelopeStrategy),
        ],
    )
    def test_create_by_name(self, name, expected):
        assert isinstance(create_budget_strategy(name), expected)

    def test_returns_fresh_instances(self):
        first = create_budget_strategy("ENVELOPE")
        first.add_envelope("Gifts")
        second = create_budget_strategy("ENVELOPE")
        assert "Gifts" not in [e.name for e in second.envelopes]

    def test_unknown_strategy(self):
        with pytest.raises(ValidationError, match="Unknown budget strategy"):
            create_budget_strategy("KAKEIBO")


def test_evaluation_ignores_other_months(month_of, make_transaction):
    transactions = month_of(("1000", "Income")) + [
        make_transaction("-900", "Rent", on=date(2024, 2, 1))
    ]
    evaluation = FixedRatioStrategy().evaluate_budget(transactions, 1, 2024)
    assert evaluation.details["actual"]["needs"] == Decimal("0")
