"""Tests for goal factory and tracker."""

from datetime import date
from decimal import Decimal

import pytest

from finsight.domain.entities import FinancialGoal
from finsight.domain.errors import ValidationError
from finsight.domain.goals import GoalFactory, GoalTracker

TODAY = date(2024, 3, 1)


def make_goal(
    id="g-1",
    target="1000",
    current="0",
    target_date=date(2025, 1, 1),
    created_at=date(2024, 1, 1),
):
    return FinancialGoal(
        id=id,
        name=f"Goal {id}",
        target_amount=Decimal(target),
        current_amount=Decimal(current),
        target_date=target_date,
        created_at=created_at,
    )


@pytest.fixture
def tracker():
    return GoalTracker()


class TestGoalFactory:
    def test_emergency_fund_goal(self):
        goal = GoalFactory().create_emergency_fund_goal(
            Decimal("10000"), Decimal("500"), date(2025, 6, 30), created_at=TODAY
        )

        assert goal.name == "Emergency Fund"
        assert goal.category == "Saving"
        assert goal.created_at == TODAY
        assert goal.id.startswith("goal-")

    def test_vacation_goal_default_description(self):
        goal = GoalFactory().create_vacation_goal(
            "Japan", Decimal("5000"), Decimal("0"), date(2025, 4, 1), created_at=TODAY
        )
        assert goal.category == "Vacation"
        assert "Japan" in goal.description

    def test_debt_and_purchase_goals(self):
        factory = GoalFactory()
        debt = factory.create_debt_payoff_goal(
            "Car loan", Decimal("8000"), Decimal("0"), date(2026, 1, 1), created_at=TODAY
        )
        purchase = factory.create_purchase_goal(
            "Laptop", Decimal("2000"), Decimal("100"), date(2024, 12, 1), created_at=TODAY
        )

        assert debt.category == "Debt Payoff"
        assert purchase.category == "Purchase"
        assert debt.id != purchase.id

    def test_custom_goal(self):
        goal = GoalFactory().create_custom_goal(
            "Wedding",
            Decimal("15000"),
            Decimal("0"),
            date(2026, 9, 1),
            description="Big day",
            created_at=TODAY,
        )
        assert goal.category == "Other"
        assert goal.description == "Big day"

    def test_created_at_defaults_to_today(self):
        goal = GoalFactory().create_custom_goal(
            "Later", Decimal("10"), Decimal("0"), date(2999, 1, 1)
        )
        assert goal.created_at == date.today()

    @pytest.mark.parametrize(
        "target,current,target_date,message",
        [
            ("0", "0", date(2025, 1, 1), "target amount must be positive"),
            ("100", "-1", date(2025, 1, 1), "cannot be negative"),
            ("100", "0", TODAY, "must be after"),
        ],
    )
    def test_validation(self, target, current, target_date, message):
        with pytest.raises(ValidationError, match=message):
            GoalFactory().create_custom_goal(
                "Bad", Decimal(target), Decimal(current), target_date, created_at=TODAY
            )

    @pytest.mark.parametrize(
        "target,current",
        [
            (Decimal("NaN"), Decimal("0")),
            (float("nan"), Decimal("0")),
            ("abc", Decimal("0")),
            (Decimal("100"), Decimal("NaN")),
            (Decimal("100"), "abc"),
        ],
    )
    def test_rejects_non_numbers(self, target, current):
        with pytest.raises(ValidationError, match="not a valid number"):
            GoalFactory().create_custom_goal(
                "Bad", target, current, date(2025, 1, 1), created_at=TODAY
            )


class TestProgress:
    def test_calculate_progress(self, tracker):
        assert tracker.calculate_progress(make_goal(current="250")) == Decimal("25")

    def test_progress_can_exceed_hundred(self, tracker):
        goal = make_goal(current="1500")
        assert tracker.calculate_progress(goal) == Decimal("150")
        assert tracker.remaining_amount(goal) == Decimal("0")

    def test_remaining_amount(self, tracker):
        assert tracker.remaining_amount(make_goal(current="400")) == Decimal("600")

    def test_progress_never_decreases_as_current_grows(self, tracker):
        amounts = ["0", "1", "250", "999", "1000", "1001", "5000"]
        progress = [tracker.calculate_progress(make_goal(current=a)) for a in amounts]
        assert progress == sorted(progress)


class TestIsOnTrack:
    def test_ahead_of_schedule(self, tracker):
        assert tracker.is_on_track(make_goal(current="900"), TODAY)

    def test_behind_schedule(self, tracker):
        goal = make_goal(current="0", target_date=date(2024, 6, 1))
        assert not tracker.is_on_track(goal, TODAY)

    def test_fully_funded_is_always_on_track(self, tracker):
        goal = make_goal(current="1000", target_date=date(2024, 2, 1))
        assert tracker.is_on_track(goal, date(2030, 1, 1))

    def test_past_due_underfunded_is_off_track(self, tracker):
        goal = make_goal(current="999", target_date=date(2024, 2, 1))
        assert not tracker.is_on_track(goal, TODAY)

    def test_on_creation_day(self, tracker):
        assert tracker.is_on_track(make_goal(current="0"), date(2024, 1, 1))

    @pytest.mark.parametrize("current,expected", [("1000", True), ("999", False)])
    def test_same_day_target_requires_full_funding(self, tracker, current, expected):
        goal = make_goal(
            current=current, target_date=date(2024, 1, 1), created_at=date(2024, 1, 1)
        )
        assert tracker.is_on_track(goal, date(2024, 1, 1)) is expected


class TestMonthlyContribution:
    def test_spread_over_calendar_months(self, tracker):
        goal = make_goal(current="100", target_date=date(2024, 12, 31))
        # March to December is 9 months
        assert tracker.monthly_contribution_needed(goal, date(2024, 3, 15)) == Decimal("100")

    def test_same_month_needs_everything(self, tracker):
        goal = make_goal(current="100", target_date=date(2024, 3, 31))
        assert tracker.monthly_contribution_needed(goal, date(2024, 3, 15)) == Decimal("900")

    def test_past_due_needs_everything(self, tracker):
        goal = make_goal(current="250", target_date=date(2024, 2, 1))
        assert tracker.monthly_contribution_needed(goal, TODAY) == Decimal("750")


class TestPrioritize:
    def test_off_track_first(self, tracker):
        a = make_goal(id="A", current="900", target_date=date(2025, 1, 1))
        b = make_goal(id="B", current="0", target_date=date(2024, 6, 1))

        assert tracker.prioritize([a, b], TODAY) == [b, a]

    def test_same_status_by_target_date(self, tracker):
        later = make_goal(id="later", current="900", target_date=date(2026, 1, 1))
        sooner = make_goal(id="sooner", current="900", target_date=date(2025, 1, 1))

        assert [g.id for g in tracker.prioritize([later, sooner], TODAY)] == ["sooner", "later"]

    def test_does_not_modify_input(self, tracker):
        goals = [make_goal(id="A", current="900"), make_goal(id="B")]
        tracker.prioritize(goals, TODAY)
        assert [g.id for g in goals] == ["A", "B"]


def test_goal_status(tracker):
    goal = make_goal(current="500", target_date=date(2024, 6, 1))
    status = tracker.goal_status(goal, TODAY)

    assert status.goal == goal
    assert status.progress == Decimal("50")
    assert status.on_track
    assert status.remaining == Decimal("500")
    assert status.monthly_needed == Decimal("500") / 3
