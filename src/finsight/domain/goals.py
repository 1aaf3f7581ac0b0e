"""Financial goal construction and progress tracking."""

import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from finsight.domain.entities import FinancialGoal, GoalStatus
from finsight.domain.errors import ValidationError
from finsight.utils.amount_parser import to_decimal

logger = logging.getLogger(__name__)


def new_goal_id() -> str:
    """Generate an identifier for a new goal."""
    return f"goal-{uuid.uuid4().hex[:12]}"


class GoalFactory:
    """Creates validated goals of the common kinds."""

    def create_emergency_fund_goal(
        self,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: date,
        created_at: Optional[date] = None,
    ) -> FinancialGoal:
        return self._create(
            name="Emergency Fund",
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            created_at=created_at,
            description="Build an emergency fund to cover 3-6 months of expenses.",
            category="Saving",
        )

    def create_vacation_goal(
        self,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: date,
        description: Optional[str] = None,
        created_at: Optional[date] = None,
    ) -> FinancialGoal:
        return self._create(
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            created_at=created_at,
            description=description or f"Save for a vacation to {name}.",
            category="Vacation",
        )

    def create_debt_payoff_goal(
        self,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: date,
        created_at: Optional[date] = None,
    ) -> FinancialGoal:
        return self._create(
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            created_at=created_at,
            description=f"Pay off {name}.",
            category="Debt Payoff",
        )

    def create_purchase_goal(
        self,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: date,
        created_at: Optional[date] = None,
    ) -> FinancialGoal:
        return self._create(
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            created_at=created_at,
            description=f"Save to purchase {name}.",
            category="Purchase",
        )

    def create_custom_goal(
        self,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: date,
        description: Optional[str] = None,
        category: Optional[str] = None,
        created_at: Optional[date] = None,
    ) -> FinancialGoal:
        return self._create(
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            created_at=created_at,
            description=description,
            category=category or "Other",
        )

    def _create(
        self,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal,
        target_date: date,
        created_at: Optional[date],
        description: Optional[str],
        category: str,
    ) -> FinancialGoal:
        """Validate inputs and build the goal.

        Raises:
            ValidationError: If the target is not positive, the current amount
                is negative or the target date is not after the creation date
        """
        created_at = created_at or date.today()
        try:
            target_amount = to_decimal(target_amount)
            current_amount = to_decimal(current_amount)
        except ValueError as e:
            raise ValidationError(f"Goal amount is not a valid number: {e}") from None
        if target_amount <= 0:
            raise ValidationError("Goal target amount must be positive")
        if current_amount < 0:
            raise ValidationError("Goal current amount cannot be negative")
        if target_date <= created_at:
            raise ValidationError(
                f"Goal target date {target_date} must be after {created_at}"
            )

        goal = FinancialGoal(
            id=new_goal_id(),
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            created_at=created_at,
            description=description,
            category=category,
        )
        logger.info("Created %s goal '%s'", category, name)
        return goal


class GoalTracker:
    """Tracks progress towards financial goals.

    Methods that depend on the current day accept ``today`` and fall back to
    ``date.today()``.
    """

    def calculate_progress(self, goal: FinancialGoal) -> Decimal:
        """Progress in percent. Not clamped, can exceed 100."""
        return goal.current_amount / goal.target_amount * 100

    def remaining_amount(self, goal: FinancialGoal) -> Decimal:
        """Amount still missing, never negative."""
        return max(goal.target_amount - goal.current_amount, Decimal("0"))

    def is_on_track(self, goal: FinancialGoal, today: Optional[date] = None) -> bool:
        """Whether saved progress keeps pace with elapsed time.

        A goal is on track when the saved fraction of the target is at least
        the elapsed fraction of the time between creation and target date.
        A goal whose target date equals (or precedes) its creation date is on
        track only once fully funded.
        """
        today = today or date.today()
        progress_fraction = goal.current_amount / goal.target_amount

        total_days = (goal.target_date - goal.created_at).days
        if total_days <= 0:
            return goal.current_amount >= goal.target_amount

        elapsed_days = (today - goal.created_at).days
        # Past the target date the elapsed fraction stays at 1, so a fully
        # funded goal is always on track.
        time_fraction = min(Decimal(elapsed_days) / Decimal(total_days), Decimal("1"))
        return progress_fraction >= time_fraction

    def monthly_contribution_needed(
        self, goal: FinancialGoal, today: Optional[date] = None
    ) -> Decimal:
        """Monthly saving required to reach the target by its date.

        Past-due goals need the whole remaining amount now. Otherwise the
        remaining amount is spread over the calendar months left (month
        difference, ignoring days), with at least one month.
        """
        today = today or date.today()
        amount_needed = goal.target_amount - goal.current_amount

        if goal.target_date <= today:
            return amount_needed

        months_remaining = (goal.target_date.year - today.year) * 12 + (
            goal.target_date.month - today.month
        )
        return amount_needed / max(1, months_remaining)

    def prioritize(
        self, goals: Sequence[FinancialGoal], today: Optional[date] = None
    ) -> list[FinancialGoal]:
        """Order goals: off-track first, then by nearest target date."""
        today = today or date.today()
        return sorted(
            goals,
            key=lambda goal: (self.is_on_track(goal, today), goal.target_date),
        )

    def goal_status(self, goal: FinancialGoal, today: Optional[date] = None) -> GoalStatus:
        """Collect the progress figures of a goal."""
        today = today or date.today()
        return GoalStatus(
            goal=goal,
            progress=self.calculate_progress(goal),
            on_track=self.is_on_track(goal, today),
            monthly_needed=self.monthly_contribution_needed(goal, today),
            remaining=self.remaining_amount(goal),
        )
