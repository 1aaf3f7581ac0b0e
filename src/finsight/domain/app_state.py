"""Application state service.

Owns the entity store together with the active budget strategy and
financial state, and exposes the actions a presentation layer dispatches.
"""

import logging
from datetime import date
from typing import Optional

from finsight.database.base import Database
from finsight.domain.budget import (
    BudgetStrategy,
    BudgetStrategyName,
    create_budget_strategy,
)
from finsight.domain.entities import (
    BudgetEvaluation,
    FinancialGoal,
    Recommendation,
    RecommendationType,
    Transaction,
)
from finsight.domain.errors import NotFoundError, entity_not_found
from finsight.domain.financial_state import (
    SAVING,
    FinancialState,
    FinancialStateContext,
    get_financial_state,
)
from finsight.domain.recommendations import RecommendationEngine

logger = logging.getLogger(__name__)


class AppState:
    """Service combining stored collections with strategy and state choices."""

    def __init__(
        self,
        db: Database,
        budget_strategy: str | BudgetStrategyName = BudgetStrategyName.FIFTY_THIRTY_TWENTY,
        financial_state: FinancialState = SAVING,
    ):
        """Initialize application state.

        Args:
            db: Database instance
            budget_strategy: Name of the initial budget strategy
            financial_state: Initial financial state
        """
        self.db = db
        self._budget_strategy = create_budget_strategy(budget_strategy)
        self._state_context = FinancialStateContext(financial_state)
        self.engine = RecommendationEngine()

    @property
    def budget_strategy(self) -> BudgetStrategy:
        return self._budget_strategy

    @property
    def financial_state(self) -> FinancialState:
        return self._state_context.current_state

    def set_budget_strategy(self, name: str | BudgetStrategyName) -> BudgetStrategy:
        """Replace the active strategy with a fresh instance.

        Raises:
            ValidationError: If the name is not a known strategy
        """
        self._budget_strategy = create_budget_strategy(name)
        logger.info("Budget strategy set to %s", self._budget_strategy.name.value)
        return self._budget_strategy

    def set_financial_state(self, name: str) -> FinancialState:
        """Replace the current financial state.

        Raises:
            ValidationError: If the name is not a known state
        """
        self._state_context.change_state(get_financial_state(name))
        return self.financial_state

    def add_transaction(self, transaction: Transaction) -> None:
        self.db.add_transaction(transaction)

    def delete_transaction(self, transaction_id: str) -> None:
        self.db.delete_transaction(transaction_id)

    def add_goal(self, goal: FinancialGoal) -> None:
        self.db.add_goal(goal)

    def update_goal(self, goal: FinancialGoal) -> None:
        self.db.update_goal(goal)

    def delete_goal(self, goal_id: str) -> None:
        self.db.delete_goal(goal_id)

    def get_goal(self, goal_id: str) -> FinancialGoal:
        """Get a goal by ID.

        Raises:
            NotFoundError: If no goal has that ID
        """
        goal = self.db.get_goal(goal_id)
        if goal is None:
            raise NotFoundError(entity_not_found("Goal", goal_id))
        return goal

    def evaluate_budget(self, month: int, year: int) -> BudgetEvaluation:
        """Evaluate the month with the active strategy."""
        return self._budget_strategy.evaluate_budget(
            self.db.list_transactions(), month, year
        )

    def recommendations(
        self,
        today: Optional[date] = None,
        recommendation_type: Optional[RecommendationType] = None,
        include_saved: bool = False,
    ) -> list[Recommendation]:
        """Regenerate recommendations and order them for the current state.

        Args:
            today: Day the income trend is measured up to
            recommendation_type: Optional type filter
            include_saved: If True, stored curated recommendations come first

        Returns:
            Filtered recommendations, prioritized by the financial state
        """
        recommendations: list[Recommendation] = []
        if include_saved:
            recommendations.extend(self.db.list_recommendations())
        recommendations.extend(
            self.engine.generate(
                self.db.list_accounts(), self.db.list_transactions(), today
            )
        )
        recommendations = self.engine.filter_by_type(recommendations, recommendation_type)
        return self._state_context.prioritize_recommendations(recommendations)
