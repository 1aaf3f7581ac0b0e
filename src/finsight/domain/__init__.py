"""Domain layer for finsight application."""

from finsight.domain.analytics import TransactionAnalyzer
from finsight.domain.categorizer import TransactionCategorizer
from finsight.domain.budget import (
    EnvelopeStrategy,
    FixedRatioStrategy,
    ZeroBasedStrategy,
    create_budget_strategy,
)
from finsight.domain.goals import GoalFactory, GoalTracker
from finsight.domain.recommendations import RecommendationEngine
from finsight.domain.financial_state import FinancialStateContext
from finsight.domain.transaction import TransactionFactory

__all__ = [
    "TransactionAnalyzer",
    "TransactionCategorizer",
    "FixedRatioStrategy",
    "ZeroBasedStrategy",
    "EnvelopeStrategy",
    "create_budget_strategy",
    "GoalFactory",
    "GoalTracker",
    "RecommendationEngine",
    "FinancialStateContext",
    "TransactionFactory",
]
