"""Financial states and state-based recommendation ordering."""

import logging
from dataclasses import dataclass
from typing import Sequence

from finsight.domain.entities import Recommendation, RecommendationType
from finsight.domain.errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinancialState:
    """A focus the user is in, with its preferred recommendation types."""

    name: str
    greeting: str
    priorities: tuple[str, ...]
    recommendation_types: tuple[RecommendationType, ...]


BUDGETING = FinancialState(
    name="BUDGETING",
    greeting="Let's focus on your budget!",
    priorities=(
        "Track all expenses carefully",
        "Identify areas to cut spending",
        "Create and stick to a monthly budget",
        "Avoid unnecessary purchases",
    ),
    recommendation_types=(RecommendationType.BUDGETING, RecommendationType.SAVING),
)

SAVING = FinancialState(
    name="SAVING",
    greeting="Building your savings!",
    priorities=(
        "Build emergency fund",
        "Save for short-term goals",
        "Increase income through side hustles",
        "Automate savings transfers",
    ),
    recommendation_types=(RecommendationType.SAVING, RecommendationType.BUDGETING),
)

INVESTING = FinancialState(
    name="INVESTING",
    greeting="Grow your investments!",
    priorities=(
        "Maximize retirement contributions",
        "Diversify investment portfolio",
        "Research new investment opportunities",
        "Regular portfolio rebalancing",
    ),
    recommendation_types=(
        RecommendationType.INVESTING,
        RecommendationType.SAVING,
        RecommendationType.GENERAL,
    ),
)

DEBT_REDUCTION = FinancialState(
    name="DEBT_REDUCTION",
    greeting="Let's tackle your debt!",
    priorities=(
        "Pay high-interest debt first",
        "Negotiate lower interest rates",
        "Consider debt consolidation",
        "Stop accumulating new debt",
    ),
    recommendation_types=(
        RecommendationType.DEBT,
        RecommendationType.BUDGETING,
        RecommendationType.SAVING,
    ),
)

FINANCIAL_STATES = {
    state.name: state for state in (BUDGETING, SAVING, INVESTING, DEBT_REDUCTION)
}


def get_financial_state(name: str) -> FinancialState:
    """Look up a financial state by name (case-insensitive).

    Raises:
        ValidationError: If the name is not a known state
    """
    try:
        return FINANCIAL_STATES[name.upper()]
    except KeyError:
        raise ValidationError(
            f"Unknown financial state '{name}'. "
            f"Supported states: {', '.join(FINANCIAL_STATES)}"
        )


def prioritize_recommendations(
    state: FinancialState, recommendations: Sequence[Recommendation]
) -> list[Recommendation]:
    """Stable-sort recommendations by the state's preferred types.

    Types the state does not list come after all listed ones and keep their
    relative order.
    """
    preferred = state.recommendation_types
    unlisted = len(preferred)

    def rank(recommendation: Recommendation) -> int:
        if recommendation.type in preferred:
            return preferred.index(recommendation.type)
        return unlisted

    return sorted(recommendations, key=rank)


class FinancialStateContext:
    """Holds the current financial state. Transitions replace the state."""

    def __init__(self, initial_state: FinancialState = BUDGETING):
        self._state = initial_state

    @property
    def current_state(self) -> FinancialState:
        return self._state

    def change_state(self, new_state: FinancialState) -> None:
        logger.info("Financial state changed from %s to %s", self._state.name, new_state.name)
        self._state = new_state

    @property
    def greeting(self) -> str:
        return self._state.greeting

    @property
    def priorities(self) -> tuple[str, ...]:
        return self._state.priorities

    def prioritize_recommendations(
        self, recommendations: Sequence[Recommendation]
    ) -> list[Recommendation]:
        return prioritize_recommendations(self._state, recommendations)
