"""Budget strategies.

Three interchangeable strategies allocate income to categories and evaluate
a month of transactions against that allocation. The set of strategies is
closed; ``create_budget_strategy`` dispatches on ``BudgetStrategyName``.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Sequence

from finsight.domain.analytics import TransactionAnalyzer
from finsight.domain.entities import BudgetEvaluation, Envelope, Transaction
from finsight.domain.errors import (
    DuplicateError,
    NotFoundError,
    ValidationError,
    duplicate_envelope,
    envelope_not_found,
    percentage_out_of_range,
)
from finsight.utils.amount_parser import to_decimal

logger = logging.getLogger(__name__)

ON_TRACK = "on_track"
OVER_BUDGET = "over_budget"
OVER_NEEDS = "over_needs"
OVER_WANTS = "over_wants"
UNDER_SAVINGS = "under_savings"

NEEDS_CATEGORIES = frozenset({
    "Rent", "Utilities", "Groceries", "Transportation",
    "Healthcare", "Insurance", "Debt Payment",
})
WANTS_CATEGORIES = frozenset({
    "Dining Out", "Entertainment", "Shopping", "Travel", "Hobbies", "Subscriptions",
})
SAVINGS_CATEGORIES = frozenset({"Savings", "Investment", "Retirement"})

ZERO_BASED_OTHER = "Other"
MISC_ENVELOPE = "Misc"
RENORMALIZE_TOLERANCE = Decimal("0.01")


class BudgetStrategyName(str, Enum):
    """Identifiers of the available budget strategies."""

    FIFTY_THIRTY_TWENTY = "FIFTY_THIRTY_TWENTY"
    ZERO_BASED = "ZERO_BASED"
    ENVELOPE = "ENVELOPE"


class BudgetStrategy(ABC):
    """Common contract of all budget strategies."""

    name: BudgetStrategyName
    description: str

    def __init__(self):
        self.analyzer = TransactionAnalyzer()

    @abstractmethod
    def allocate_funds(self, income: Decimal) -> dict[str, Decimal]:
        """Return target spend per category for the given income."""

    @abstractmethod
    def evaluate_budget(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> BudgetEvaluation:
        """Evaluate a month of transactions against the allocation."""


class FixedRatioStrategy(BudgetStrategy):
    """50/30/20 budget: needs, wants and savings as fixed shares of income."""

    name = BudgetStrategyName.FIFTY_THIRTY_TWENTY
    description = "50% needs, 30% wants, 20% savings and debt repayment"

    RATIOS = {
        "needs": Decimal("0.5"),
        "wants": Decimal("0.3"),
        "savings": Decimal("0.2"),
    }

    def allocate_funds(self, income: Decimal) -> dict[str, Decimal]:
        return {bucket: income * ratio for bucket, ratio in self.RATIOS.items()}

    def evaluate_budget(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> BudgetEvaluation:
        """Evaluate the month against the 50/30/20 targets.

        The status checks run in sequence and each one that holds replaces the
        previous status, so the last matching condition is reported: a month
        that is both over on needs and under on savings is "under_savings".
        """
        income = self.analyzer.monthly_income(transactions, month, year)
        budget = self.allocate_funds(income)

        actual = {"needs": Decimal("0"), "wants": Decimal("0"), "savings": Decimal("0")}
        for txn in self.analyzer.transactions_in_month(transactions, month, year):
            if txn.amount >= 0:
                continue
            if txn.category in NEEDS_CATEGORIES:
                actual["needs"] += abs(txn.amount)
            elif txn.category in WANTS_CATEGORIES:
                actual["wants"] += abs(txn.amount)
            elif txn.category in SAVINGS_CATEGORIES:
                actual["savings"] += abs(txn.amount)

        total = sum(actual.values(), Decimal("0"))
        percentages = {
            bucket: (amount / total * 100 if total > 0 else Decimal("0"))
            for bucket, amount in actual.items()
        }

        status = ON_TRACK
        if actual["needs"] > budget["needs"]:
            status = OVER_NEEDS
        if actual["wants"] > budget["wants"]:
            status = OVER_WANTS
        if actual["savings"] < budget["savings"]:
            status = UNDER_SAVINGS

        logger.debug("50/30/20 evaluation for %d-%02d: %s", year, month, status)
        return BudgetEvaluation(
            status=status,
            details={
                "income": income,
                "budget": budget,
                "actual": actual,
                "percentages": percentages,
            },
        )


class ZeroBasedStrategy(BudgetStrategy):
    """Every unit of income is assigned to a category by percentage."""

    name = BudgetStrategyName.ZERO_BASED
    description = "Allocate every dollar of income until you reach zero"

    DEFAULT_CATEGORIES = {
        "Rent": Decimal("0.30"),
        "Utilities": Decimal("0.05"),
        "Groceries": Decimal("0.10"),
        "Transportation": Decimal("0.10"),
        "Entertainment": Decimal("0.05"),
        "Dining Out": Decimal("0.05"),
        "Savings": Decimal("0.15"),
        "Healthcare": Decimal("0.05"),
        "Debt Payment": Decimal("0.10"),
        "Other": Decimal("0.05"),
    }

    def __init__(self, categories: dict[str, Decimal] | None = None):
        super().__init__()
        self._categories = dict(
            self.DEFAULT_CATEGORIES if categories is None else categories
        )

    @property
    def categories(self) -> dict[str, Decimal]:
        """Copy of the category percentages."""
        return dict(self._categories)

    def allocate_funds(self, income: Decimal) -> dict[str, Decimal]:
        return {
            category: income * percentage
            for category, percentage in self._categories.items()
        }

    def update_category_allocation(self, category: str, percentage: Decimal) -> None:
        """Set a category's share of income.

        When the shares no longer sum to 1 (within 0.01), every share is
        scaled proportionally so that they do.

        Args:
            category: Category name, created if missing
            percentage: Share of income between 0 and 1

        Raises:
            ValidationError: If percentage is not a number or is outside [0, 1]
        """
        try:
            percentage = to_decimal(percentage)
        except ValueError:
            raise ValidationError(percentage_out_of_range(percentage)) from None
        if percentage < 0 or percentage > 1:
            raise ValidationError(percentage_out_of_range(percentage))

        self._categories[category] = percentage

        total = sum(self._categories.values(), Decimal("0"))
        if total > 0 and abs(total - 1) > RENORMALIZE_TOLERANCE:
            logger.warning(
                "Category percentages sum to %s, renormalizing", total
            )
            self._categories = {
                name: share / total for name, share in self._categories.items()
            }

    def evaluate_budget(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> BudgetEvaluation:
        income = self.analyzer.monthly_income(transactions, month, year)
        budget = self.allocate_funds(income)

        actual = {category: Decimal("0") for category in self._categories}
        actual.setdefault(ZERO_BASED_OTHER, Decimal("0"))
        for txn in self.analyzer.transactions_in_month(transactions, month, year):
            if txn.amount >= 0:
                continue
            category = txn.category if txn.category in actual else ZERO_BASED_OTHER
            actual[category] += abs(txn.amount)

        overspent = [
            category
            for category, allocated in budget.items()
            if actual[category] > allocated
        ]
        status = OVER_BUDGET if overspent else ON_TRACK

        logger.debug("Zero-based evaluation for %d-%02d: %s", year, month, status)
        return BudgetEvaluation(
            status=status,
            details={
                "income": income,
                "budget": budget,
                "actual": actual,
                "overspent_categories": overspent,
            },
        )


def _envelope_amount(name: str, amount) -> Decimal:
    try:
        amount = to_decimal(amount)
    except ValueError:
        raise ValidationError(f"Invalid envelope amount for '{name}': {amount}") from None
    if amount < 0:
        raise ValidationError(f"Envelope amount for '{name}' cannot be negative")
    return amount


class EnvelopeStrategy(BudgetStrategy):
    """Cash is divided into named envelopes with fixed amounts.

    Expenses whose category has no envelope of the same name are drawn from
    the reserved "Misc" envelope.
    """

    name = BudgetStrategyName.ENVELOPE
    description = "Divide cash into different categories (envelopes)"

    DEFAULT_ENVELOPES = (
        "Groceries", "Entertainment", "Dining Out", "Transportation", "Shopping",
        MISC_ENVELOPE,
    )

    def __init__(self):
        super().__init__()
        self._envelopes = [
            Envelope(name=name, amount=Decimal("0")) for name in self.DEFAULT_ENVELOPES
        ]

    @property
    def envelopes(self) -> list[Envelope]:
        """Copies of the current envelopes, in order."""
        return [Envelope(name=e.name, amount=e.amount) for e in self._envelopes]

    def _find(self, name: str) -> Envelope | None:
        for envelope in self._envelopes:
            if envelope.name == name:
                return envelope
        return None

    def allocate_funds(self, income: Decimal) -> dict[str, Decimal]:
        """Split income evenly across the current envelopes.

        This also overwrites each envelope's amount; it is meant for default
        initialization, specific amounts are set with ``set_envelope_amounts``.
        """
        if not self._envelopes:
            return {}
        per_envelope = income / len(self._envelopes)
        for envelope in self._envelopes:
            envelope.amount = per_envelope
        return {envelope.name: envelope.amount for envelope in self._envelopes}

    def set_envelope_amounts(self, amounts: dict[str, Decimal]) -> None:
        """Update envelope amounts, appending envelopes that don't exist yet.

        Raises:
            ValidationError: If any amount is not a number or is negative
        """
        amounts = {
            name: _envelope_amount(name, amount) for name, amount in amounts.items()
        }

        for name, amount in amounts.items():
            envelope = self._find(name)
            if envelope is None:
                self._envelopes.append(Envelope(name=name, amount=amount))
            else:
                envelope.amount = amount
        logger.info("Updated %d envelope amounts", len(amounts))

    def add_envelope(self, name: str, amount: Decimal = Decimal("0")) -> None:
        """Add a new envelope.

        Raises:
            DuplicateError: If an envelope with the same name exists
            ValidationError: If amount is negative
        """
        if self._find(name) is not None:
            raise DuplicateError(duplicate_envelope(name))
        amount = _envelope_amount(name, amount)
        self._envelopes.append(Envelope(name=name, amount=amount))
        logger.info("Added envelope %s", name)

    def remove_envelope(self, name: str) -> None:
        """Remove an envelope by name.

        Raises:
            NotFoundError: If no envelope has that name
            ValidationError: If removing the reserved "Misc" envelope
        """
        if name == MISC_ENVELOPE:
            raise ValidationError(f"The '{MISC_ENVELOPE}' envelope cannot be removed")
        if self._find(name) is None:
            raise NotFoundError(envelope_not_found(name))
        self._envelopes = [e for e in self._envelopes if e.name != name]
        logger.info("Removed envelope %s", name)

    def evaluate_budget(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> BudgetEvaluation:
        budget = {envelope.name: envelope.amount for envelope in self._envelopes}
        actual = {name: Decimal("0") for name in budget}
        for txn in self.analyzer.transactions_in_month(transactions, month, year):
            if txn.amount >= 0:
                continue
            name = txn.category if txn.category in budget else MISC_ENVELOPE
            actual[name] += abs(txn.amount)

        overspent = [name for name, amount in budget.items() if actual[name] > amount]
        remaining = {name: amount - actual[name] for name, amount in budget.items()}
        status = OVER_BUDGET if overspent else ON_TRACK

        logger.debug("Envelope evaluation for %d-%02d: %s", year, month, status)
        return BudgetEvaluation(
            status=status,
            details={
                "budget": budget,
                "actual": actual,
                "overspent_envelopes": overspent,
                "remaining_amounts": remaining,
            },
        )


STRATEGIES: dict[BudgetStrategyName, type[BudgetStrategy]] = {
    BudgetStrategyName.FIFTY_THIRTY_TWENTY: FixedRatioStrategy,
    BudgetStrategyName.ZERO_BASED: ZeroBasedStrategy,
    BudgetStrategyName.ENVELOPE: EnvelopeStrategy,
}


def create_budget_strategy(name: str | BudgetStrategyName) -> BudgetStrategy:
    """Create a fresh strategy instance by name.

    Raises:
        ValidationError: If the name is not a known strategy
    """
    try:
        key = BudgetStrategyName(name.upper() if isinstance(name, str) else name)
    except ValueError:
        choices = ", ".join(s.value for s in BudgetStrategyName)
        raise ValidationError(
            f"Unknown budget strategy '{name}'. Supported strategies: {choices}"
        )
    return STRATEGIES[key]()
