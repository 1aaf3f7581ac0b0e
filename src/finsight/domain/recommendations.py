"""Rule-based recommendation engine.

Recommendations are derived from current transactions and accounts with
fixed heuristics and are regenerated on every call.
"""

import logging
import uuid
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from dateutil.relativedelta import relativedelta

from finsight.domain.entities import (
    Account,
    AccountType,
    Recommendation,
    RecommendationType,
    Transaction,
)

logger = logging.getLogger(__name__)

TOP_CATEGORY_COUNT = 3
SUGGESTED_REDUCTION = Decimal("0.2")
INCOME_TREND_MONTHS = 6
INCOME_VARIANCE_RATIO = Decimal("0.2")
SAVINGS_INVESTMENT_THRESHOLD = Decimal("10000")
ASSUMED_RETURN_DIFFERENCE = Decimal("0.05")


def new_recommendation_id() -> str:
    """Generate an identifier for a derived recommendation."""
    return f"rec-{uuid.uuid4().hex[:12]}"


def population_variance(values: Sequence[Decimal]) -> Decimal:
    """Population variance of the values (0 for an empty sequence)."""
    if not values:
        return Decimal("0")
    mean = sum(values, Decimal("0")) / len(values)
    return sum(((v - mean) ** 2 for v in values), Decimal("0")) / len(values)


class RecommendationEngine:
    """Generates recommendations from transaction and account aggregates."""

    def generate(
        self,
        accounts: Sequence[Account],
        transactions: Sequence[Transaction],
        today: Optional[date] = None,
    ) -> list[Recommendation]:
        """Run every analysis and concatenate the results in order.

        No deduplication or ranking is applied.
        """
        recommendations = []
        recommendations.extend(self.analyze_spending_patterns(transactions))
        recommendations.extend(self.analyze_income_trends(transactions, today))
        recommendations.extend(
            self.analyze_investment_opportunities(accounts, transactions)
        )
        logger.debug("Generated %d recommendations", len(recommendations))
        return recommendations

    def analyze_spending_patterns(
        self, transactions: Sequence[Transaction]
    ) -> list[Recommendation]:
        """Suggest a 20% cut in each of the three highest-spending categories."""
        recommendations = []
        for name, amount in self.find_high_spending_categories(
            self.get_category_spending(transactions)
        ):
            recommendations.append(
                Recommendation(
                    id=new_recommendation_id(),
                    title=f"Reduce {name} expenses",
                    description=(
                        f"You're spending more on {name} than most people with similar "
                        "income. Consider reducing your spending in this category."
                    ),
                    type=RecommendationType.SAVING,
                    impact=amount * SUGGESTED_REDUCTION,
                    steps=(
                        f"Set a budget for {name} that is 20% less than your current spending",
                        f"Track your {name} expenses weekly",
                        "Look for alternatives or ways to reduce costs in this category",
                    ),
                )
            )
        return recommendations

    def analyze_income_trends(
        self, transactions: Sequence[Transaction], today: Optional[date] = None
    ) -> list[Recommendation]:
        """Flag unstable income over the last six calendar months.

        Income is considered unstable when the population variance of the
        monthly totals exceeds 20% of their mean. The impact of stabilizing
        income is not quantified, so it is reported as 0.
        """
        monthly = [amount for _, amount in self.get_monthly_income(transactions, today)]
        mean = sum(monthly, Decimal("0")) / len(monthly)
        variance = population_variance(monthly)

        if variance <= INCOME_VARIANCE_RATIO * mean:
            return []

        logger.debug("Income variance %s exceeds threshold for mean %s", variance, mean)
        return [
            Recommendation(
                id=new_recommendation_id(),
                title="Stabilize your income",
                description=(
                    "Your income varies significantly month to month. Consider ways "
                    "to create more income stability."
                ),
                type=RecommendationType.GENERAL,
                impact=Decimal("0"),
                steps=(
                    "Look for steady side income opportunities",
                    "Build an emergency fund of at least 3 months of expenses",
                    "Create a budget based on your lowest monthly income",
                ),
            )
        ]

    def analyze_investment_opportunities(
        self,
        accounts: Sequence[Account],
        transactions: Sequence[Transaction] = (),
    ) -> list[Recommendation]:
        """Suggest investing when large savings sit beside no investment account.

        The impact assumes a 5% yearly return difference on the savings total.
        """
        total_savings = sum(
            (a.balance for a in accounts if a.type == AccountType.SAVINGS),
            Decimal("0"),
        )
        has_investments = any(a.type == AccountType.INVESTMENT for a in accounts)

        if total_savings <= SAVINGS_INVESTMENT_THRESHOLD or has_investments:
            return []

        return [
            Recommendation(
                id=new_recommendation_id(),
                title="Start investing your savings",
                description=(
                    "You have significant savings that could be earning higher "
                    "returns through investments."
                ),
                type=RecommendationType.INVESTING,
                impact=total_savings * ASSUMED_RETURN_DIFFERENCE,
                steps=(
                    "Research investment options like index funds or ETFs",
                    "Consider opening a brokerage account",
                    "Start with a small percentage of your savings to get "
                    "comfortable with investing",
                ),
            )
        ]

    def get_category_spending(
        self, transactions: Sequence[Transaction]
    ) -> list[tuple[str, Decimal]]:
        """Total expense per category across all transactions, first-seen order."""
        totals: dict[str, Decimal] = defaultdict(Decimal)
        for txn in transactions:
            if txn.amount < 0:
                totals[txn.category] += abs(txn.amount)
        return list(totals.items())

    def find_high_spending_categories(
        self, category_spending: list[tuple[str, Decimal]]
    ) -> list[tuple[str, Decimal]]:
        """Top categories by amount; ties keep their original order."""
        ranked = sorted(category_spending, key=lambda item: item[1], reverse=True)
        return ranked[:TOP_CATEGORY_COUNT]

    def get_monthly_income(
        self,
        transactions: Sequence[Transaction],
        today: Optional[date] = None,
        months: int = INCOME_TREND_MONTHS,
    ) -> list[tuple[str, Decimal]]:
        """Income per calendar month, newest first, ending with today's month.

        Months without income report 0.

        Returns:
            List of ("YYYY-MM", total) pairs
        """
        today = today or date.today()
        first_of_month = today.replace(day=1)

        result = []
        for offset in range(months):
            month_start = first_of_month - relativedelta(months=offset)
            total = sum(
                (
                    txn.amount
                    for txn in transactions
                    if txn.amount > 0
                    and txn.date.year == month_start.year
                    and txn.date.month == month_start.month
                ),
                Decimal("0"),
            )
            result.append((month_start.strftime("%Y-%m"), total))
        return result

    def filter_by_type(
        self,
        recommendations: Sequence[Recommendation],
        recommendation_type: Optional[RecommendationType],
    ) -> list[Recommendation]:
        """Keep recommendations of one type (all when type is None)."""
        if recommendation_type is None:
            return list(recommendations)
        return [r for r in recommendations if r.type == recommendation_type]
