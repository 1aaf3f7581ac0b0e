"""Transaction aggregation service."""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from finsight.domain.entities import Transaction

logger = logging.getLogger(__name__)

NEW_CATEGORY_CHANGE = Decimal("100")


class TransactionAnalyzer:
    """Monthly aggregates over a sequence of transactions.

    Months are 1-based, as in ``datetime.date.month``.
    """

    def transactions_in_month(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> list[Transaction]:
        """Return transactions dated within the given month.

        Args:
            transactions: Transactions to filter
            month: Month number (1-12)
            year: Four digit year

        Returns:
            Transactions in the month, in their original order
        """
        return [
            txn
            for txn in transactions
            if txn.date.month == month and txn.date.year == year
        ]

    def monthly_income(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> Decimal:
        """Sum of positive amounts in the month (0 if none)."""
        return sum(
            (txn.amount for txn in self.transactions_in_month(transactions, month, year)
             if txn.amount > 0),
            Decimal("0"),
        )

    def monthly_spending(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> Decimal:
        """Sum of absolute expense amounts in the month (0 if none)."""
        return sum(
            (abs(txn.amount) for txn in self.transactions_in_month(transactions, month, year)
             if txn.amount < 0),
            Decimal("0"),
        )

    def net_cash_flow(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> Decimal:
        """Income minus spending for the month."""
        return self.monthly_income(transactions, month, year) - self.monthly_spending(
            transactions, month, year
        )

    def spending_by_category(
        self, transactions: Sequence[Transaction], month: int, year: int
    ) -> dict[str, Decimal]:
        """Total expense per category for the month.

        Categories without expenses in the month are absent from the result.
        """
        totals: dict[str, Decimal] = defaultdict(Decimal)
        for txn in self.transactions_in_month(transactions, month, year):
            if txn.amount < 0:
                totals[txn.category] += abs(txn.amount)
        return dict(totals)

    def compare_monthly_spending(
        self,
        transactions: Sequence[Transaction],
        month1: int,
        year1: int,
        month2: int,
        year2: int,
    ) -> dict[str, Decimal]:
        """Percent change of category spending from period 1 to period 2.

        A category with no spending in period 1 reports a flat +100 instead of
        a real percentage, since the change from zero is undefined.

        Args:
            transactions: Transactions covering both periods
            month1: Month of the base period
            year1: Year of the base period
            month2: Month of the compared period
            year2: Year of the compared period

        Returns:
            Mapping of category to percent change
        """
        spending1 = self.spending_by_category(transactions, month1, year1)
        spending2 = self.spending_by_category(transactions, month2, year2)

        categories = list(spending1)
        categories.extend(c for c in spending2 if c not in spending1)

        result: dict[str, Decimal] = {}
        for category in categories:
            amount1 = spending1.get(category, Decimal("0"))
            amount2 = spending2.get(category, Decimal("0"))
            if amount1 == 0:
                result[category] = NEW_CATEGORY_CHANGE
            else:
                result[category] = (amount2 - amount1) / amount1 * 100

        logger.debug(
            "Compared %d categories between %d-%02d and %d-%02d",
            len(result), year1, month1, year2, month2,
        )
        return result
