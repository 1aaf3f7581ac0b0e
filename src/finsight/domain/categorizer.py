"""Pattern-based transaction categorization."""

import logging
import re
from typing import Pattern

from finsight.domain.errors import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Other"

# Order matters: descriptions can match several categories and the first
# category in this list wins (e.g. "netflix" is a Utility before Entertainment).
DEFAULT_RULES: list[tuple[str, list[str]]] = [
    ("Groceries", [
        "grocery", "supermarket", "food", "market",
        "walmart", "target", "kroger", "safeway", "whole foods",
    ]),
    ("Dining Out", [
        "restaurant", "cafe", "coffee", "bar", "pub",
        "mcdonald", "burger", "pizza", "subway", "starbucks",
    ]),
    ("Transportation", [
        "gas", "fuel", "uber", "lyft", "taxi", "parking",
        "transit", "train", "bus", "airline", "flight",
    ]),
    ("Utilities", [
        "electric", "water", "gas bill", "utility", "phone",
        "internet", "cable", "netflix", "spotify",
    ]),
    ("Rent", ["rent", "lease", "apartment", "housing"]),
    ("Entertainment", [
        "movie", "theater", "cinema", "concert", "ticket",
        "game", "subscription", "netflix", "spotify", "hulu",
    ]),
    ("Shopping", [
        "amazon", "ebay", "store", "mall", "shop",
        "clothing", "electronics",
    ]),
    ("Healthcare", [
        "doctor", "hospital", "clinic", "medical", "pharmacy",
        "prescription", "health",
    ]),
    ("Income", [
        "salary", "deposit", "income", "paycheck", "interest",
        "dividend", "refund", "payment received",
    ]),
]


def _compile(pattern: str | Pattern[str]) -> Pattern[str]:
    if not isinstance(pattern, str):
        return pattern
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise ValidationError(f"Invalid pattern '{pattern}': {e}") from e


class TransactionCategorizer:
    """Assigns categories to free-text transaction descriptions.

    Each instance owns its own copy of the rules, so ``add_rule`` only affects
    that instance. Rules are not synchronized for concurrent mutation.
    """

    def __init__(self, rules: list[tuple[str, list[str]]] | None = None):
        """Initialize categorizer.

        Args:
            rules: Ordered (category, patterns) pairs. Defaults to DEFAULT_RULES.
        """
        self._rules: dict[str, list[Pattern[str]]] = {}
        for category, patterns in DEFAULT_RULES if rules is None else rules:
            self._rules[category] = [_compile(p) for p in patterns]

    @property
    def categories(self) -> list[str]:
        """Categories in priority order."""
        return list(self._rules)

    def categorize(self, description: str) -> str:
        """Return the first category with a matching pattern, or "Other"."""
        for category, patterns in self._rules.items():
            if any(pattern.search(description) for pattern in patterns):
                return category
        return DEFAULT_CATEGORY

    def add_rule(self, category: str, pattern: str | Pattern[str]) -> None:
        """Append a pattern to a category's rules.

        A category seen for the first time is checked after all existing ones.

        Args:
            category: Category name
            pattern: Regular expression string (matched case-insensitively) or
                compiled pattern

        Raises:
            ValidationError: If the pattern is not a valid regular expression
        """
        pattern = _compile(pattern)
        self._rules.setdefault(category, []).append(pattern)
        logger.debug("Added rule %r for category %s", pattern.pattern, category)
