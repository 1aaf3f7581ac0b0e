"""Domain model entities for finsight.

These are plain data classes representing business concepts. The analytical
services only read them and return new derived values; ledger operations in
``finsight.domain.ledger`` produce updated copies rather than mutating.
"""

from dataclasses import dataclass, field
from datetime import datetime, date, UTC
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from finsight.domain.errors import ValidationError


class AccountType(str, Enum):
    """Kinds of accounts tracked by the dashboard."""

    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    INVESTMENT = "INVESTMENT"
    CREDIT_CARD = "CREDIT_CARD"
    LOAN = "LOAN"
    GROUP = "GROUP"


class RecommendationType(str, Enum):
    """Recommendation kinds, used for filtering and state prioritization."""

    SAVING = "saving"
    INVESTING = "investing"
    BUDGETING = "budgeting"
    DEBT = "debt"
    GENERAL = "general"


@dataclass(frozen=True)
class Holding:
    """A position held in an investment account."""

    symbol: str
    shares: Decimal
    value: Decimal


@dataclass(frozen=True)
class Account:
    """Account domain entity.

    Credit card balances are conventionally zero or negative (debt).
    ``interest_rate`` applies to savings and credit card accounts,
    ``credit_limit`` to credit cards and ``holdings`` to investment accounts.
    """

    id: str
    name: str
    type: AccountType
    account_number: str
    balance: Decimal
    change_percent: Decimal = Decimal("0")
    last_updated: datetime = field(default_factory=lambda: datetime.now(UTC))
    icon_type: str = ""
    interest_rate: Optional[Decimal] = None
    credit_limit: Optional[Decimal] = None
    holdings: tuple[Holding, ...] = ()


class AccountGroup:
    """Composite account whose balance is derived from its members.

    Membership can change, but the balance cannot be assigned directly.
    """

    type = AccountType.GROUP
    account_number = "GROUP"

    def __init__(self, id: str, name: str, icon_type: str = ""):
        self.id = id
        self.name = name
        self.icon_type = icon_type
        self.change_percent = Decimal("0")
        self.last_updated = datetime.now(UTC)
        self._accounts: list["Account | AccountGroup"] = []

    @property
    def accounts(self) -> tuple["Account | AccountGroup", ...]:
        return tuple(self._accounts)

    @property
    def balance(self) -> Decimal:
        return sum((account.balance for account in self._accounts), Decimal("0"))

    @balance.setter
    def balance(self, value: Decimal) -> None:
        raise ValidationError("Cannot directly set the balance of an account group")

    def add_account(self, account: "Account | AccountGroup") -> None:
        self._accounts.append(account)
        self.last_updated = datetime.now(UTC)

    def remove_account(self, account_id: str) -> None:
        self._accounts = [a for a in self._accounts if a.id != account_id]
        self.last_updated = datetime.now(UTC)


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    Positive amounts are income, negative amounts are expenses.
    """

    id: str
    description: str
    amount: Decimal
    date: date
    category: str
    account_id: str
    tags: tuple[str, ...] = ()
    notes: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0


@dataclass(frozen=True)
class FinancialGoal:
    """Savings goal. ``current_amount`` may exceed ``target_amount``."""

    id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: date
    created_at: date
    description: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class Recommendation:
    """Derived recommendation.

    The unit of ``impact`` depends on the type: currency per month for
    saving tips, currency per year for investing tips.
    """

    id: str
    title: str
    description: str
    type: RecommendationType
    impact: Decimal
    steps: tuple[str, ...] = ()
    confidence: Optional[int] = None


@dataclass
class Envelope:
    """Named cash allocation owned by the envelope budget strategy."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class BudgetEvaluation:
    """Outcome of evaluating a month of transactions against a strategy."""

    status: str
    details: dict[str, Any]


@dataclass(frozen=True)
class GoalStatus:
    """Progress snapshot of a goal at a given day."""

    goal: FinancialGoal
    progress: Decimal
    on_track: bool
    monthly_needed: Decimal
    remaining: Decimal
