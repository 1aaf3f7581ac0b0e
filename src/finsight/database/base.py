"""Abstract store interface for the application state collections."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from finsight.domain.entities import (
    Account,
    FinancialGoal,
    Recommendation,
    Transaction,
)


class Database(ABC):
    """Abstract store for accounts, transactions, goals and recommendations."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True when no entity of any kind is stored."""
        pass

    # Account operations
    @abstractmethod
    def add_account(self, account: Account) -> None:
        """Store a new account."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts in insertion order."""
        pass

    @abstractmethod
    def update_account(self, account: Account) -> None:
        """Replace a stored account with a new value."""
        pass

    # Transaction operations
    @abstractmethod
    def add_transaction(self, transaction: Transaction) -> None:
        """Store a new transaction."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: str) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[str] = None,
        account_id: Optional[str] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, ordered by date."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        pass

    # Goal operations
    @abstractmethod
    def add_goal(self, goal: FinancialGoal) -> None:
        """Store a new goal."""
        pass

    @abstractmethod
    def get_goal(self, goal_id: str) -> Optional[FinancialGoal]:
        """Get goal by ID."""
        pass

    @abstractmethod
    def list_goals(self) -> list[FinancialGoal]:
        """List all goals in insertion order."""
        pass

    @abstractmethod
    def update_goal(self, goal: FinancialGoal) -> None:
        """Replace a stored goal with a new value."""
        pass

    @abstractmethod
    def delete_goal(self, goal_id: str) -> None:
        """Delete a goal."""
        pass

    # Recommendation operations
    @abstractmethod
    def add_recommendation(self, recommendation: Recommendation) -> None:
        """Store a curated recommendation."""
        pass

    @abstractmethod
    def list_recommendations(self) -> list[Recommendation]:
        """List stored recommendations in insertion order."""
        pass

    @abstractmethod
    def delete_recommendation(self, recommendation_id: str) -> None:
        """Delete a stored recommendation."""
        pass
