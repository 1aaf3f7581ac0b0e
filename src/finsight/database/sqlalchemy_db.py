"""Generic SQLAlchemy database implementation."""

import logging
from typing import Optional
from datetime import date
from sqlalchemy.orm import Session

from finsight.database.base import Database
from finsight.database.models import (
    Account,
    FinancialGoal,
    Recommendation,
    Transaction,
    create_session_factory,
)
from finsight.database.mappers import (
    account_to_domain,
    account_to_orm,
    goal_to_domain,
    goal_to_orm,
    recommendation_to_domain,
    recommendation_to_orm,
    transaction_to_domain,
    transaction_to_orm,
)
from finsight.domain.entities import (
    Account as DomainAccount,
    FinancialGoal as DomainFinancialGoal,
    Recommendation as DomainRecommendation,
    Transaction as DomainTransaction,
)
from finsight.domain.errors import (
    DuplicateError,
    NotFoundError,
    duplicate_entity,
    entity_not_found,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///:memory:')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _get_row(self, model, entity_id: str):
        session = self._get_session()
        return session.query(model).filter(model.id == entity_id).first()

    def _require_row(self, model, entity_id: str, kind: str):
        row = self._get_row(model, entity_id)
        if row is None:
            raise NotFoundError(entity_not_found(kind, entity_id))
        return row

    def _insert(self, row, kind: str) -> None:
        if self._get_row(type(row), row.id) is not None:
            raise DuplicateError(duplicate_entity(kind, row.id))
        session = self._get_session()
        session.add(row)
        session.commit()
        logger.debug("Stored %s %s", kind, row.id)

    def _delete(self, model, entity_id: str, kind: str) -> None:
        row = self._require_row(model, entity_id, kind)
        session = self._get_session()
        session.delete(row)
        session.commit()
        logger.debug("Deleted %s %s", kind, entity_id)

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def is_empty(self) -> bool:
        """Return True when no entity of any kind is stored."""
        session = self._get_session()
        return all(
            session.query(model).first() is None
            for model in (Account, Transaction, FinancialGoal, Recommendation)
        )

    # Account operations
    def add_account(self, account: DomainAccount) -> None:
        """Store a new account."""
        self._insert(account_to_orm(account), "Account")

    def get_account(self, account_id: str) -> Optional[DomainAccount]:
        """Get account by ID."""
        row = self._get_row(Account, account_id)
        return account_to_domain(row) if row is not None else None

    def list_accounts(self) -> list[DomainAccount]:
        """List all accounts in insertion order."""
        session = self._get_session()
        return [account_to_domain(row) for row in session.query(Account).order_by(Account.pk)]

    def update_account(self, account: DomainAccount) -> None:
        """Replace a stored account with a new value."""
        row = self._require_row(Account, account.id, "Account")
        account_to_orm(account, row)
        self._get_session().commit()

    # Transaction operations
    def add_transaction(self, transaction: DomainTransaction) -> None:
        """Store a new transaction."""
        self._insert(transaction_to_orm(transaction), "Transaction")

    def get_transaction(self, transaction_id: str) -> Optional[DomainTransaction]:
        """Get transaction by ID."""
        row = self._get_row(Transaction, transaction_id)
        return transaction_to_domain(row) if row is not None else None

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[str] = None,
        account_id: Optional[str] = None,
    ) -> list[DomainTransaction]:
        """List transactions with optional filters, ordered by date."""
        session = self._get_session()
        query = session.query(Transaction)

        if start_date is not None:
            query = query.filter(Transaction.date >= start_date)
        if end_date is not None:
            query = query.filter(Transaction.date <= end_date)
        if category is not None:
            query = query.filter(Transaction.category == category)
        if account_id is not None:
            query = query.filter(Transaction.account_id == account_id)

        rows = query.order_by(Transaction.date, Transaction.pk).all()
        return [transaction_to_domain(row) for row in rows]

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""
        self._delete(Transaction, transaction_id, "Transaction")

    # Goal operations
    def add_goal(self, goal: DomainFinancialGoal) -> None:
        """Store a new goal."""
        self._insert(goal_to_orm(goal), "Goal")

    def get_goal(self, goal_id: str) -> Optional[DomainFinancialGoal]:
        """Get goal by ID."""
        row = self._get_row(FinancialGoal, goal_id)
        return goal_to_domain(row) if row is not None else None

    def list_goals(self) -> list[DomainFinancialGoal]:
        """List all goals in insertion order."""
        session = self._get_session()
        rows = session.query(FinancialGoal).order_by(FinancialGoal.pk)
        return [goal_to_domain(row) for row in rows]

    def update_goal(self, goal: DomainFinancialGoal) -> None:
        """Replace a stored goal with a new value."""
        row = self._require_row(FinancialGoal, goal.id, "Goal")
        goal_to_orm(goal, row)
        self._get_session().commit()

    def delete_goal(self, goal_id: str) -> None:
        """Delete a goal."""
        self._delete(FinancialGoal, goal_id, "Goal")

    # Recommendation operations
    def add_recommendation(self, recommendation: DomainRecommendation) -> None:
        """Store a curated recommendation."""
        self._insert(recommendation_to_orm(recommendation), "Recommendation")

    def list_recommendations(self) -> list[DomainRecommendation]:
        """List stored recommendations in insertion order."""
        session = self._get_session()
        rows = session.query(Recommendation).order_by(Recommendation.pk)
        return [recommendation_to_domain(row) for row in rows]

    def delete_recommendation(self, recommendation_id: str) -> None:
        """Delete a stored recommendation."""
        self._delete(Recommendation, recommendation_id, "Recommendation")
