"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic from both the domain entities and
the table layout.
"""

from finsight.domain import entities as domain
from finsight.database.models import (
    Account as ORMAccount,
    FinancialGoal as ORMFinancialGoal,
    Recommendation as ORMRecommendation,
    Transaction as ORMTransaction,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=domain.AccountType(orm_account.type),
        account_number=orm_account.account_number,
        balance=orm_account.balance,
        change_percent=orm_account.change_percent,
        last_updated=orm_account.last_updated,
        icon_type=orm_account.icon_type,
        interest_rate=orm_account.interest_rate,
        credit_limit=orm_account.credit_limit,
    )


def account_to_orm(account: domain.Account, orm_account: ORMAccount | None = None) -> ORMAccount:
    """Copy a domain Account onto a (new or existing) SQLAlchemy model."""
    orm_account = orm_account or ORMAccount(id=account.id)
    orm_account.name = account.name
    orm_account.type = account.type.value
    orm_account.account_number = account.account_number
    orm_account.balance = account.balance
    orm_account.change_percent = account.change_percent
    orm_account.last_updated = account.last_updated
    orm_account.icon_type = account.icon_type
    orm_account.interest_rate = account.interest_rate
    orm_account.credit_limit = account.credit_limit
    return orm_account


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        description=orm_transaction.description,
        amount=orm_transaction.amount,
        date=orm_transaction.date,
        category=orm_transaction.category,
        account_id=orm_transaction.account_id,
        tags=tuple(orm_transaction.tags or ()),
        notes=orm_transaction.notes,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy model."""
    return ORMTransaction(
        id=transaction.id,
        description=transaction.description,
        amount=transaction.amount,
        date=transaction.date,
        category=transaction.category,
        account_id=transaction.account_id,
        tags=list(transaction.tags),
        notes=transaction.notes,
    )


def goal_to_domain(orm_goal: ORMFinancialGoal) -> domain.FinancialGoal:
    """Convert SQLAlchemy FinancialGoal model to domain FinancialGoal entity."""
    return domain.FinancialGoal(
        id=orm_goal.id,
        name=orm_goal.name,
        target_amount=orm_goal.target_amount,
        current_amount=orm_goal.current_amount,
        target_date=orm_goal.target_date,
        created_at=orm_goal.created_at,
        description=orm_goal.description,
        category=orm_goal.category,
    )


def goal_to_orm(
    goal: domain.FinancialGoal, orm_goal: ORMFinancialGoal | None = None
) -> ORMFinancialGoal:
    """Copy a domain FinancialGoal onto a (new or existing) SQLAlchemy model."""
    orm_goal = orm_goal or ORMFinancialGoal(id=goal.id)
    orm_goal.name = goal.name
    orm_goal.target_amount = goal.target_amount
    orm_goal.current_amount = goal.current_amount
    orm_goal.target_date = goal.target_date
    orm_goal.created_at = goal.created_at
    orm_goal.description = goal.description
    orm_goal.category = goal.category
    return orm_goal


def recommendation_to_domain(orm_rec: ORMRecommendation) -> domain.Recommendation:
    """Convert SQLAlchemy Recommendation model to domain Recommendation entity."""
    return domain.Recommendation(
        id=orm_rec.id,
        title=orm_rec.title,
        description=orm_rec.description,
        type=domain.RecommendationType(orm_rec.type),
        impact=orm_rec.impact,
        steps=tuple(orm_rec.steps or ()),
        confidence=orm_rec.confidence,
    )


def recommendation_to_orm(recommendation: domain.Recommendation) -> ORMRecommendation:
    """Convert domain Recommendation entity to a new SQLAlchemy model."""
    return ORMRecommendation(
        id=recommendation.id,
        title=recommendation.title,
        description=recommendation.description,
        type=recommendation.type.value,
        impact=recommendation.impact,
        steps=list(recommendation.steps),
        confidence=recommendation.confidence,
    )
