"""Sample data the dashboard starts with."""

import logging
from datetime import date
from decimal import Decimal

from finsight.database.base import Database
from finsight.domain.entities import (
    Account,
    AccountType,
    FinancialGoal,
    Recommendation,
    RecommendationType,
    Transaction,
)

logger = logging.getLogger(__name__)

SAMPLE_ACCOUNTS = (
    Account(
        id="acc-1",
        name="Checking Account",
        type=AccountType.CHECKING,
        account_number="xxxx-1234",
        balance=Decimal("2580.45"),
        change_percent=Decimal("-3.2"),
        icon_type="Wallet",
    ),
    Account(
        id="acc-2",
        name="Savings Account",
        type=AccountType.SAVINGS,
        account_number="xxxx-5678",
        balance=Decimal("15750.00"),
        change_percent=Decimal("2.5"),
        icon_type="PiggyBank",
        interest_rate=Decimal("0.01"),
    ),
    Account(
        id="acc-3",
        name="Investment Portfolio",
        type=AccountType.INVESTMENT,
        account_number="xxxx-9012",
        balance=Decimal("32145.78"),
        change_percent=Decimal("7.8"),
        icon_type="TrendingUp",
    ),
    Account(
        id="acc-4",
        name="Credit Card",
        type=AccountType.CREDIT_CARD,
        account_number="xxxx-3456",
        balance=Decimal("-1245.36"),
        change_percent=Decimal("1.5"),
        icon_type="CreditCard",
        interest_rate=Decimal("0.0199"),
        credit_limit=Decimal("5000.00"),
    ),
)


def _txn(id, description, amount, day, category, account_id):
    return Transaction(
        id=id,
        description=description,
        amount=Decimal(amount),
        date=date(2023, 10, day),
        category=category,
        account_id=account_id,
    )


SAMPLE_TRANSACTIONS = (
    _txn("tx-1", "Salary Deposit", "3500.00", 1, "Income", "acc-1"),
    _txn("tx-2", "Rent Payment", "-1200.00", 3, "Rent", "acc-1"),
    _txn("tx-3", "Grocery Shopping", "-85.43", 5, "Groceries", "acc-1"),
    _txn("tx-4", "Electric Bill", "-75.00", 10, "Utilities", "acc-1"),
    _txn("tx-5", "Restaurant Dinner", "-52.30", 12, "Dining Out", "acc-1"),
    _txn("tx-6", "Transfer to Savings", "-500.00", 15, "Transfer", "acc-1"),
    _txn("tx-7", "Transfer from Checking", "500.00", 15, "Transfer", "acc-2"),
    _txn("tx-8", "Dividend Payment", "125.78", 18, "Investment", "acc-3"),
    _txn("tx-9", "Credit Card Payment", "-250.00", 20, "Debt Payment", "acc-1"),
    _txn("tx-10", "Gym Membership", "-45.00", 21, "Health & Fitness", "acc-4"),
)

SAMPLE_GOALS = (
    FinancialGoal(
        id="goal-1",
        name="Emergency Fund",
        target_amount=Decimal("10000.00"),
        current_amount=Decimal("5000.00"),
        target_date=date(2024, 6, 30),
        created_at=date(2023, 1, 15),
    ),
    FinancialGoal(
        id="goal-2",
        name="New Car",
        target_amount=Decimal("25000.00"),
        current_amount=Decimal("8500.00"),
        target_date=date(2025, 12, 31),
        created_at=date(2023, 3, 10),
    ),
    FinancialGoal(
        id="goal-3",
        name="Vacation",
        target_amount=Decimal("3000.00"),
        current_amount=Decimal("1500.00"),
        target_date=date(2024, 8, 15),
        created_at=date(2023, 5, 22),
    ),
)

SAMPLE_RECOMMENDATIONS = (
    Recommendation(
        id="rec-1",
        title="Reduce dining out expenses",
        description=(
            "You spent $320 on dining out last month, which is 15% higher than your "
            "monthly average. Consider cooking at home more often to save money."
        ),
        type=RecommendationType.SAVING,
        impact=Decimal("150.00"),
        steps=(
            "Set a weekly dining out budget",
            "Prepare lunch at home to take to work",
            "Try meal prepping on weekends",
        ),
    ),
    Recommendation(
        id="rec-2",
        title="Increase retirement contributions",
        description=(
            "Based on your income and age, you could optimize your retirement savings "
            "by increasing your 401(k) contributions by at least 3%."
        ),
        type=RecommendationType.INVESTING,
        impact=Decimal("15000.00"),
        steps=(
            "Contact your HR department to update 401(k) contribution",
            "Aim for at least employer match plus 3%",
            "Consider diversifying with a Roth IRA",
        ),
    ),
    Recommendation(
        id="rec-3",
        title="Refinance your mortgage",
        description=(
            "Current mortgage rates are lower than your existing rate. Refinancing "
            "could save you significant money over the life of your loan."
        ),
        type=RecommendationType.SAVING,
        impact=Decimal("250.00"),
        steps=(
            "Research current mortgage rates",
            "Contact at least 3 lenders for quotes",
            "Calculate the break-even point for refinancing costs",
        ),
    ),
    Recommendation(
        id="rec-4",
        title="Adjust your budget allocation",
        description=(
            "Your entertainment spending has consistently exceeded your budget. "
            "Consider reallocating funds from other categories or increasing this "
            "category."
        ),
        type=RecommendationType.BUDGETING,
        impact=Decimal("15.00"),
        steps=(
            "Review your entertainment transactions from the past 3 months",
            "Set a more realistic entertainment budget",
            "Look for free or low-cost entertainment alternatives",
        ),
    ),
)


def seed_fixtures(db: Database) -> bool:
    """Load the sample data into an empty database.

    Returns:
        True if data was loaded, False if the database already had data
    """
    if not db.is_empty():
        return False

    for account in SAMPLE_ACCOUNTS:
        db.add_account(account)
    for transaction in SAMPLE_TRANSACTIONS:
        db.add_transaction(transaction)
    for goal in SAMPLE_GOALS:
        db.add_goal(goal)
    for recommendation in SAMPLE_RECOMMENDATIONS:
        db.add_recommendation(recommendation)

    logger.info(
        "Seeded %d accounts, %d transactions, %d goals, %d recommendations",
        len(SAMPLE_ACCOUNTS),
        len(SAMPLE_TRANSACTIONS),
        len(SAMPLE_GOALS),
        len(SAMPLE_RECOMMENDATIONS),
    )
    return True
