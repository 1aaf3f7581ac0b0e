"""Transaction construction helpers."""

import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from finsight.domain.entities import Transaction
from finsight.domain.errors import ValidationError, amount_must_be_positive

TRANSFER_CATEGORY = "Transfer"


def new_transaction_id() -> str:
    """Generate an identifier for a new transaction."""
    return f"tx-{uuid.uuid4().hex[:12]}"


class TransactionFactory:
    """Builds transactions with the sign convention applied.

    Amounts are passed as positive values; expenses are stored negated.
    """

    def create_income_transaction(
        self,
        description: str,
        amount: Decimal,
        date: date,
        category: str,
        account_id: str,
        tags: tuple[str, ...] = (),
        notes: Optional[str] = None,
    ) -> Transaction:
        """Create an income transaction.

        Raises:
            ValidationError: If amount is not positive
        """
        if amount <= 0:
            raise ValidationError(amount_must_be_positive("Income"))
        return Transaction(
            id=new_transaction_id(),
            description=description,
            amount=amount,
            date=date,
            category=category,
            account_id=account_id,
            tags=tuple(tags),
            notes=notes,
        )

    def create_expense_transaction(
        self,
        description: str,
        amount: Decimal,
        date: date,
        category: str,
        account_id: str,
        tags: tuple[str, ...] = (),
        notes: Optional[str] = None,
    ) -> Transaction:
        """Create an expense transaction with a negative amount.

        Raises:
            ValidationError: If amount is not positive
        """
        if amount <= 0:
            raise ValidationError(amount_must_be_positive("Expense"))
        return Transaction(
            id=new_transaction_id(),
            description=description,
            amount=-amount,
            date=date,
            category=category,
            account_id=account_id,
            tags=tuple(tags),
            notes=notes,
        )

    def create_transfer_transactions(
        self,
        amount: Decimal,
        date: date,
        from_account_id: str,
        to_account_id: str,
        notes: Optional[str] = None,
    ) -> tuple[Transaction, Transaction]:
        """Create the withdrawal and deposit legs of a transfer.

        Returns:
            Tuple of (withdrawal, deposit)

        Raises:
            ValidationError: If amount is not positive
        """
        if amount <= 0:
            raise ValidationError(amount_must_be_positive("Transfer"))

        transfer_id = new_transaction_id()
        withdrawal = Transaction(
            id=f"{transfer_id}-from",
            description=f"Transfer to account {to_account_id}",
            amount=-amount,
            date=date,
            category=TRANSFER_CATEGORY,
            account_id=from_account_id,
            notes=notes,
        )
        deposit = Transaction(
            id=f"{transfer_id}-to",
            description=f"Transfer from account {from_account_id}",
            amount=amount,
            date=date,
            category=TRANSFER_CATEGORY,
            account_id=to_account_id,
            notes=notes,
        )
        return withdrawal, deposit
