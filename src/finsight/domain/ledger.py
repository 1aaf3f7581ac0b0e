"""Account ledger operations.

These are not used by the analytical services. Each operation validates its
input, then returns an updated copy of the account; the original value is
never modified.
"""

import logging
from dataclasses import replace
from datetime import datetime, UTC
from decimal import Decimal

from finsight.domain.entities import Account, AccountType, Holding
from finsight.domain.errors import (
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
    amount_must_be_positive,
    holding_not_found,
)

logger = logging.getLogger(__name__)

DEFAULT_SAVINGS_INTEREST_RATE = Decimal("0.01")

_CASH_ACCOUNT_TYPES = (AccountType.CHECKING, AccountType.SAVINGS)


def _require_type(account: Account, *types: AccountType) -> None:
    if account.type not in types:
        allowed = ", ".join(t.value for t in types)
        raise ValidationError(
            f"Operation not supported for {account.type.value} account "
            f"'{account.name}' (requires {allowed})"
        )


def _require_positive(amount: Decimal, kind: str) -> None:
    if amount <= 0:
        raise ValidationError(amount_must_be_positive(kind))


def _updated(account: Account, **changes) -> Account:
    return replace(account, last_updated=datetime.now(UTC), **changes)


def deposit(account: Account, amount: Decimal) -> Account:
    """Add money to a checking or savings account."""
    _require_type(account, *_CASH_ACCOUNT_TYPES)
    _require_positive(amount, "Deposit")
    return _updated(account, balance=account.balance + amount)


def withdraw(account: Account, amount: Decimal) -> Account:
    """Take money out of a checking or savings account.

    Raises:
        InsufficientFundsError: If amount exceeds the balance
    """
    _require_type(account, *_CASH_ACCOUNT_TYPES)
    _require_positive(amount, "Withdrawal")
    if amount > account.balance:
        raise InsufficientFundsError("Insufficient funds")
    return _updated(account, balance=account.balance - amount)


def apply_interest(account: Account) -> Account:
    """Apply one period of interest.

    Savings accounts earn interest on their balance. Credit cards accrue
    interest on outstanding debt only, which makes the balance more negative.
    """
    _require_type(account, AccountType.SAVINGS, AccountType.CREDIT_CARD)

    if account.type == AccountType.SAVINGS:
        rate = account.interest_rate
        if rate is None:
            rate = DEFAULT_SAVINGS_INTEREST_RATE
        return _updated(account, balance=account.balance + account.balance * rate)

    if account.interest_rate is None:
        raise ValidationError(f"Credit card '{account.name}' has no interest rate")
    if account.balance >= 0:
        return account
    interest = abs(account.balance) * account.interest_rate
    return _updated(account, balance=account.balance - interest)


def available_credit(account: Account) -> Decimal:
    """Credit left on a credit card."""
    _require_type(account, AccountType.CREDIT_CARD)
    return (account.credit_limit or Decimal("0")) - abs(account.balance)


def charge(account: Account, amount: Decimal) -> Account:
    """Charge a purchase to a credit card.

    Raises:
        InsufficientFundsError: If the charge would exceed the credit limit
    """
    _require_type(account, AccountType.CREDIT_CARD)
    _require_positive(amount, "Charge")
    if abs(account.balance) + amount > (account.credit_limit or Decimal("0")):
        raise InsufficientFundsError("This would exceed your credit limit")
    return _updated(account, balance=account.balance - amount)


def payment(account: Account, amount: Decimal) -> Account:
    """Pay down a credit card balance."""
    _require_type(account, AccountType.CREDIT_CARD)
    _require_positive(amount, "Payment")
    return _updated(account, balance=account.balance + amount)


def _find_holding(account: Account, symbol: str) -> Holding | None:
    for holding in account.holdings:
        if holding.symbol == symbol:
            return holding
    return None


def buy(account: Account, symbol: str, shares: Decimal, price_per_share: Decimal) -> Account:
    """Buy shares with the account's cash balance.

    Raises:
        InsufficientFundsError: If the cost exceeds the cash balance
    """
    _require_type(account, AccountType.INVESTMENT)
    _require_positive(shares, "Share")
    _require_positive(price_per_share, "Price")

    cost = shares * price_per_share
    if cost > account.balance:
        raise InsufficientFundsError("Insufficient funds for this purchase")

    existing = _find_holding(account, symbol)
    if existing is None:
        holdings = account.holdings + (Holding(symbol=symbol, shares=shares, value=cost),)
    else:
        holdings = tuple(
            replace(h, shares=h.shares + shares, value=h.value + cost)
            if h.symbol == symbol
            else h
            for h in account.holdings
        )

    logger.info("Bought %s %s in account %s", shares, symbol, account.id)
    return _updated(account, balance=account.balance - cost, holdings=holdings)


def sell(account: Account, symbol: str, shares: Decimal, price_per_share: Decimal) -> Account:
    """Sell shares of a holding, crediting the cash balance.

    The remaining position is revalued at the sale price and dropped once it
    holds no shares.

    Raises:
        NotFoundError: If the account holds no such symbol
        ValidationError: If selling more shares than held
    """
    _require_type(account, AccountType.INVESTMENT)
    _require_positive(shares, "Share")
    _require_positive(price_per_share, "Price")

    existing = _find_holding(account, symbol)
    if existing is None:
        raise NotFoundError(holding_not_found(symbol))
    if existing.shares < shares:
        raise ValidationError(f"Not enough shares of {symbol} to sell")

    remaining = existing.shares - shares
    holdings = []
    for h in account.holdings:
        if h.symbol != symbol:
            holdings.append(h)
        elif remaining > 0:
            holdings.append(replace(h, shares=remaining, value=remaining * price_per_share))

    logger.info("Sold %s %s in account %s", shares, symbol, account.id)
    return _updated(
        account,
        balance=account.balance + shares * price_per_share,
        holdings=tuple(holdings),
    )


def update_prices(account: Account, prices: dict[str, Decimal]) -> Account:
    """Revalue holdings at new prices.

    Symbols the account doesn't hold are ignored. ``change_percent`` reflects
    the value change of the last revalued holding.
    """
    _require_type(account, AccountType.INVESTMENT)

    change_percent = account.change_percent
    holdings = []
    for h in account.holdings:
        if h.symbol in prices:
            new_value = h.shares * prices[h.symbol]
            if h.value != 0:
                change_percent = (new_value - h.value) / h.value * 100
            h = replace(h, value=new_value)
        holdings.append(h)

    return _updated(account, holdings=tuple(holdings), change_percent=change_percent)
