"""Shared pytest fixtures for finsight tests."""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest
from click.testing import CliRunner

from finsight.database.factories import create_database
from finsight.database.fixtures import seed_fixtures
from finsight.domain.app_state import AppState
from finsight.domain.entities import Account, AccountType, Transaction


@pytest.fixture
def temp_db():
    """Create a temporary SQLite file database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_database(database_url=f"sqlite:///{db_path}")
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an in-memory database."""
    db = create_database(database_url="sqlite:///:memory:")
    db.connect()
    db.initialize_schema()
    yield db
    db.disconnect()


@pytest.fixture
def seeded_db(memory_db):
    """In-memory database loaded with the sample data."""
    seed_fixtures(memory_db)
    return memory_db


@pytest.fixture
def app_state(seeded_db):
    """Create an AppState over the seeded database."""
    return AppState(seeded_db)


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def make_transaction():
    """Factory for transactions with sensible defaults."""
    counter = {"n": 0}

    def _make(amount, category="Other", on=date(2024, 1, 15), description="Test", account_id="acc-1"):
        counter["n"] += 1
        return Transaction(
            id=f"t-{counter['n']}",
            description=description,
            amount=Decimal(str(amount)),
            date=on,
            category=category,
            account_id=account_id,
        )

    return _make


@pytest.fixture
def make_account():
    """Factory for accounts with sensible defaults."""

    def _make(type=AccountType.CHECKING, balance="1000", id="a-1", **kwargs):
        return Account(
            id=id,
            name=kwargs.pop("name", f"{type.value.title()} Account"),
            type=type,
            account_number=kwargs.pop("account_number", "xxxx-0000"),
            balance=Decimal(balance),
            **kwargs,
        )

    return _make
