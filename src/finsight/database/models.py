"""SQLAlchemy models for the finsight store."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    JSON,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()

MEMORY_DATABASE_URL = "sqlite:///:memory:"


class Account(Base):
    """Account model. Investment holdings are not stored."""

    __tablename__ = "accounts"

    pk = Column(Integer, primary_key=True)
    id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    account_number = Column(String, nullable=False)
    balance = Column(Numeric(12, 2), nullable=False)
    change_percent = Column(Numeric(12, 4), nullable=False, default=0)
    last_updated = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    icon_type = Column(String, nullable=False, default="")
    interest_rate = Column(Numeric(8, 4), nullable=True)
    credit_limit = Column(Numeric(12, 2), nullable=True)


class Transaction(Base):
    """Transaction model.

    ``account_id`` is an opaque reference and is not a foreign key.
    """

    __tablename__ = "transactions"

    pk = Column(Integer, primary_key=True)
    id = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False)
    category = Column(String, nullable=False)
    account_id = Column(String, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    notes = Column(String, nullable=True)


class FinancialGoal(Base):
    """Financial goal model."""

    __tablename__ = "goals"

    pk = Column(Integer, primary_key=True)
    id = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    target_amount = Column(Numeric(12, 2), nullable=False)
    current_amount = Column(Numeric(12, 2), nullable=False)
    target_date = Column(Date, nullable=False)
    created_at = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    category = Column(String, nullable=True)


class Recommendation(Base):
    """Curated recommendation model."""

    __tablename__ = "recommendations"

    pk = Column(Integer, primary_key=True)
    id = Column(String, unique=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    type = Column(String, nullable=False)
    impact = Column(Numeric(12, 2), nullable=False)
    steps = Column(JSON, nullable=False, default=list)
    confidence = Column(Integer, nullable=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory.

    In-memory SQLite databases share a single connection so that every
    session sees the same data.
    """
    if database_url == MEMORY_DATABASE_URL:
        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
