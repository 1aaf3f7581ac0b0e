"""Database factory functions for creating database instances."""

import os
from typing import Optional

from finsight.database.models import MEMORY_DATABASE_URL
from finsight.database.sqlalchemy_db import SQLAlchemyDatabase

DATABASE_URL_ENV = "FINSIGHT_DATABASE_URL"


def create_database(database_url: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a database instance.

    Args:
        database_url: SQLAlchemy URL. If None, checks the FINSIGHT_DATABASE_URL
            environment variable, then defaults to an in-memory SQLite database

    Returns:
        SQLAlchemyDatabase instance
    """
    if database_url is None:
        # Check environment variable
        database_url = os.environ.get(DATABASE_URL_ENV)

    if database_url is None:
        database_url = MEMORY_DATABASE_URL

    return SQLAlchemyDatabase(database_url)
