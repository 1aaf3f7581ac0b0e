"""Database layer for finsight application."""

from finsight.database.base import Database
from finsight.database.factories import create_database
from finsight.database.fixtures import seed_fixtures

__all__ = ["Database", "create_database", "seed_fixtures"]
