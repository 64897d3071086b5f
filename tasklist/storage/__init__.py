"""
Tasklist - Storage Layer

SQLite database used by the persistent task store.
"""
from .database import Database
from .schema import init_schema, SCHEMA_SQL

__all__ = [
    "Database",
    "init_schema",
    "SCHEMA_SQL",
]
