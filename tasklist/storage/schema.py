"""
Tasklist - Database Schema

Tables:
- tasks: to-do items
"""
import sqlite3

SCHEMA_SQL = """
-- AUTOINCREMENT keeps ids of deleted tasks from being handed out again
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    created_at TEXT DEFAULT (datetime('now')),
    updated_at TEXT DEFAULT (datetime('now'))
);
"""


def init_schema(conn: sqlite3.Connection) -> None:
    """Create tables if they don't exist."""
    conn.executescript(SCHEMA_SQL)
    conn.commit()
