"""
Sqlite3 database for the persistent cache.
"""

from __future__ import annotations
from sqlite3 import Connection, connect


def connection_from_path(path: str) -> Connection:
    """
    Creates a connection to a database at ``path``.
    If the file at ``path`` doesn't exist, creates a new one.
    The schema is initialized if it's missing.

    The connection can be shared between threads, callers
    must serialize access to it.

    Args:
        path: The absolute path to the database

    Returns:
        An instance of sqlite3 Connection

    Note:
        The schema migrations are currently not supported.
    """

    conn = connect(path, check_same_thread=False)
    _init_db(conn)
    return conn


def _init_db(conn: Connection):
    """
    Initialize db schema

    Args:
        conn: Connection to the database
    """
    cursor = conn.cursor()
    # Token cache table
    cursor.execute(
        """CREATE TABLE IF NOT EXISTS token_cache
                (key text PRIMARY KEY, value blob)"""
    )
    conn.commit()
