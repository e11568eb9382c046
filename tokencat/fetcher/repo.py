"""
This module contains base classes for working with sqlite3 db.
"""

from __future__ import annotations
from sqlite3 import Connection


class Repo:
    """
    Base class for any repo used in the :mod:`tokencat.fetcher` module.
    This is a thin wrapper around `sqlite3.Connection <https://docs.python.org/3/library/sqlite3.html#sqlite3.Connection>`_ so that
    subclasses use has-a inheritance with a connection.

    Important:
        All the changes happening at the repo must be committed using
        :meth:`commit` method or rolled back using :meth:`rollback` method. Otherwise
        there's no guarantee that changes will be saved.

    Args:
        conn: Connection to an sqlite3 database
    """

    #: Connection to the database
    conn: Connection

    def __init__(self, conn: Connection):
        self.conn = conn

    def commit(self):
        """
        Commits all changes pending on the database connection.
        """
        self.conn.commit()

    def rollback(self):
        """
        Rollbacks all changes pending on the database connection.
        """
        self.conn.rollback()
