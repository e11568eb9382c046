from __future__ import annotations
from tokencat.fetcher.repo import Repo


class CacheRepo(Repo):
    """
    Reading and writing cache entries to database.
    """

    def find(self, key: str) -> bytes | None:
        """
        Find a cache entry.

        Args:
            key: entry key

        Returns:
            Entry value or ``None`` if not found
        """
        row = self.conn.execute(
            "SELECT value FROM token_cache WHERE key = ?", (key,)
        ).fetchone()
        if not row:
            return None
        return bytes(row[0])

    def save(self, key: str, value: bytes):
        """
        Save a cache entry, replacing the existing one.

        Args:
            key: entry key
            value: entry value
        """
        self.conn.execute(
            "INSERT OR REPLACE INTO token_cache VALUES(?,?)", (key, bytes(value))
        )

    def purge(self):
        """
        Clean all database entries
        """
        self.conn.execute("DELETE FROM token_cache")
