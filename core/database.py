"""
core/database.py — MongoDB connection owner.

Provides a lazily-connected database handle for the repository layer and a
process-wide default connection built from the environment.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache

from pymongo import MongoClient
from pymongo.database import Database

from core.models import MongoSettings

logger = logging.getLogger(__name__)


class DatabaseConnectionError(RuntimeError):
    """The initial connection to MongoDB could not be established."""


class MongoConnection:
    """Owns one MongoClient and the database handle selected from it."""

    def __init__(self, settings: MongoSettings) -> None:
        self.settings = settings
        self._client: MongoClient | None = None
        self._db: Database | None = None
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def get_db(self) -> Database:
        """
        Return the database handle, connecting on first use.

        Once a handle exists it is returned as-is, without a health check.

        Raises
        ------
        DatabaseConnectionError
            If the client cannot reach the server. The driver error is kept
            as ``__cause__``.
        """
        db = self._db
        if db is None:
            with self._lock:
                if self._db is None:
                    self._db = self._connect()
                db = self._db
        return db

    def _connect(self) -> Database:
        client: MongoClient | None = None
        try:
            client = MongoClient(
                self.settings.url,
                serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
            )
            # MongoClient connects in the background; ping forces the round-trip
            client.admin.command("ping")
            db = client[self.settings.db_name]
        except Exception as exc:
            logger.error("Connection to MongoDB failed: %s", exc, exc_info=True)
            if client is not None:
                client.close()
            raise DatabaseConnectionError("Failed to connect to db") from exc

        self._client = client
        logger.info("Connected to MongoDB database %r", self.settings.db_name)
        return db

    def is_connected(self) -> bool:
        """Quick connectivity check. Never opens a new connection."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
            return True
        except Exception:
            return False

    def close(self) -> None:
        """Close the client and forget the handle. Safe to call twice."""
        with self._lock:
            client = self._client
            self._client = None
            self._db = None
        if client is not None:
            client.close()
            logger.info("Closed MongoDB connection")

    def __enter__(self) -> MongoConnection:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


# ── Process-wide default ────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_connection() -> MongoConnection:
    """Return (and cache) the connection configured from the environment."""
    return MongoConnection(MongoSettings.from_env())


def close_connection() -> None:
    """Close the default connection if one was ever created."""
    if get_connection.cache_info().currsize:
        get_connection().close()
