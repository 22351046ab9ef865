"""
core/people_repository.py — Read access to the people collection.

The repository takes its connection from the caller; the module-level
``get_all_people`` uses the default connection from ``core.database``.
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any

from core.database import MongoConnection, get_connection

logger = logging.getLogger(__name__)


class PeopleRepository:
    """Reads documents from one collection of a ``MongoConnection``."""

    def __init__(self, connection: MongoConnection, collection_name: str) -> None:
        self._connection = connection
        self.collection_name = collection_name

    def get_all_people(self) -> list[dict[str, Any]]:
        """
        Return every document in the collection, unfiltered and unmodified.

        Order is whatever the server returns for a full scan. Raises
        ``DatabaseConnectionError`` if the first connection fails; errors
        from the read itself propagate unchanged.
        """
        collection = self._connection.get_db()[self.collection_name]
        people = list(collection.find({}))
        logger.debug("Fetched %d documents from %r", len(people), self.collection_name)
        return people

    async def get_all_people_async(self) -> list[dict[str, Any]]:
        """Same as :meth:`get_all_people`, run on a worker thread."""
        return await asyncio.to_thread(self.get_all_people)


# ── Default repository ──────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_repository() -> PeopleRepository:
    """Return (and cache) the repository over the default connection."""
    connection = get_connection()
    return PeopleRepository(connection, connection.settings.collection)


def get_all_people() -> list[dict[str, Any]]:
    """Fetch all documents from the configured collection."""
    return get_repository().get_all_people()


async def get_all_people_async() -> list[dict[str, Any]]:
    return await get_repository().get_all_people_async()
