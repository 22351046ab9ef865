"""
core/models.py — Typed configuration for the document store.

Documents themselves are plain dicts; only the connection settings get a model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MongoSettings(BaseModel):
    """Where the people collection lives. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    db_name: str = ""
    collection: str = ""
    server_selection_timeout_ms: int = Field(default=5000, gt=0)

    @classmethod
    def from_env(cls) -> MongoSettings:
        """
        Build settings from the constants loaded by ``core.config``.

        A timeout that is not a positive integer raises
        ``pydantic.ValidationError`` here, not at import time.
        """
        from core import config

        return cls(
            url=config.MONGO_URL,
            db_name=config.DB_NAME,
            collection=config.COLLECTION_NAME,
            server_selection_timeout_ms=config.SERVER_SELECTION_TIMEOUT_MS,
        )
