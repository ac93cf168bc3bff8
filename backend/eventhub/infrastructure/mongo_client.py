"""
MongoDB client holder.
Separated from business logic for clean architecture.
"""

from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from eventhub.core.config import get_settings


class MongoClient:
    """Process-wide pymongo client with connection pooling."""

    _instance: Optional[AsyncMongoClient] = None

    @classmethod
    def get_client(cls) -> AsyncMongoClient:
        """Get or create the client. Connecting is lazy; no I/O happens here."""
        if cls._instance is None:
            settings = get_settings()
            cls._instance = AsyncMongoClient(settings.MONGODB_URL, tz_aware=True)
        return cls._instance

    @classmethod
    async def close(cls):
        if cls._instance is not None:
            await cls._instance.close()
            cls._instance = None


def get_database() -> AsyncDatabase:
    return MongoClient.get_client()[get_settings().MONGODB_DB]
