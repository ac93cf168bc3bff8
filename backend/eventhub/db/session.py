"""
Request-scoped access to the document stores.
"""

from eventhub.infrastructure import get_database
from eventhub.stores import Stores, build_mongo_stores


async def get_stores() -> Stores:
    """FastAPI dependency yielding the Mongo-backed stores."""
    return build_mongo_stores(get_database())
