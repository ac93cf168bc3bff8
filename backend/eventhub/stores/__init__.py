"""
Entity store gateway: per-collection accessors over the document database.
"""

from .interfaces import CollectionStore, DuplicateEntityError, Stores
from .mongo_store import MongoCollectionStore, build_mongo_stores, ensure_indexes

__all__ = [
    "CollectionStore", "DuplicateEntityError", "Stores",
    "MongoCollectionStore", "build_mongo_stores", "ensure_indexes",
]
