"""
Infrastructure layer - external system integrations.
Keeps business logic clean from implementation details.
"""

from .mongo_client import get_database, MongoClient

__all__ = ['get_database', 'MongoClient']
