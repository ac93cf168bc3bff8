"""
MongoDB implementation of the collection stores (pymongo async API).

Ids are ObjectIds in the database and plain strings everywhere else. Strings
that are not valid ObjectIds can never match a document, so lookups with them
short-circuit to "not found" instead of raising bson.errors.InvalidId.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Sequence, Type

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_store_operation
from eventhub.models import Booking, Event, User
from eventhub.stores.interfaces import CollectionStore, DuplicateEntityError, ModelT, Stores

logger = get_logger(__name__)

EVENTS_COLLECTION = "events"
USERS_COLLECTION = "users"
BOOKINGS_COLLECTION = "bookings"


def to_object_id(value: str) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class MongoCollectionStore(CollectionStore[ModelT]):
    """Generic store over one collection, validating documents into ``model``."""

    def __init__(self, collection: AsyncCollection, model: Type[ModelT], timestamps: bool = False):
        self.collection = collection
        self.model = model
        self.timestamps = timestamps

    @property
    def name(self) -> str:
        return self.collection.name

    def _to_model(self, document: dict[str, Any]) -> ModelT:
        return self.model.model_validate(document)

    async def create(self, fields: dict[str, Any]) -> ModelT:
        record_store_operation(self.name, "create")
        document = dict(fields)
        if self.timestamps:
            now = datetime.now(timezone.utc)
            document["createdAt"] = now
            document["updatedAt"] = now

        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning("duplicate_document", collection=self.name, error=str(e))
            raise DuplicateEntityError(self.name) from e

        document["_id"] = result.inserted_id
        return self._to_model(document)

    async def find_all(self) -> list[ModelT]:
        record_store_operation(self.name, "find_all")
        return await self._find({})

    async def find_by_id(self, entity_id: str) -> Optional[ModelT]:
        record_store_operation(self.name, "find_by_id")
        object_id = to_object_id(entity_id)
        if object_id is None:
            return None
        document = await self.collection.find_one({"_id": object_id})
        return self._to_model(document) if document else None

    async def find_by_ids(self, entity_ids: Sequence[str]) -> list[ModelT]:
        record_store_operation(self.name, "find_by_ids")
        object_ids = [oid for oid in map(to_object_id, entity_ids) if oid is not None]
        if not object_ids:
            return []
        return await self._find({"_id": {"$in": object_ids}})

    async def find_by_filter(self, filters: dict[str, Any]) -> list[ModelT]:
        record_store_operation(self.name, "find_by_filter")
        return await self._find(filters)

    async def find_one(self, filters: dict[str, Any]) -> Optional[ModelT]:
        record_store_operation(self.name, "find_one")
        document = await self.collection.find_one(filters)
        return self._to_model(document) if document else None

    async def find_where_in(self, field: str, values: Sequence[str]) -> list[ModelT]:
        record_store_operation(self.name, "find_where_in")
        return await self._find({field: {"$in": list(values)}})

    async def delete_by_id(self, entity_id: str) -> Optional[ModelT]:
        record_store_operation(self.name, "delete")
        object_id = to_object_id(entity_id)
        if object_id is None:
            return None
        document = await self.collection.find_one_and_delete({"_id": object_id})
        return self._to_model(document) if document else None

    async def _find(self, filters: dict[str, Any]) -> list[ModelT]:
        cursor = self.collection.find(filters)
        return [self._to_model(document) async for document in cursor]


def build_mongo_stores(database: AsyncDatabase) -> Stores:
    return Stores(
        events=MongoCollectionStore(database[EVENTS_COLLECTION], Event),
        users=MongoCollectionStore(database[USERS_COLLECTION], User),
        bookings=MongoCollectionStore(database[BOOKINGS_COLLECTION], Booking, timestamps=True),
    )


async def ensure_indexes(database: AsyncDatabase) -> None:
    """
    Create the unique email index and the reference lookup indexes.
    create_index is a no-op when the index already exists.
    """
    await database[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    await database[EVENTS_COLLECTION].create_index([("creatorId", ASCENDING)])
    await database[BOOKINGS_COLLECTION].create_index([("eventId", ASCENDING)])
    await database[BOOKINGS_COLLECTION].create_index([("userId", ASCENDING)])
    logger.info("mongo_indexes_ensured", database=database.name)
