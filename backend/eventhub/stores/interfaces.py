"""Store interfaces (repository pattern).

Stores are swappable per collection and return document models. Filters use
the document field names as stored (``creatorId``, ``eventId``, ...).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Optional, Sequence, TypeVar

from eventhub.models import Booking, Event, User

ModelT = TypeVar("ModelT")


class DuplicateEntityError(Exception):
    """Raised by ``create`` when a unique field value already exists."""

    def __init__(self, collection: str) -> None:
        super().__init__(f"duplicate document in {collection}")
        self.collection = collection


class CollectionStore(ABC, Generic[ModelT]):
    """Interface for one document collection."""

    @abstractmethod
    async def create(self, fields: dict[str, Any]) -> ModelT:
        """Insert a document and return it with its store-assigned id."""
        ...

    @abstractmethod
    async def find_all(self) -> list[ModelT]:
        ...

    @abstractmethod
    async def find_by_id(self, entity_id: str) -> Optional[ModelT]:
        """Return the document, or None if the id is unknown or malformed."""
        ...

    @abstractmethod
    async def find_by_ids(self, entity_ids: Sequence[str]) -> list[ModelT]:
        """Return every document whose id is in ``entity_ids``, in any order."""
        ...

    @abstractmethod
    async def find_by_filter(self, filters: dict[str, Any]) -> list[ModelT]:
        """Equality match on one or more fields."""
        ...

    @abstractmethod
    async def find_one(self, filters: dict[str, Any]) -> Optional[ModelT]:
        ...

    @abstractmethod
    async def find_where_in(self, field: str, values: Sequence[str]) -> list[ModelT]:
        """Documents whose ``field`` equals any of ``values``."""
        ...

    @abstractmethod
    async def delete_by_id(self, entity_id: str) -> Optional[ModelT]:
        """Remove the document and return it, or None if nothing matched."""
        ...


@dataclass(frozen=True)
class Stores:
    """The three collection stores handed to services for one request."""

    events: CollectionStore[Event]
    users: CollectionStore[User]
    bookings: CollectionStore[Booking]
