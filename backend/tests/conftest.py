"""
Pytest fixtures for in-memory stores, the HTTP client, and authentication.

The Mongo-backed stores are swapped for dict-backed ones through the
``get_stores`` dependency, so every test starts from empty collections.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

from collections import Counter
from datetime import datetime, timezone
from typing import Any, AsyncGenerator, Optional, Sequence

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from eventhub.main import app
from eventhub.db.session import get_stores
from eventhub.core.security import create_access_token, hash_password
from eventhub.models import Booking, Event, User
from eventhub.stores import CollectionStore, DuplicateEntityError, Stores


class InMemoryCollectionStore(CollectionStore):
    """Dict-backed store mirroring MongoCollectionStore's observable behaviour."""

    def __init__(self, name: str, model, timestamps: bool = False, unique: Sequence[str] = ()):
        self.name = name
        self.model = model
        self.timestamps = timestamps
        self.unique = unique
        self.documents: dict[str, dict[str, Any]] = {}
        self.calls: Counter = Counter()

    def _matches(self, document: dict[str, Any], filters: dict[str, Any]) -> bool:
        return all(document.get(key) == value for key, value in filters.items())

    async def create(self, fields: dict[str, Any]) -> Any:
        self.calls["create"] += 1
        for field in self.unique:
            if any(doc.get(field) == fields.get(field) for doc in self.documents.values()):
                raise DuplicateEntityError(self.name)

        document = dict(fields)
        document["_id"] = str(ObjectId())
        if self.timestamps:
            now = datetime.now(timezone.utc)
            document["createdAt"] = now
            document["updatedAt"] = now
        self.documents[document["_id"]] = document
        return self.model.model_validate(document)

    async def find_all(self) -> list:
        self.calls["find_all"] += 1
        return [self.model.model_validate(doc) for doc in self.documents.values()]

    async def find_by_id(self, entity_id: str) -> Optional[Any]:
        self.calls["find_by_id"] += 1
        document = self.documents.get(entity_id)
        return self.model.model_validate(document) if document else None

    async def find_by_ids(self, entity_ids: Sequence[str]) -> list:
        self.calls["find_by_ids"] += 1
        return [
            self.model.model_validate(self.documents[entity_id])
            for entity_id in entity_ids
            if entity_id in self.documents
        ]

    async def find_by_filter(self, filters: dict[str, Any]) -> list:
        self.calls["find_by_filter"] += 1
        return [
            self.model.model_validate(doc)
            for doc in self.documents.values()
            if self._matches(doc, filters)
        ]

    async def find_one(self, filters: dict[str, Any]) -> Optional[Any]:
        self.calls["find_one"] += 1
        for doc in self.documents.values():
            if self._matches(doc, filters):
                return self.model.model_validate(doc)
        return None

    async def find_where_in(self, field: str, values: Sequence[str]) -> list:
        self.calls["find_where_in"] += 1
        return [
            self.model.model_validate(doc)
            for doc in self.documents.values()
            if doc.get(field) in values
        ]

    async def delete_by_id(self, entity_id: str) -> Optional[Any]:
        self.calls["delete"] += 1
        document = self.documents.pop(entity_id, None)
        return self.model.model_validate(document) if document else None

    @property
    def mutations(self) -> int:
        return self.calls["create"] + self.calls["delete"]


@pytest.fixture
def stores() -> Stores:
    """Fresh, empty collections for every test."""
    return Stores(
        events=InMemoryCollectionStore("events", Event),
        users=InMemoryCollectionStore("users", User, unique=("email",)),
        bookings=InMemoryCollectionStore("bookings", Booking, timestamps=True),
    )


@pytest_asyncio.fixture(scope="function")
async def client(stores: Stores) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the store dependency with the in-memory stores."""

    async def override_get_stores():
        return stores

    app.dependency_overrides[get_stores] = override_get_stores

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def graphql(client: AsyncClient):
    """POST a GraphQL document and return the decoded JSON body."""

    async def execute(query: str, variables: Optional[dict] = None, headers: Optional[dict] = None) -> dict:
        response = await client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers or {},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return execute


@pytest_asyncio.fixture
async def test_user(stores: Stores) -> User:
    """Create a test user directly in the store."""
    return await stores.users.create({
        "email": "test@example.com",
        "username": "testuser",
        "password": hash_password("testpassword123"),
        "avator": "http://img.example.com/test.png",
    })


@pytest_asyncio.fixture
async def auth_headers(test_user: User) -> dict:
    """Authorization headers with a Bearer token for the test user."""
    token = create_access_token(data={"userId": test_user.id, "email": test_user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def test_event(stores: Stores, test_user: User) -> Event:
    """Create a test event owned by the test user."""
    return await stores.events.create({
        "title": "Test Concert",
        "description": "A test event",
        "price": 25.5,
        "date": "2026-12-01T20:00:00Z",
        "creatorId": test_user.id,
    })
