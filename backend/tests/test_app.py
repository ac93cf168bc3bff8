"""
Tests for the non-GraphQL HTTP surface and request middleware.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_request_id_headers(client: AsyncClient):
    response = await client.get("/")
    assert response.json()["graphql"] == "/graphql"
    assert len(response.headers["X-Request-ID"]) == 8
    assert response.headers["X-Response-Time"].endswith("ms")


@pytest.mark.asyncio
async def test_metrics_count_operations(client: AsyncClient, graphql):
    await graphql("query ListEvents { events { _id } }")

    response = await client.get("/metrics")
    assert response.status_code == 200
    assert 'graphql_operations_total{operation="ListEvents",outcome="success"}' in response.text


@pytest.mark.asyncio
async def test_password_hash_is_not_queryable(graphql):
    body = await graphql("{ users { _id password } }")
    assert body["data"] is None
    assert "password" in body["errors"][0]["message"]


@pytest.mark.asyncio
async def test_list_users(graphql, test_user):
    body = await graphql("{ users { _id email username avator } }")
    assert body["data"]["users"] == [
        {
            "_id": test_user.id,
            "email": "test@example.com",
            "username": "testuser",
            "avator": "http://img.example.com/test.png",
        }
    ]


def test_debug_flag_follows_settings():
    from eventhub.core.config import get_settings
    from eventhub.main import app

    assert app.debug is get_settings().DEBUG
