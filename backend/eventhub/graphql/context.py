"""
GraphQL request context: stores, loaders and the caller's auth state.
"""

from typing import Any

import strawberry
from fastapi import Depends, Request

from eventhub.api.auth import AuthContext, get_auth_context
from eventhub.db.session import get_stores
from eventhub.stores import Stores

from .loaders import Loaders


async def get_context(request: Request, stores: Stores = Depends(get_stores)) -> dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    return {
        "request": request,
        "stores": stores,
        "auth": get_auth_context(request),
        "loaders": Loaders(stores),
    }


def get_stores_from_info(info: strawberry.Info) -> Stores:
    return info.context["stores"]


def get_loaders_from_info(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    return info.context.get("auth") or AuthContext()
