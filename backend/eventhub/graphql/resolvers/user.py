from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from eventhub.services import user_service

from ..context import get_loaders_from_info, get_stores_from_info

if TYPE_CHECKING:
    from ..types.event import Event
    from ..types.user import User


async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    users = await user_service.list_users(get_stores_from_info(info))
    loaders = get_loaders_from_info(info)
    for user in users:
        loaders.user_loader.prime(user.id, user)
    return [UserType.from_model(user) for user in users]


async def resolve_user_created_events(user: User, info: strawberry.Info) -> list[Event]:
    from ..types.event import Event as EventType

    events = await get_loaders_from_info(info).events_by_creator_loader.load(str(user.id))
    return [EventType.from_model(event) for event in events]
