from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from eventhub.schemas.event import EventCreate, EventDelete
from eventhub.services import event_service

from ..context import get_loaders_from_info, get_stores_from_info
from ..inputs import DeleteEventInput, EventInput, validate_input

if TYPE_CHECKING:
    from ..types.booking import Booking
    from ..types.event import Event
    from ..types.user import User


# Query resolvers
async def resolve_events(info: strawberry.Info) -> list[Event]:
    from ..types.event import Event as EventType

    events = await event_service.list_events(get_stores_from_info(info))
    loaders = get_loaders_from_info(info)
    for event in events:
        loaders.event_loader.prime(event.id, event)
    return [EventType.from_model(event) for event in events]


async def resolve_event_by_id(info: strawberry.Info, event_id: str) -> Event | None:
    from ..types.event import Event as EventType

    event = await event_service.get_event(get_stores_from_info(info), event_id)
    if event is None:
        return None
    get_loaders_from_info(info).event_loader.prime(event.id, event)
    return EventType.from_model(event)


# Mutation resolvers
async def create_event(info: strawberry.Info, input: EventInput) -> Event:
    from ..types.event import Event as EventType

    event_data = validate_input(EventCreate, input)
    event = await event_service.create_event(get_stores_from_info(info), event_data)
    return EventType.from_model(event)


async def delete_event(info: strawberry.Info, input: DeleteEventInput) -> Event:
    from ..types.event import Event as EventType

    delete_data = validate_input(EventDelete, input)
    event = await event_service.delete_event(get_stores_from_info(info), delete_data)
    # Later fields in this request must see the event as gone
    get_loaders_from_info(info).event_loader.prime(event.id, None, force=True)
    return EventType.from_model(event)


# Event field resolvers
async def resolve_event_creator(event: Event, info: strawberry.Info) -> User | None:
    from ..types.user import User as UserType

    user = await get_loaders_from_info(info).user_loader.load(event.creator_id)
    return UserType.from_model(user) if user else None


async def resolve_event_bookings(event: Event, info: strawberry.Info) -> list[Booking]:
    from ..types.booking import Booking as BookingType

    bookings = await get_loaders_from_info(info).bookings_by_event_loader.load(str(event.id))
    return [BookingType.from_model(booking) for booking in bookings]
