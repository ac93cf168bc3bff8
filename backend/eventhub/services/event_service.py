"""
Event service handling create, read and delete operations.
"""

from typing import Optional

from eventhub.core.config import get_settings
from eventhub.core.errors import NotFoundError
from eventhub.core.logging import get_logger
from eventhub.models import Event
from eventhub.schemas.event import EventCreate, EventDelete
from eventhub.stores import Stores

logger = get_logger(__name__)


async def create_event(stores: Stores, event_data: EventCreate) -> Event:
    """Insert an event exactly as given."""
    if get_settings().ENFORCE_REFERENCES:
        if await stores.users.find_by_id(event_data.creator_id) is None:
            raise NotFoundError("User", event_data.creator_id)

    event = await stores.events.create(event_data.model_dump(by_alias=True))

    logger.info("event_created", event_id=event.id, title=event.title, creator_id=event.creator_id)
    return event


async def get_event(stores: Stores, event_id: str) -> Optional[Event]:
    """Get a single event by ID, or None."""
    return await stores.events.find_by_id(event_id)


async def list_events(stores: Stores) -> list[Event]:
    return await stores.events.find_all()


async def delete_event(stores: Stores, delete_data: EventDelete) -> Event:
    """
    Delete an event and return it.
    Raises NotFoundError if no event has this id (including one already deleted).
    Bookings that point at the event are left in place.
    """
    event = await stores.events.delete_by_id(delete_data.id)
    if event is None:
        logger.warning("event_delete_failed", event_id=delete_data.id, reason="not_found")
        raise NotFoundError("Event", delete_data.id)

    logger.info("event_deleted", event_id=event.id, requested_by=delete_data.creator_id)
    return event
