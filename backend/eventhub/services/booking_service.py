"""
Booking service: create, list and delete bookings.

References to events and users are plain ids. They are only checked when
ENFORCE_REFERENCES is set; otherwise a booking may point at anything and the
booking's ``event``/``user`` fields simply resolve to null.
"""

from eventhub.core.config import get_settings
from eventhub.core.errors import NotFoundError
from eventhub.core.logging import get_logger
from eventhub.models import Booking
from eventhub.schemas.booking import BookingCreate
from eventhub.stores import Stores

logger = get_logger(__name__)


async def create_booking(stores: Stores, booking_data: BookingCreate) -> Booking:
    if get_settings().ENFORCE_REFERENCES:
        if await stores.events.find_by_id(booking_data.event_id) is None:
            raise NotFoundError("Event", booking_data.event_id)
        if await stores.users.find_by_id(booking_data.user_id) is None:
            raise NotFoundError("User", booking_data.user_id)

    booking = await stores.bookings.create(booking_data.model_dump(by_alias=True))

    logger.info(
        "booking_created",
        booking_id=booking.id,
        user_id=booking.user_id,
        event_id=booking.event_id,
    )
    return booking


async def delete_booking(stores: Stores, booking_id: str) -> Booking:
    """Delete a booking and return it. Raises NotFoundError if it does not exist."""
    booking = await stores.bookings.delete_by_id(booking_id)
    if booking is None:
        logger.warning("booking_delete_failed", booking_id=booking_id, reason="not_found")
        raise NotFoundError("Booking", booking_id)

    logger.info("booking_deleted", booking_id=booking.id, event_id=booking.event_id)
    return booking


async def list_bookings(stores: Stores) -> list[Booking]:
    return await stores.bookings.find_all()


async def get_user_bookings(stores: Stores, user_id: str) -> list[Booking]:
    """Get all bookings for a user."""
    return await stores.bookings.find_by_filter({"userId": user_id})
