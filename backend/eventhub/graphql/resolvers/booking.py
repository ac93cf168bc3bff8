from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from eventhub.core.errors import AuthorizationGateError
from eventhub.core.logging import get_logger
from eventhub.schemas.booking import BookingCreate
from eventhub.services import booking_service

from ..context import get_auth_context_from_info, get_loaders_from_info, get_stores_from_info
from ..inputs import CreateBookingInput, validate_input

if TYPE_CHECKING:
    from ..types.booking import Booking
    from ..types.event import Event
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_bookings(info: strawberry.Info) -> list[Booking]:
    """All bookings. The only operation behind the authentication gate."""
    from ..types.booking import Booking as BookingType

    if not get_auth_context_from_info(info).is_authenticated:
        logger.info("bookings_denied", reason="unauthenticated")
        raise AuthorizationGateError()

    bookings = await booking_service.list_bookings(get_stores_from_info(info))
    return [BookingType.from_model(booking) for booking in bookings]


async def resolve_user_bookings(info: strawberry.Info, user_id: str) -> list[Booking]:
    from ..types.booking import Booking as BookingType

    bookings = await booking_service.get_user_bookings(get_stores_from_info(info), user_id)
    return [BookingType.from_model(booking) for booking in bookings]


# Mutation resolvers
async def create_booking(info: strawberry.Info, input: CreateBookingInput) -> Booking:
    from ..types.booking import Booking as BookingType

    booking_data = validate_input(BookingCreate, input)
    booking = await booking_service.create_booking(get_stores_from_info(info), booking_data)
    return BookingType.from_model(booking)


async def delete_booking(info: strawberry.Info, booking_id: str) -> Booking:
    from ..types.booking import Booking as BookingType

    booking = await booking_service.delete_booking(get_stores_from_info(info), booking_id)
    return BookingType.from_model(booking)


# Booking field resolvers
async def resolve_booking_event(booking: Booking, info: strawberry.Info) -> Event | None:
    from ..types.event import Event as EventType

    event = await get_loaders_from_info(info).event_loader.load(booking.event_id)
    return EventType.from_model(event) if event else None


async def resolve_booking_user(booking: Booking, info: strawberry.Info) -> User | None:
    from ..types.user import User as UserType

    user = await get_loaders_from_info(info).user_loader.load(booking.user_id)
    return UserType.from_model(user) if user else None
