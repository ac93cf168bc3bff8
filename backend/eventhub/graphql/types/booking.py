"""
Booking GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Optional

import strawberry

from eventhub.models import Booking as BookingModel

if TYPE_CHECKING:
    from .event import Event
    from .user import User


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@strawberry.type
class Booking:
    """Booking type for GraphQL API."""

    id: strawberry.ID = strawberry.field(name="_id")
    event_id: str
    user_id: str
    created_at: Optional[str]
    updated_at: Optional[str]

    @strawberry.field
    async def event(
        self, info: strawberry.Info
    ) -> Annotated["Event", strawberry.lazy(".event")] | None:
        """The booked event, or null if it was deleted or never existed."""
        from ..resolvers.booking import resolve_booking_event

        return await resolve_booking_event(self, info)

    @strawberry.field
    async def user(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """The booking user, or null if it does not exist."""
        from ..resolvers.booking import resolve_booking_user

        return await resolve_booking_user(self, info)

    @classmethod
    def from_model(cls, booking: BookingModel) -> "Booking":
        return cls(
            id=strawberry.ID(booking.id),
            event_id=booking.event_id,
            user_id=booking.user_id,
            created_at=_isoformat(booking.created_at),
            updated_at=_isoformat(booking.updated_at),
        )
