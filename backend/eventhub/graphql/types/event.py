"""
Event GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from eventhub.models import Event as EventModel

if TYPE_CHECKING:
    from .booking import Booking
    from .user import User


@strawberry.type
class Event:
    """Event type for GraphQL API."""

    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    description: str
    price: float
    date: str
    creator_id: str

    @strawberry.field
    async def creator(
        self, info: strawberry.Info
    ) -> Annotated["User", strawberry.lazy(".user")] | None:
        """The user referenced by creatorId, or null if it no longer exists."""
        from ..resolvers.event import resolve_event_creator

        return await resolve_event_creator(self, info)

    @strawberry.field
    async def bookings(
        self, info: strawberry.Info
    ) -> list[Annotated["Booking", strawberry.lazy(".booking")]]:
        """Bookings made for this event."""
        from ..resolvers.event import resolve_event_bookings

        return await resolve_event_bookings(self, info)

    @classmethod
    def from_model(cls, event: EventModel) -> "Event":
        return cls(
            id=strawberry.ID(event.id),
            title=event.title,
            description=event.description,
            price=event.price,
            date=event.date,
            creator_id=event.creator_id,
        )
