"""
Root GraphQL query definitions
"""

import strawberry

from ..types.booking import Booking
from ..types.event import Event
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type. Read operations never mutate."""

    @strawberry.field
    async def events(self, info: strawberry.Info) -> list[Event]:
        """Get all events."""
        from ..resolvers.event import resolve_events

        return await resolve_events(info)

    @strawberry.field
    async def get_event(self, info: strawberry.Info, event_id: strawberry.ID) -> Event | None:
        """Get a specific event by ID."""
        from ..resolvers.event import resolve_event_by_id

        return await resolve_event_by_id(info, str(event_id))

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def bookings(self, info: strawberry.Info) -> list[Booking] | None:
        """Get all bookings. Requires an authenticated request."""
        from ..resolvers.booking import resolve_bookings

        return await resolve_bookings(info)

    @strawberry.field
    async def user_bookings(self, info: strawberry.Info, user_id: str) -> list[Booking]:
        """Get the bookings of a specific user."""
        from ..resolvers.booking import resolve_user_bookings

        return await resolve_user_bookings(info, user_id)
