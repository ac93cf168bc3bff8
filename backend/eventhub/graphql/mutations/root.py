"""
Root GraphQL mutation definitions
"""

import strawberry

from ..inputs import CreateBookingInput, DeleteEventInput, EventInput, LoginInput, UserInput
from ..types.auth import AuthData
from ..types.booking import Booking
from ..types.event import Event


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Auth mutations
    @strawberry.mutation
    async def login(self, info: strawberry.Info, input: LoginInput) -> AuthData | None:
        """Log a user in and issue a session token."""
        from ..resolvers.auth import login

        return await login(info, input)

    @strawberry.mutation
    async def register_user(self, info: strawberry.Info, input: UserInput) -> AuthData | None:
        """Create a new user and issue a session token."""
        from ..resolvers.auth import register_user

        return await register_user(info, input)

    # Event mutations
    @strawberry.mutation
    async def create_event(self, info: strawberry.Info, input: EventInput) -> Event | None:
        """Create a new event."""
        from ..resolvers.event import create_event

        return await create_event(info, input)

    @strawberry.mutation
    async def delete_event(self, info: strawberry.Info, input: DeleteEventInput) -> Event | None:
        """Delete an existing event and return it."""
        from ..resolvers.event import delete_event

        return await delete_event(info, input)

    # Booking mutations
    @strawberry.mutation
    async def create_booking(
        self, info: strawberry.Info, input: CreateBookingInput
    ) -> Booking | None:
        """Create a new booking."""
        from ..resolvers.booking import create_booking

        return await create_booking(info, input)

    @strawberry.mutation
    async def delete_booking(self, info: strawberry.Info, booking_id: str) -> Booking | None:
        """Delete an existing booking and return it."""
        from ..resolvers.booking import delete_booking

        return await delete_booking(info, booking_id)
