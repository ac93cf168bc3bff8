"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from eventhub.models import User as UserModel

if TYPE_CHECKING:
    from .event import Event


@strawberry.type
class User:
    """User type for GraphQL API. The password hash is never exposed."""

    id: strawberry.ID = strawberry.field(name="_id")
    email: str
    username: str
    avator: str

    @strawberry.field
    async def created_events(
        self, info: strawberry.Info
    ) -> list[Annotated["Event", strawberry.lazy(".event")]]:
        """Events whose creatorId is this user."""
        from ..resolvers.user import resolve_user_created_events

        return await resolve_user_created_events(self, info)

    @classmethod
    def from_model(cls, user: UserModel) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            email=user.email,
            username=user.username,
            avator=user.avator,
        )
