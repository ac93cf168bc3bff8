"""
GraphQL input types and their conversion into validated pydantic payloads.

graphql-core rejects missing or mistyped arguments before any resolver runs;
``validate_input`` then applies the value constraints (non-empty title, email
format, password length) before a service touches the store.
"""

from typing import TypeVar

import pydantic
import strawberry

from eventhub.core.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


@strawberry.input(description="Input payload for creating events")
class EventInput:
    creator_id: str
    title: str
    description: str
    price: float
    date: str


@strawberry.input(description="Input payload for deleting an event")
class DeleteEventInput:
    id: str = strawberry.field(name="_id")
    creator_id: str


@strawberry.input(description="Input payload for creating a new user")
class UserInput:
    username: str
    email: str
    password: str
    avator: str


@strawberry.input(description="Input payload for logging in a user")
class LoginInput:
    email: str
    password: str


@strawberry.input(description="Input payload for creating a new booking")
class CreateBookingInput:
    event_id: str
    user_id: str


def format_validation_error(error: pydantic.ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def validate_input(schema: type[SchemaT], payload: object) -> SchemaT:
    """Validate a strawberry input object into ``schema``."""
    try:
        return schema.model_validate(strawberry.asdict(payload))
    except pydantic.ValidationError as e:
        raise ValidationError(format_validation_error(e)) from e
