from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from eventhub.schemas.user import UserCreate, UserLogin
from eventhub.services import auth_service

from ..context import get_stores_from_info
from ..inputs import LoginInput, UserInput, validate_input

if TYPE_CHECKING:
    from ..types.auth import AuthData


async def login(info: strawberry.Info, input: LoginInput) -> AuthData:
    from ..types.auth import AuthData as AuthDataType

    login_data = validate_input(UserLogin, input)
    auth_data = await auth_service.authenticate_user(get_stores_from_info(info), login_data)
    return AuthDataType.from_schema(auth_data)


async def register_user(info: strawberry.Info, input: UserInput) -> AuthData:
    from ..types.auth import AuthData as AuthDataType

    user_data = validate_input(UserCreate, input)
    auth_data = await auth_service.register_user(get_stores_from_info(info), user_data)
    return AuthDataType.from_schema(auth_data)
