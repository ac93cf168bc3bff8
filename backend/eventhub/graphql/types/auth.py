"""
Auth payload returned by login and registerUser
"""

import strawberry

from eventhub.schemas.user import AuthData as AuthDataSchema


@strawberry.type
class AuthData:
    user_id: strawberry.ID
    token: str
    token_exp: int

    @classmethod
    def from_schema(cls, data: AuthDataSchema) -> "AuthData":
        return cls(user_id=strawberry.ID(data.user_id), token=data.token, token_exp=data.token_exp)
