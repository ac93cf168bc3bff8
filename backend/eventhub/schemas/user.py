"""
Pydantic schemas for user registration and login payloads.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from eventhub.core.security import BCRYPT_MAX_PASSWORD_BYTES


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    avator: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
        return value


class UserLogin(BaseModel):
    # Any string; unknown or malformed addresses fail as bad credentials
    email: str
    password: str


class AuthData(BaseModel):
    """Login/registration result: the user id and a freshly signed token."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    token: str
    token_exp: int = Field(alias="tokenExp")  # token lifetime in hours
