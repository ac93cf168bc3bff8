"""
Authentication service handling user registration and login.
"""

import asyncio

from eventhub.core.config import get_settings
from eventhub.core.errors import AuthenticationError, ConflictError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_auth_attempt
from eventhub.core.security import hash_password, verify_password, create_access_token
from eventhub.models import User
from eventhub.schemas.user import AuthData, UserCreate, UserLogin
from eventhub.stores import DuplicateEntityError, Stores

logger = get_logger(__name__)

EMAIL_TAKEN_MESSAGE = "Account already exists with the same email!"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


def issue_auth_data(user: User) -> AuthData:
    """Sign a session token for ``user``."""
    settings = get_settings()
    token = create_access_token(
        data={"userId": user.id, "email": user.email, "avator": user.avator},
    )
    return AuthData(user_id=user.id, token=token, token_exp=settings.ACCESS_TOKEN_EXPIRE_HOURS)


async def register_user(stores: Stores, user_data: UserCreate) -> AuthData:
    """
    Register a new user with a hashed password and log them in.
    Raises ConflictError if the email is already registered.
    """
    existing = await stores.users.find_one({"email": user_data.email})
    if existing:
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        record_auth_attempt("register", succeeded=False)
        raise ConflictError(EMAIL_TAKEN_MESSAGE)

    hashed_password = await asyncio.to_thread(hash_password, user_data.password)

    try:
        user = await stores.users.create({
            "username": user_data.username,
            "email": user_data.email,
            "password": hashed_password,
            "avator": user_data.avator,
        })
    except DuplicateEntityError:
        # Lost the race against a concurrent registration with the same email
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        record_auth_attempt("register", succeeded=False)
        raise ConflictError(EMAIL_TAKEN_MESSAGE)

    logger.info("user_registered", user_id=user.id, email=user.email)
    record_auth_attempt("register", succeeded=True)
    return issue_auth_data(user)


async def authenticate_user(stores: Stores, login_data: UserLogin) -> AuthData:
    """
    Check credentials and return a fresh session token.
    Unknown email and wrong password raise the same AuthenticationError.
    """
    user = await stores.users.find_one({"email": login_data.email})

    if not user or not await asyncio.to_thread(verify_password, login_data.password, user.password):
        logger.warning("login_failed", email=login_data.email, known_email=user is not None)
        record_auth_attempt("login", succeeded=False)
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    logger.info("user_logged_in", user_id=user.id)
    record_auth_attempt("login", succeeded=True)
    return issue_auth_data(user)
