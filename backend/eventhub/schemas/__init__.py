from eventhub.schemas.user import UserCreate, UserLogin, AuthData
from eventhub.schemas.event import EventCreate, EventDelete
from eventhub.schemas.booking import BookingCreate

__all__ = [
    "UserCreate", "UserLogin", "AuthData",
    "EventCreate", "EventDelete",
    "BookingCreate",
]
