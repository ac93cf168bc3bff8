from eventhub.models.booking import Booking
from eventhub.models.event import Event
from eventhub.models.user import User

__all__ = ["Booking", "Event", "User"]
