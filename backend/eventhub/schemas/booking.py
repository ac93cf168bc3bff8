"""
Pydantic schema for booking creation payloads.
"""

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(..., min_length=1, alias="eventId")
    user_id: str = Field(..., min_length=1, alias="userId")
