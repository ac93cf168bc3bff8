"""
Booking document linking a user to an event.

Timestamps are assigned by the store on insert. ``event_id`` and ``user_id``
may point at documents that no longer exist.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from eventhub.models.base import DocumentModel


class Booking(DocumentModel):
    event_id: str = Field(alias="eventId")
    user_id: str = Field(alias="userId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, event={self.event_id})>"
