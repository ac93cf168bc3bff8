"""
Event document stored in the ``events`` collection.

``creator_id`` is a plain string reference to a user id; nothing at the store
level guarantees the user exists.
"""

from pydantic import Field

from eventhub.models.base import DocumentModel


class Event(DocumentModel):
    title: str
    description: str
    price: float
    date: str
    creator_id: str = Field(alias="creatorId")

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, creator={self.creator_id})>"
