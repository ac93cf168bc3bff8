"""
Pydantic schemas for event create/delete payloads.
"""

from pydantic import BaseModel, ConfigDict, Field


class EventCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    creator_id: str = Field(..., min_length=1, alias="creatorId")
    title: str = Field(..., min_length=1)
    description: str
    price: float
    date: str


class EventDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, alias="_id")
    # Accepted for compatibility; ownership is not checked
    creator_id: str = Field(..., alias="creatorId")
