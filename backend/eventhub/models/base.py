"""
Base model for documents read back from MongoDB.

Documents keep their camelCase field names in the database; the models expose
snake_case attributes through aliases.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, value):
        # ObjectId on the way out of the store, already a string from fakes
        return str(value)
