"""
User document with the bcrypt password hash.
"""

from eventhub.models.base import DocumentModel


class User(DocumentModel):
    email: str
    password: str
    username: str
    avator: str

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
