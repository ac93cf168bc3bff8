"""
User read operations. Users are created through auth_service.register_user.
"""

from eventhub.models import User
from eventhub.stores import Stores


async def list_users(stores: Stores) -> list[User]:
    return await stores.users.find_all()
