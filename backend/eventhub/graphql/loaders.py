"""
Request-scoped DataLoaders.

A fresh ``Loaders`` is built for every request, so repeated lookups of the
same id within one response hit the store once and nothing outlives the
request.
"""

from collections import defaultdict
from functools import partial
from typing import Any, Optional

from strawberry.dataloader import DataLoader

from eventhub.stores import CollectionStore, Stores


async def load_by_ids(store: CollectionStore, keys: list[str]) -> list[Optional[Any]]:
    """Batch load documents by id; unknown ids map to None."""
    documents = await store.find_by_ids(keys)
    documents_map = {document.id: document for document in documents}
    return [documents_map.get(key) for key in keys]


async def load_grouped(
    store: CollectionStore, field: str, attribute: str, keys: list[str]
) -> list[list[Any]]:
    """Batch load the documents whose ``field`` matches each key."""
    documents = await store.find_where_in(field, keys)
    grouped = defaultdict(list)
    for document in documents:
        grouped[getattr(document, attribute)].append(document)
    return [grouped.get(key, []) for key in keys]


class Loaders:
    def __init__(self, stores: Stores):
        self.event_loader = DataLoader(load_fn=partial(load_by_ids, stores.events))
        self.user_loader = DataLoader(load_fn=partial(load_by_ids, stores.users))
        self.bookings_by_event_loader = DataLoader(
            load_fn=partial(load_grouped, stores.bookings, "eventId", "event_id")
        )
        self.events_by_creator_loader = DataLoader(
            load_fn=partial(load_grouped, stores.events, "creatorId", "creator_id")
        )
