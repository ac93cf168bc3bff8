"""
Tests for event queries and mutations.
"""

import pytest

CREATE_EVENT = """
mutation Create($input: EventInput!) {
  createEvent(input: $input) { _id title description price date creatorId }
}
"""

GET_EVENT = """
query Get($id: ID!) {
  getEvent(eventId: $id) { _id title description price date creatorId }
}
"""

DELETE_EVENT = """
mutation Delete($input: DeleteEventInput!) {
  deleteEvent(input: $input) { _id title }
}
"""

EVENT_INPUT = {
    "creatorId": "U1",
    "title": "Jazz Night",
    "description": "Live jazz in the park",
    "price": 12.5,
    "date": "2026-11-20T19:00:00Z",
}


@pytest.mark.asyncio
async def test_create_event_echoes_input(graphql):
    """The created event carries exactly the submitted fields."""
    body = await graphql(CREATE_EVENT, {"input": EVENT_INPUT})
    assert "errors" not in body
    event = body["data"]["createEvent"]
    assert event["_id"]
    assert {key: event[key] for key in EVENT_INPUT} == EVENT_INPUT


@pytest.mark.asyncio
async def test_get_event_returns_created_event(graphql):
    created = (await graphql(CREATE_EVENT, {"input": EVENT_INPUT}))["data"]["createEvent"]

    body = await graphql(GET_EVENT, {"id": created["_id"]})
    assert body["data"]["getEvent"] == created


@pytest.mark.asyncio
async def test_get_event_unknown_id_is_null(graphql):
    body = await graphql(GET_EVENT, {"id": "000000000000000000000000"})
    assert "errors" not in body
    assert body["data"]["getEvent"] is None


@pytest.mark.asyncio
async def test_list_events(graphql, test_event):
    await graphql(CREATE_EVENT, {"input": EVENT_INPUT})

    body = await graphql("{ events { _id title } }")
    titles = sorted(event["title"] for event in body["data"]["events"])
    assert titles == ["Jazz Night", "Test Concert"]


@pytest.mark.asyncio
async def test_create_event_empty_title(graphql, stores):
    body = await graphql(CREATE_EVENT, {"input": {**EVENT_INPUT, "title": ""}})
    assert body["data"]["createEvent"] is None
    assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"
    assert body["errors"][0]["message"].startswith("title:")
    assert stores.events.mutations == 0


@pytest.mark.asyncio
async def test_create_event_wrong_price_type(graphql, stores):
    body = await graphql(CREATE_EVENT, {"input": {**EVENT_INPUT, "price": "free"}})
    assert body["data"] is None
    assert "price" in body["errors"][0]["message"]
    assert stores.events.mutations == 0


@pytest.mark.asyncio
async def test_delete_event(graphql, stores, test_event):
    body = await graphql(
        DELETE_EVENT, {"input": {"_id": test_event.id, "creatorId": test_event.creator_id}}
    )
    assert "errors" not in body
    assert body["data"]["deleteEvent"] == {"_id": test_event.id, "title": "Test Concert"}
    assert stores.events.documents == {}


@pytest.mark.asyncio
async def test_delete_event_twice(graphql, test_event):
    """Deleting an already-deleted event is NOT_FOUND, not a silent success."""
    variables = {"input": {"_id": test_event.id, "creatorId": test_event.creator_id}}
    first = await graphql(DELETE_EVENT, variables)
    assert "errors" not in first
    assert first["data"]["deleteEvent"]["_id"] == test_event.id

    body = await graphql(DELETE_EVENT, variables)
    assert body["data"]["deleteEvent"] is None
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"
    assert body["errors"][0]["message"] == f"Event {test_event.id} not found"


@pytest.mark.asyncio
async def test_delete_event_nonexistent(graphql):
    body = await graphql(DELETE_EVENT, {"input": {"_id": "no-such-event", "creatorId": "U1"}})
    assert body["errors"][0]["extensions"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_event_creator_and_created_events(graphql, test_user, test_event):
    body = await graphql("""
        query {
          events { title creator { _id username createdEvents { title } } }
        }
    """)
    [event] = body["data"]["events"]
    assert event["creator"]["_id"] == test_user.id
    assert event["creator"]["username"] == "testuser"
    assert event["creator"]["createdEvents"] == [{"title": "Test Concert"}]


@pytest.mark.asyncio
async def test_event_creator_missing_user_is_null(graphql):
    await graphql(CREATE_EVENT, {"input": EVENT_INPUT})

    body = await graphql("{ events { title creator { _id } } }")
    assert "errors" not in body
    assert body["data"]["events"][0]["creator"] is None


@pytest.mark.asyncio
async def test_delete_event_then_book_it_in_same_request(graphql, test_event):
    """Fields resolved after the delete see the event as missing."""
    body = await graphql(
        """
        mutation Both($input: DeleteEventInput!, $booking: CreateBookingInput!) {
          deleteEvent(input: $input) { _id }
          createBooking(input: $booking) { eventId event { title } }
        }
        """,
        {
            "input": {"_id": test_event.id, "creatorId": test_event.creator_id},
            "booking": {"eventId": test_event.id, "userId": "U1"},
        },
    )
    assert "errors" not in body
    assert body["data"]["deleteEvent"] == {"_id": test_event.id}
    assert body["data"]["createBooking"] == {"eventId": test_event.id, "event": None}
