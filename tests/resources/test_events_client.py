# tests/resources/test_events_client.py
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from graphloom.models import EventUpdate, RSVPStatus
from graphloom.params import Media, ParameterSet
from graphloom.reading import ReadSpec
from graphloom.resources import EventsClient

REST = "https://graph.facebook.com/"
VIDEO = "https://graph-video.facebook.com/"
EVENT_ID = "331218348435"


@pytest.fixture
def events_client(mock_api_client: AsyncMock) -> EventsClient:
    return EventsClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_get_event(events_client: EventsClient, mock_api_client: AsyncMock, respond):
    respond(
        json={
            "id": EVENT_ID,
            "name": "Facebook Developer Garage Austin",
            "owner": {"id": "6", "name": "Austin Developers"},
            "start_time": "2010-03-13T15:00:00+0000",
            "venue": {"city": "Austin", "latitude": 30.27, "longitude": -97.74},
            "privacy": "OPEN",
        }
    )

    event = await events_client.get(EVENT_ID)

    mock_api_client.send.assert_awaited_once_with("GET", f"{REST}{EVENT_ID}", None)
    assert event.owner.name == "Austin Developers"
    assert event.venue.city == "Austin"
    assert event.start_time.year == 2010


@pytest.mark.asyncio
async def test_get_events(events_client: EventsClient, mock_api_client: AsyncMock):
    await events_client.get_events(reading=ReadSpec().select("id", "rsvp_status"))
    mock_api_client.send.assert_awaited_once_with(
        "GET", f"{REST}me/events?fields=id,rsvp_status", None
    )


@pytest.mark.asyncio
async def test_create_and_edit(
    events_client: EventsClient, mock_api_client: AsyncMock, respond
):
    update = EventUpdate(name="Party", start_time=datetime(2030, 5, 1, 20, 0))

    respond(json={"id": "1234"})
    assert await events_client.create(update) == "1234"
    mock_api_client.send.assert_awaited_with(
        "POST",
        f"{REST}me/events",
        ParameterSet.of(("name", "Party"), ("start_time", "2030-05-01T20:00:00")),
    )

    respond(text="true")
    assert await events_client.edit("1234", EventUpdate(location="Park")) is True
    mock_api_client.send.assert_awaited_with(
        "POST", f"{REST}1234", ParameterSet.of(location="Park")
    )


@pytest.mark.asyncio
async def test_delete(events_client: EventsClient, mock_api_client: AsyncMock, respond):
    respond(text="true")
    assert await events_client.delete("1234") is True
    mock_api_client.send.assert_awaited_once_with("DELETE", f"{REST}1234", None)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, connection",
    [
        ("get_attending", "attending"),
        ("get_maybe", "maybe"),
        ("get_declined", "declined"),
        ("get_invited", "invited"),
        ("get_noreply", "noreply"),
    ],
)
async def test_guest_lists(
    events_client: EventsClient, mock_api_client: AsyncMock, respond, method, connection
):
    respond(json={"data": [{"id": "4", "name": "Mark", "rsvp_status": connection}]})

    guests = await getattr(events_client, method)(EVENT_ID)

    mock_api_client.send.assert_awaited_once_with(
        "GET", f"{REST}{EVENT_ID}/{connection}", None
    )
    assert isinstance(guests[0], RSVPStatus)
    assert guests[0].rsvp_status == connection


@pytest.mark.asyncio
async def test_guest_list_for_one_user(
    events_client: EventsClient, mock_api_client: AsyncMock
):
    """Passing a user narrows the list to that user's entry."""
    guests = await events_client.get_attending(EVENT_ID, "4")

    mock_api_client.send.assert_awaited_once_with(
        "GET", f"{REST}{EVENT_ID}/attending/4", None
    )
    assert len(guests) == 0


@pytest.mark.asyncio
async def test_invite(events_client: EventsClient, mock_api_client: AsyncMock, respond):
    respond(text="true")

    assert await events_client.invite(EVENT_ID, "4") is True
    mock_api_client.send.assert_awaited_with(
        "POST", f"{REST}{EVENT_ID}/invited/4", None
    )

    assert await events_client.invite(EVENT_ID, ["4", "5"]) is True
    mock_api_client.send.assert_awaited_with(
        "POST", f"{REST}{EVENT_ID}/invited", ParameterSet.of(users="4,5")
    )

    assert await events_client.uninvite(EVENT_ID, "4") is True
    mock_api_client.send.assert_awaited_with(
        "DELETE", f"{REST}{EVENT_ID}/invited/4", None
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, connection",
    [
        ("rsvp_attending", "attending"),
        ("rsvp_maybe", "maybe"),
        ("rsvp_declined", "declined"),
    ],
)
async def test_rsvp(
    events_client: EventsClient, mock_api_client: AsyncMock, respond, method, connection
):
    respond(text="true")

    assert await getattr(events_client, method)(EVENT_ID) is True
    mock_api_client.send.assert_awaited_once_with(
        "POST", f"{REST}{EVENT_ID}/{connection}", None
    )


@pytest.mark.asyncio
async def test_picture(events_client: EventsClient, mock_api_client: AsyncMock, respond):
    source = Media(name="cover.png", content=b"\x89PNG")
    respond(text="true")

    assert await events_client.update_picture(EVENT_ID, source) is True
    mock_api_client.send.assert_awaited_with(
        "POST", f"{REST}{EVENT_ID}/picture", ParameterSet.of(source=source)
    )

    assert await events_client.delete_picture(EVENT_ID) is True
    mock_api_client.send.assert_awaited_with(
        "DELETE", f"{REST}{EVENT_ID}/picture", None
    )

    respond(status=302, headers={"Location": "https://cdn.example.com/cover.png"})
    assert (
        await events_client.get_picture_url(EVENT_ID)
        == "https://cdn.example.com/cover.png"
    )


@pytest.mark.asyncio
async def test_event_media(
    events_client: EventsClient, mock_api_client: AsyncMock, respond
):
    photo = Media(name="a.jpg", content=b"\xff\xd8")
    clip = Media(name="a.mp4", content=b"\x00")

    respond(json={"id": "88"})
    assert await events_client.post_photo(EVENT_ID, photo, "Fun") == "88"
    mock_api_client.send.assert_awaited_with(
        "POST",
        f"{REST}{EVENT_ID}/photos",
        ParameterSet.of(source=photo, message="Fun"),
    )

    assert await events_client.post_video(EVENT_ID, clip) == "88"
    mock_api_client.send.assert_awaited_with(
        "POST", f"{VIDEO}{EVENT_ID}/videos", ParameterSet.of(source=clip)
    )

    respond(json={"data": []})
    await events_client.get_photos(EVENT_ID)
    mock_api_client.send.assert_awaited_with("GET", f"{REST}{EVENT_ID}/photos", None)
    await events_client.get_videos(EVENT_ID)
    mock_api_client.send.assert_awaited_with("GET", f"{REST}{EVENT_ID}/videos", None)


@pytest.mark.asyncio
async def test_event_feed(events_client: EventsClient, mock_api_client: AsyncMock, respond):
    respond(json={"id": f"{EVENT_ID}_1"})

    await events_client.post_status_message("See you there", object_id=EVENT_ID)

    mock_api_client.send.assert_awaited_once_with(
        "POST", f"{REST}{EVENT_ID}/feed", ParameterSet.of(message="See you there")
    )
