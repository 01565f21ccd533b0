# graphloom/resources/events_client.py
"""Client for events, their guest lists and media.

Guest lists are the RSVP connections of an event (``attending``, ``maybe``,
``declined``, ``invited`` and ``noreply``). Each can be read whole or
narrowed to one user, which answers whether that user is on the list.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import (
    ATTENDING,
    DECLINED,
    EVENTS,
    INVITED,
    MAYBE,
    NOREPLY,
    PHOTOS,
    PICTURE,
    VIDEOS,
)
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Event, EventUpdate, Photo, RSVPStatus, Video
from ..params import Media, ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, FeedMixin, PictureMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class EventsClient(FeedMixin, PictureMixin, BaseResourceClient):
    """Client for events.

    The event feed (`get_feed`, `post_feed`, `post_link`,
    `post_status_message`) comes from `FeedMixin` and the event picture
    lookup from `PictureMixin`; pass the event id as ``object_id``.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("EventsClient initialized")

    async def get_events(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Event]:
        url = self.urls.object_url(object_id, EVENTS, reading)
        return await self._fetch_list(url, EntityKind.EVENT)

    async def get(self, event_id: str, reading: ReadSpec | None = None) -> Event | None:
        url = self.urls.object_url(event_id, reading=reading)
        return await self._fetch_one(url, EntityKind.EVENT)

    async def create(self, event: EventUpdate, object_id: str = ME) -> str:
        """Creates an event owned by ``object_id`` and returns its id."""
        url = self.urls.object_url(object_id, EVENTS)
        logger.info(f"Creating event for {object_id}")
        return await self._post_for_id(url, event.to_parameters())

    async def edit(self, event_id: str, event: EventUpdate) -> bool:
        """Updates the given fields of an event."""
        url = self.urls.object_url(event_id)
        return await self._post_for_ack(url, event.to_parameters())

    async def delete(self, event_id: str) -> bool:
        logger.info(f"Deleting event {event_id}")
        return await self._delete(self.urls.object_url(event_id))

    # --- Guest lists ---

    async def get_attending(
        self,
        event_id: str,
        user_id: str | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[RSVPStatus]:
        return await self._guest_list(event_id, ATTENDING, user_id, reading)

    async def get_maybe(
        self,
        event_id: str,
        user_id: str | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[RSVPStatus]:
        return await self._guest_list(event_id, MAYBE, user_id, reading)

    async def get_declined(
        self,
        event_id: str,
        user_id: str | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[RSVPStatus]:
        return await self._guest_list(event_id, DECLINED, user_id, reading)

    async def get_invited(
        self,
        event_id: str,
        user_id: str | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[RSVPStatus]:
        return await self._guest_list(event_id, INVITED, user_id, reading)

    async def get_noreply(
        self,
        event_id: str,
        user_id: str | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[RSVPStatus]:
        return await self._guest_list(event_id, NOREPLY, user_id, reading)

    async def _guest_list(
        self,
        event_id: str,
        connection: str,
        user_id: str | None,
        reading: ReadSpec | None,
    ) -> PagedResult[RSVPStatus]:
        if user_id is not None:
            connection = f"{connection}/{user_id}"
        url = self.urls.object_url(event_id, connection, reading)
        return await self._fetch_list(url, EntityKind.RSVP_STATUS)

    async def invite(self, event_id: str, user_ids: str | Sequence[str]) -> bool:
        """Invites one user, or several users in a single call."""
        if isinstance(user_ids, str):
            url = self.urls.object_url(event_id, f"{INVITED}/{user_ids}")
            return await self._post_for_ack(url)
        url = self.urls.object_url(event_id, INVITED)
        return await self._post_for_ack(
            url, ParameterSet.of(users=",".join(user_ids))
        )

    async def uninvite(self, event_id: str, user_id: str) -> bool:
        url = self.urls.object_url(event_id, f"{INVITED}/{user_id}")
        return await self._delete(url)

    async def rsvp_attending(self, event_id: str) -> bool:
        return await self._post_for_ack(self.urls.object_url(event_id, ATTENDING))

    async def rsvp_maybe(self, event_id: str) -> bool:
        return await self._post_for_ack(self.urls.object_url(event_id, MAYBE))

    async def rsvp_declined(self, event_id: str) -> bool:
        return await self._post_for_ack(self.urls.object_url(event_id, DECLINED))

    # --- Media ---

    async def update_picture(self, event_id: str, source: Media) -> bool:
        url = self.urls.object_url(event_id, PICTURE)
        return await self._post_for_ack(url, ParameterSet.of(source=source))

    async def delete_picture(self, event_id: str) -> bool:
        return await self._delete(self.urls.object_url(event_id, PICTURE))

    async def get_photos(
        self, event_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Photo]:
        url = self.urls.object_url(event_id, PHOTOS, reading)
        return await self._fetch_list(url, EntityKind.PHOTO)

    async def post_photo(
        self, event_id: str, source: Media, message: str | None = None
    ) -> str:
        """Adds a photo to the event and returns the photo id."""
        url = self.urls.object_url(event_id, PHOTOS)
        params = ParameterSet.of(source=source, message=message)
        return await self._post_for_id(url, params)

    async def get_videos(
        self, event_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Video]:
        url = self.urls.object_url(event_id, VIDEOS, reading)
        return await self._fetch_list(url, EntityKind.VIDEO)

    async def post_video(
        self,
        event_id: str,
        source: Media,
        title: str | None = None,
        description: str | None = None,
    ) -> str:
        """Uploads a video to the event through the video host."""
        url = self.urls.video_url(event_id, VIDEOS)
        params = ParameterSet.of(source=source, title=title, description=description)
        return await self._post_for_id(url, params)
