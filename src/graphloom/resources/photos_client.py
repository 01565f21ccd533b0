# graphloom/resources/photos_client.py
"""Client for photos, their tags and uploads."""

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import PHOTOS, PICTURE, TAGS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Photo, PhotoUpload, Tag, TagUpdate
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class PhotosClient(CommentsMixin, LikesMixin, BaseResourceClient):
    """Client for photos.

    Uploads are sent as multipart bodies; see :class:`PhotoUpload`.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("PhotosClient initialized")

    async def get_photos(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Photo]:
        """Photos the object (a user by default) is tagged in or uploaded."""
        url = self.urls.object_url(object_id, PHOTOS, reading)
        return await self._fetch_list(url, EntityKind.PHOTO)

    async def get(self, photo_id: str, reading: ReadSpec | None = None) -> Photo | None:
        url = self.urls.object_url(photo_id, reading=reading)
        return await self._fetch_one(url, EntityKind.PHOTO)

    async def post_photo(self, upload: PhotoUpload, object_id: str = ME) -> str:
        """Uploads a photo and returns its id."""
        url = self.urls.object_url(object_id, PHOTOS)
        logger.info(f"Uploading photo '{upload.source.name}' to {object_id}")
        return await self._post_for_id(url, upload.to_parameters())

    async def delete(self, photo_id: str) -> bool:
        logger.info(f"Deleting photo {photo_id}")
        return await self._delete(self.urls.object_url(photo_id))

    async def get_url(self, photo_id: str) -> str:
        """Returns the URL of the image file behind a photo."""
        return await self._fetch_redirect(self.urls.object_url(photo_id, PICTURE))

    async def get_tags(
        self, photo_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Tag]:
        url = self.urls.object_url(photo_id, TAGS, reading)
        return await self._fetch_list(url, EntityKind.TAG)

    async def add_tag(
        self, photo_id: str, tag: str | TagUpdate | Sequence[str]
    ) -> bool:
        """Tags users on a photo.

        Args:
            photo_id: The photo to tag.
            tag: A single user id, a :class:`TagUpdate` with a position, or a
                list of user ids tagged at once.

        Returns:
            bool: The acknowledgment returned by the API.
        """
        if isinstance(tag, TagUpdate):
            params = tag.to_parameters()
        elif isinstance(tag, str):
            params = ParameterSet.of(to=tag)
        else:
            params = ParameterSet.of(tags=json.dumps(list(tag)))
        return await self._post_for_ack(self.urls.object_url(photo_id, TAGS), params)

    async def update_tag(self, photo_id: str, tag: str | TagUpdate) -> bool:
        """Moves an existing tag; the API treats this as re-tagging."""
        return await self.add_tag(photo_id, tag)
