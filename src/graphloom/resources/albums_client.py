# graphloom/resources/albums_client.py
"""Client for photo albums."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import ALBUMS, PHOTOS, PICTURE
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Album, AlbumCreate, Photo
from ..params import Media, ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class AlbumsClient(CommentsMixin, LikesMixin, BaseResourceClient):
    """Client for albums and the photos they hold."""

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("AlbumsClient initialized")

    async def get_albums(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Album]:
        url = self.urls.object_url(object_id, ALBUMS, reading)
        return await self._fetch_list(url, EntityKind.ALBUM)

    async def get(self, album_id: str, reading: ReadSpec | None = None) -> Album | None:
        url = self.urls.object_url(album_id, reading=reading)
        return await self._fetch_one(url, EntityKind.ALBUM)

    async def create(self, album: AlbumCreate, object_id: str = ME) -> str:
        """Creates an album and returns its id."""
        url = self.urls.object_url(object_id, ALBUMS)
        logger.info(f"Creating album '{album.name}' for {object_id}")
        return await self._post_for_id(url, album.to_parameters())

    async def get_photos(
        self, album_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Photo]:
        url = self.urls.object_url(album_id, PHOTOS, reading)
        return await self._fetch_list(url, EntityKind.PHOTO)

    async def add_photo(
        self, album_id: str, source: Media, message: str | None = None
    ) -> str:
        """Uploads a photo into the album and returns the photo id."""
        url = self.urls.object_url(album_id, PHOTOS)
        params = ParameterSet.of(source=source, message=message)
        return await self._post_for_id(url, params)

    async def get_cover_photo_url(self, album_id: str) -> str:
        """Returns the URL of the album's cover image."""
        return await self._fetch_redirect(self.urls.object_url(album_id, PICTURE))
