# graphloom/resources/videos_client.py
"""Client for videos.

Video uploads go to the separate video host configured as
``video_base_url``; every other call uses the regular REST host.
"""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import PICTURE, VIDEOS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Video
from ..params import Media, ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class VideosClient(CommentsMixin, LikesMixin, BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("VideosClient initialized")

    async def get_videos(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Video]:
        url = self.urls.object_url(object_id, VIDEOS, reading)
        return await self._fetch_list(url, EntityKind.VIDEO)

    async def get(self, video_id: str, reading: ReadSpec | None = None) -> Video | None:
        url = self.urls.object_url(video_id, reading=reading)
        return await self._fetch_one(url, EntityKind.VIDEO)

    async def post_video(
        self,
        source: Media,
        title: str | None = None,
        description: str | None = None,
        object_id: str = ME,
    ) -> str:
        """Uploads a video to the video host and returns its id."""
        url = self.urls.video_url(object_id, VIDEOS)
        logger.info(f"Uploading video '{source.name}' to {object_id}")
        params = ParameterSet.of(source=source, title=title, description=description)
        return await self._post_for_id(url, params)

    async def get_cover_url(self, video_id: str) -> str:
        """Returns the URL of the video's cover image."""
        return await self._fetch_redirect(self.urls.object_url(video_id, PICTURE))
