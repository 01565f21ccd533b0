# graphloom/resources/pages_client.py
"""Client for pages.

Finding pages by name is a search; see `SearchClient.pages`.
"""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import LIKES
from ..log_config import logger
from ..models import Page
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, FeedMixin, PictureMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class PagesClient(FeedMixin, PictureMixin, BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("PagesClient initialized")

    async def get(self, page_id: str, reading: ReadSpec | None = None) -> Page | None:
        url = self.urls.object_url(page_id, reading=reading)
        return await self._fetch_one(url, EntityKind.PAGE)

    async def get_likes_belongs(self, page_id: str, user_id: str = ME) -> bool:
        """Whether the user likes the page.

        The ``likes/{page_id}`` connection of a user lists the page when it
        is liked and is empty otherwise.
        """
        url = self.urls.object_url(user_id, f"{LIKES}/{page_id}")
        likes = await self._fetch_list(url, EntityKind.LIKE)
        return len(likes) > 0
