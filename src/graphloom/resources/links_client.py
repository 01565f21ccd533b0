# graphloom/resources/links_client.py
"""Client for shared links."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import FEED, LINKS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Link
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class LinksClient(CommentsMixin, LikesMixin, BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("LinksClient initialized")

    async def get_links(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Link]:
        url = self.urls.object_url(user_id, LINKS, reading)
        return await self._fetch_list(url, EntityKind.LINK)

    async def get(self, link_id: str, reading: ReadSpec | None = None) -> Link | None:
        url = self.urls.object_url(link_id, reading=reading)
        return await self._fetch_one(url, EntityKind.LINK)

    async def post(
        self, link: str, message: str | None = None, user_id: str = ME
    ) -> str:
        """Shares a link on the user's feed and returns the new post id."""
        url = self.urls.object_url(user_id, FEED)
        params = ParameterSet.of(link=link, message=message)
        return await self._post_for_id(url, params)
