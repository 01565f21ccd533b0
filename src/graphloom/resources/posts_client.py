# graphloom/resources/posts_client.py
"""Client for posts and the streams that list them.

This module provides the `PostsClient`. Besides the feed connections shared
with events, groups and pages (through `FeedMixin`) it reads the news feed,
the user's own posts, status updates and tagged posts, and post insights.
"""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import HOME, INSIGHTS, POSTS, STATUSES, TAGGED
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Insight, Post
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, FeedMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class PostsClient(FeedMixin, CommentsMixin, LikesMixin, BaseResourceClient):
    """Client for feed posts.

    `get_feed`, `post_feed`, `post_link` and `post_status_message` come from
    `FeedMixin`; comments and likes on a post from the matching mixins.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("PostsClient initialized")

    async def get_home(self, reading: ReadSpec | None = None) -> PagedResult[Post]:
        """The news feed of the authenticated user."""
        url = self.urls.object_url(ME, HOME, reading)
        return await self._fetch_list(url, EntityKind.POST)

    async def get_posts(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Post]:
        """Posts published by the object itself."""
        url = self.urls.object_url(object_id, POSTS, reading)
        return await self._fetch_list(url, EntityKind.POST)

    async def get_statuses(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Post]:
        url = self.urls.object_url(object_id, STATUSES, reading)
        return await self._fetch_list(url, EntityKind.POST)

    async def get_tagged(
        self, object_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Post]:
        """Posts the object is tagged in."""
        url = self.urls.object_url(object_id, TAGGED, reading)
        return await self._fetch_list(url, EntityKind.POST)

    async def get(self, post_id: str, reading: ReadSpec | None = None) -> Post | None:
        url = self.urls.object_url(post_id, reading=reading)
        return await self._fetch_one(url, EntityKind.POST)

    async def delete(self, post_id: str) -> bool:
        logger.info(f"Deleting post {post_id}")
        return await self._delete(self.urls.object_url(post_id))

    async def get_insights(
        self, post_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Insight]:
        """Impression and engagement metrics of a page post."""
        url = self.urls.object_url(post_id, INSIGHTS, reading)
        return await self._fetch_list(url, EntityKind.INSIGHT)
