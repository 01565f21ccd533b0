# graphloom/resources/comments_client.py
"""Client for individual comments.

Listing and writing the comments of an object is done through the client of
the commented object (its `get_comments` and `comment` methods).
"""

from typing import TYPE_CHECKING

from ..log_config import logger
from ..models import Comment
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class CommentsClient(LikesMixin, BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("CommentsClient initialized")

    async def get(
        self, comment_id: str, reading: ReadSpec | None = None
    ) -> Comment | None:
        url = self.urls.object_url(comment_id, reading=reading)
        return await self._fetch_one(url, EntityKind.COMMENT)

    async def delete(self, comment_id: str) -> bool:
        logger.info(f"Deleting comment {comment_id}")
        return await self._delete(self.urls.object_url(comment_id))
