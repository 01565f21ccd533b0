# graphloom/resources/messages_client.py
"""Client for the message folders of a user (read only)."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import INBOX, OUTBOX, UPDATES
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Message
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class MessagesClient(BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("MessagesClient initialized")

    async def get_inbox(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Message]:
        return await self._folder(user_id, INBOX, reading)

    async def get_outbox(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Message]:
        return await self._folder(user_id, OUTBOX, reading)

    async def get_updates(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Message]:
        """Messages sent by pages and applications."""
        return await self._folder(user_id, UPDATES, reading)

    async def get(
        self, message_id: str, reading: ReadSpec | None = None
    ) -> Message | None:
        url = self.urls.object_url(message_id, reading=reading)
        return await self._fetch_one(url, EntityKind.MESSAGE)

    async def _folder(
        self, user_id: str, folder: str, reading: ReadSpec | None
    ) -> PagedResult[Message]:
        url = self.urls.object_url(user_id, folder, reading)
        return await self._fetch_list(url, EntityKind.MESSAGE)
