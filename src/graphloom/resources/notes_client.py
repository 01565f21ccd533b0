# graphloom/resources/notes_client.py
"""Client for notes."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import NOTES
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Note
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class NotesClient(CommentsMixin, LikesMixin, BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("NotesClient initialized")

    async def get_notes(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Note]:
        url = self.urls.object_url(user_id, NOTES, reading)
        return await self._fetch_list(url, EntityKind.NOTE)

    async def get(self, note_id: str, reading: ReadSpec | None = None) -> Note | None:
        url = self.urls.object_url(note_id, reading=reading)
        return await self._fetch_one(url, EntityKind.NOTE)

    async def create(self, subject: str, message: str, user_id: str = ME) -> str:
        """Writes a note and returns its id."""
        url = self.urls.object_url(user_id, NOTES)
        params = ParameterSet.of(subject=subject, message=message)
        return await self._post_for_id(url, params)
