# graphloom/resources/checkins_client.py
"""Client for checkins."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import CHECKINS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Checkin, CheckinCreate
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, CommentsMixin, LikesMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class CheckinsClient(CommentsMixin, LikesMixin, BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("CheckinsClient initialized")

    async def get_checkins(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Checkin]:
        url = self.urls.object_url(user_id, CHECKINS, reading)
        return await self._fetch_list(url, EntityKind.CHECKIN)

    async def get(
        self, checkin_id: str, reading: ReadSpec | None = None
    ) -> Checkin | None:
        url = self.urls.object_url(checkin_id, reading=reading)
        return await self._fetch_one(url, EntityKind.CHECKIN)

    async def create(self, checkin: CheckinCreate, user_id: str = ME) -> str:
        """Checks the user in at a place and returns the checkin id."""
        url = self.urls.object_url(user_id, CHECKINS)
        logger.info(f"Checking {user_id} in at place {checkin.place}")
        return await self._post_for_id(url, checkin.to_parameters())
