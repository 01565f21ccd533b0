# graphloom/resources/games_client.py
"""Client for game scores and achievements of the calling application."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import ACHIEVEMENTS, SCORES
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Achievement, Score
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class GamesClient(BaseResourceClient):
    """Client for scores and achievements.

    Achievements are identified by the URL of their definition object.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("GamesClient initialized")

    async def get_scores(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Score]:
        url = self.urls.object_url(user_id, SCORES, reading)
        return await self._fetch_list(url, EntityKind.SCORE)

    async def post_score(self, score: int, user_id: str = ME) -> bool:
        url = self.urls.object_url(user_id, SCORES)
        return await self._post_for_ack(url, ParameterSet.of(score=score))

    async def delete_score(self, user_id: str = ME) -> bool:
        return await self._delete(self.urls.object_url(user_id, SCORES))

    async def get_achievements(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Achievement]:
        url = self.urls.object_url(user_id, ACHIEVEMENTS, reading)
        return await self._fetch_list(url, EntityKind.ACHIEVEMENT)

    async def post_achievement(self, achievement_url: str, user_id: str = ME) -> str:
        """Grants an achievement and returns the id of the grant."""
        url = self.urls.object_url(user_id, ACHIEVEMENTS)
        params = ParameterSet.of(achievement=achievement_url)
        return await self._post_for_id(url, params)

    async def delete_achievement(self, achievement_url: str, user_id: str = ME) -> bool:
        url = self.urls.object_url(user_id, ACHIEVEMENTS)
        params = ParameterSet.of(achievement=achievement_url)
        return await self._delete(url, params)
