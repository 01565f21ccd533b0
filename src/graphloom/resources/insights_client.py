# graphloom/resources/insights_client.py
"""Client for insight metrics of pages, applications and domains."""

from typing import TYPE_CHECKING

from ..endpoints import INSIGHTS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Insight
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class InsightsClient(BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("InsightsClient initialized")

    async def get(
        self, object_id: str, metric: str, reading: ReadSpec | None = None
    ) -> PagedResult[Insight]:
        """Reads one metric, e.g. ``page_views``, for an object.

        Use ``reading`` to narrow the time range with ``since``/``until``.
        """
        url = self.urls.object_url(object_id, f"{INSIGHTS}/{metric}", reading)
        return await self._fetch_list(url, EntityKind.INSIGHT)
