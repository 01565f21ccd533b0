# graphloom/resources/notifications_client.py
"""Client for user notifications."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import NOTIFICATIONS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Notification
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class NotificationsClient(BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("NotificationsClient initialized")

    async def get_notifications(
        self,
        user_id: str = ME,
        include_read: bool = False,
        reading: ReadSpec | None = None,
    ) -> PagedResult[Notification]:
        """Lists the user's notifications.

        Args:
            user_id: The user whose notifications are listed.
            include_read: Also list notifications already marked as read; by
                default the API returns unread ones only.
            reading: Optional response-shaping directives.
        """
        url = self.urls.object_url(user_id, NOTIFICATIONS, reading)
        params = ParameterSet.of(include_read=1) if include_read else None
        return await self._fetch_list(url, EntityKind.NOTIFICATION, params)

    async def mark_as_read(self, notification_id: str) -> bool:
        url = self.urls.object_url(notification_id)
        return await self._post_for_ack(url, ParameterSet.of(unread=0))
