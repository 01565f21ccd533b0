# graphloom/resources/groups_client.py
"""Client for groups, their members and documents."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import DOCS, GROUPS, MEMBERS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Group, GroupDoc, GroupMember
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, FeedMixin, PictureMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class GroupsClient(FeedMixin, PictureMixin, BaseResourceClient):
    """Client for groups.

    The group feed and picture come from the mixins, with the group id
    passed as ``object_id``.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("GroupsClient initialized")

    async def get_groups(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Group]:
        """The groups a user is a member of."""
        url = self.urls.object_url(user_id, GROUPS, reading)
        return await self._fetch_list(url, EntityKind.GROUP)

    async def get(self, group_id: str, reading: ReadSpec | None = None) -> Group | None:
        url = self.urls.object_url(group_id, reading=reading)
        return await self._fetch_one(url, EntityKind.GROUP)

    async def get_members(
        self, group_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[GroupMember]:
        url = self.urls.object_url(group_id, MEMBERS, reading)
        return await self._fetch_list(url, EntityKind.GROUP_MEMBER)

    async def get_docs(
        self, group_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[GroupDoc]:
        url = self.urls.object_url(group_id, DOCS, reading)
        return await self._fetch_list(url, EntityKind.GROUP_DOC)
