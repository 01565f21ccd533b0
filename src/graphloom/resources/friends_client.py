# graphloom/resources/friends_client.py
"""Client for friends, friend requests and friend lists."""

from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import (
    FRIEND_REQUESTS,
    FRIENDLISTS,
    FRIENDS,
    MEMBERS,
    MUTUAL_FRIENDS,
)
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Friend, Friendlist, FriendRequest
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class FriendsClient(BaseResourceClient):
    """Client for the friend graph of a user.

    Friend lists are user-defined groupings of friends; members are added
    and removed one user at a time.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("FriendsClient initialized")

    async def get_friends(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Friend]:
        url = self.urls.object_url(user_id, FRIENDS, reading)
        return await self._fetch_list(url, EntityKind.FRIEND)

    async def get_mutual_friends(
        self, friend_id: str, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Friend]:
        """Friends ``user_id`` and ``friend_id`` have in common."""
        url = self.urls.object_url(user_id, f"{MUTUAL_FRIENDS}/{friend_id}", reading)
        return await self._fetch_list(url, EntityKind.FRIEND)

    async def get_belongs_friend(
        self, friend_id: str, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Friend]:
        """Lists ``friend_id`` if it is a friend of the user; empty otherwise."""
        url = self.urls.object_url(user_id, f"{FRIENDS}/{friend_id}", reading)
        return await self._fetch_list(url, EntityKind.FRIEND)

    async def get_friend_requests(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[FriendRequest]:
        url = self.urls.object_url(user_id, FRIEND_REQUESTS, reading)
        return await self._fetch_list(url, EntityKind.FRIEND_REQUEST)

    async def get_friendlists(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Friendlist]:
        url = self.urls.object_url(user_id, FRIENDLISTS, reading)
        return await self._fetch_list(url, EntityKind.FRIENDLIST)

    async def get_friendlist(
        self, friendlist_id: str, reading: ReadSpec | None = None
    ) -> Friendlist | None:
        url = self.urls.object_url(friendlist_id, reading=reading)
        return await self._fetch_one(url, EntityKind.FRIENDLIST)

    async def get_friendlist_members(
        self, friendlist_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Friend]:
        url = self.urls.object_url(friendlist_id, MEMBERS, reading)
        return await self._fetch_list(url, EntityKind.FRIEND)

    async def create_friendlist(self, name: str, user_id: str = ME) -> str:
        """Creates an empty friend list and returns its id."""
        url = self.urls.object_url(user_id, FRIENDLISTS)
        logger.info(f"Creating friend list '{name}' for {user_id}")
        return await self._post_for_id(url, ParameterSet.of(name=name))

    async def delete_friendlist(self, friendlist_id: str) -> bool:
        logger.info(f"Deleting friend list {friendlist_id}")
        return await self._delete(self.urls.object_url(friendlist_id))

    async def add_friendlist_member(self, friendlist_id: str, user_id: str) -> bool:
        url = self.urls.object_url(friendlist_id, f"{MEMBERS}/{user_id}")
        return await self._post_for_ack(url)

    async def remove_friendlist_member(
        self, friendlist_id: str, user_id: str
    ) -> bool:
        url = self.urls.object_url(friendlist_id, f"{MEMBERS}/{user_id}")
        return await self._delete(url)
