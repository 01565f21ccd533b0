# graphloom/resources/test_users_client.py
"""Client for the test users of an application.

Test users are created and listed with the application's own access token
(the ambient credential). Calls made on behalf of a test user carry that
user's token as an ``access_token`` parameter instead.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ACCESS_TOKEN_PARAM
from ..endpoints import FRIENDS, TEST_USERS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import TestUser
from ..params import ParameterSet
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient

DEFAULT_TEST_USER_LOCALE = "en_US"


class TestUsersClient(BaseResourceClient):
    __test__ = False

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("TestUsersClient initialized")

    async def create(
        self,
        app_id: str,
        name: str | None = None,
        locale: str | None = None,
        permissions: Sequence[str] | None = None,
    ) -> TestUser:
        """Creates a test user with the application installed.

        Args:
            app_id: The application the test user belongs to.
            name: Display name; the API picks one when omitted.
            locale: Locale of the user, ``en_US`` by default.
            permissions: Permissions granted to the application.

        Returns:
            TestUser: The new user, including its access token and password.
        """
        params = ParameterSet.of(
            installed=True,
            name=name,
            locale=locale or DEFAULT_TEST_USER_LOCALE,
            permissions=",".join(permissions) if permissions else None,
        )
        url = self.urls.object_url(app_id, TEST_USERS)
        logger.info(f"Creating test user for application {app_id}")
        return await self._post_for_entity(url, EntityKind.TEST_USER, params)

    async def list(self, app_id: str) -> PagedResult[TestUser]:
        url = self.urls.object_url(app_id, TEST_USERS)
        return await self._fetch_list(url, EntityKind.TEST_USER)

    async def delete(self, test_user_id: str) -> bool:
        logger.info(f"Deleting test user {test_user_id}")
        return await self._delete(self.urls.object_url(test_user_id))

    async def make_friends(self, user1: TestUser, user2: TestUser) -> bool:
        """Makes two test users friends.

        A friend request is sent from ``user1`` and then accepted by
        ``user2``, each call authorized by the sending user's own token.

        Returns:
            bool: False as soon as either side is not acknowledged.
        """
        if not await self._befriend(user1, user2):
            return False
        return await self._befriend(user2, user1)

    async def _befriend(self, sender: TestUser, receiver: TestUser) -> bool:
        url = self.urls.object_url(str(sender.id), f"{FRIENDS}/{receiver.id}")
        params = ParameterSet.of((ACCESS_TOKEN_PARAM, sender.access_token))
        return await self._post_for_ack(url, params)
