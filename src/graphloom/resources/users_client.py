# graphloom/resources/users_client.py
"""Client for user profiles and the connections hanging off a user.

This module provides the `UsersClient`: profile lookups (single and batched
by id), the user's picture, permissions and the interest-style connections
such as books, music or the pages the user likes.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import (
    ACCOUNTS,
    ACTIVITIES,
    BOOKS,
    FAMILY,
    GAMES,
    INTERESTS,
    LIKES,
    LOCATIONS,
    MOVIES,
    MUSIC,
    PERMISSIONS,
    POKES,
    SUBSCRIBEDTO,
    SUBSCRIBERS,
    TELEVISION,
)
from ..envelope import PagedResult
from ..log_config import logger
from ..models import (
    Account,
    Activity,
    Book,
    Family,
    Game,
    Interest,
    Like,
    Location,
    Movie,
    Music,
    Permission,
    Poke,
    Subscribedto,
    Subscriber,
    Television,
    User,
)
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient, PictureMixin

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class UsersClient(PictureMixin, BaseResourceClient):
    """Client for users and their profile connections.

    Every connection method takes the user id as its first argument and
    defaults to ``"me"``, the user the access token belongs to.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("UsersClient initialized")

    async def get_me(self, reading: ReadSpec | None = None) -> User | None:
        """Fetches the profile of the authenticated user."""
        return await self.get(ME, reading)

    async def get(self, user_id: str, reading: ReadSpec | None = None) -> User | None:
        """Fetches one user profile.

        Returns:
            The user, or None when the API reports the user as absent.
        """
        url = self.urls.object_url(user_id, reading=reading)
        return await self._fetch_one(url, EntityKind.USER)

    async def get_many(
        self, user_ids: Sequence[str], reading: ReadSpec | None = None
    ) -> list[User]:
        """Fetches several users in one call, in the order the API returns them."""
        url = self.urls.root_url([("ids", ",".join(user_ids))], reading)
        return await self._fetch_id_map(url, EntityKind.USER)

    async def get_accounts(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Account]:
        """Pages and applications the user administers."""
        return await self._connection(user_id, ACCOUNTS, EntityKind.ACCOUNT, reading)

    async def get_activities(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Activity]:
        return await self._connection(
            user_id, ACTIVITIES, EntityKind.ACTIVITY, reading
        )

    async def get_books(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Book]:
        return await self._connection(user_id, BOOKS, EntityKind.BOOK, reading)

    async def get_games(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Game]:
        return await self._connection(user_id, GAMES, EntityKind.GAME, reading)

    async def get_movies(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Movie]:
        return await self._connection(user_id, MOVIES, EntityKind.MOVIE, reading)

    async def get_music(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Music]:
        return await self._connection(user_id, MUSIC, EntityKind.MUSIC, reading)

    async def get_television(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Television]:
        return await self._connection(
            user_id, TELEVISION, EntityKind.TELEVISION, reading
        )

    async def get_interests(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Interest]:
        return await self._connection(
            user_id, INTERESTS, EntityKind.INTEREST, reading
        )

    async def get_family(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Family]:
        return await self._connection(user_id, FAMILY, EntityKind.FAMILY, reading)

    async def get_locations(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Location]:
        """Stories in which the user was tagged at a place."""
        return await self._connection(
            user_id, LOCATIONS, EntityKind.LOCATION, reading
        )

    async def get_subscribers(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Subscriber]:
        return await self._connection(
            user_id, SUBSCRIBERS, EntityKind.SUBSCRIBER, reading
        )

    async def get_subscribedto(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Subscribedto]:
        return await self._connection(
            user_id, SUBSCRIBEDTO, EntityKind.SUBSCRIBEDTO, reading
        )

    async def get_permissions(self, user_id: str = ME) -> PagedResult[Permission]:
        """The permissions the user granted (or declined) to the application."""
        return await self._connection(
            user_id, PERMISSIONS, EntityKind.PERMISSION, None
        )

    async def revoke_permission(self, permission: str, user_id: str = ME) -> bool:
        """Revokes one permission from the application."""
        url = self.urls.object_url(user_id, f"{PERMISSIONS}/{permission}")
        logger.info(f"Revoking permission '{permission}' for {user_id}")
        return await self._delete(url)

    async def get_pokes(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Poke]:
        return await self._connection(user_id, POKES, EntityKind.POKE, reading)

    async def get_user_likes(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Like]:
        """The pages the user likes."""
        return await self._connection(user_id, LIKES, EntityKind.LIKE, reading)

    async def get_liked_page(
        self, page_id: str, user_id: str = ME, reading: ReadSpec | None = None
    ) -> Like | None:
        """Returns the like of ``page_id`` by the user, or None if not liked."""
        likes = await self._connection(
            user_id, f"{LIKES}/{page_id}", EntityKind.LIKE, reading
        )
        return likes[0] if likes else None

    async def _connection(
        self,
        user_id: str,
        connection: str,
        kind: EntityKind,
        reading: ReadSpec | None,
    ) -> PagedResult:
        url = self.urls.object_url(user_id, connection, reading)
        return await self._fetch_list(url, kind)
