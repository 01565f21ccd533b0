# graphloom/resources/search_client.py
"""Client for the ``search`` endpoint.

Search is the one family of calls that may be made without a credential;
the ambient credential is still attached when one is configured. Each method
fixes the object ``type`` and decodes results into the matching model,
except :meth:`SearchClient.search`, which returns the raw JSON objects.
"""

from typing import TYPE_CHECKING, Any

from ..constants import SearchType
from ..envelope import PagedResult
from ..log_config import logger
from ..models import (
    Checkin,
    Event,
    GeoLocation,
    Group,
    Location,
    Page,
    Place,
    Post,
    User,
)
from ..reading import ReadSpec
from ..registry import EntityKind
from ..urls import append_query, encode_pairs
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class SearchClient(BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("SearchClient initialized")

    async def search(
        self, query: str, reading: ReadSpec | None = None
    ) -> PagedResult[dict[str, Any]]:
        """Searches across all object types; results are untyped JSON objects."""
        url = self.urls.search_url(query, reading=reading)
        return await self._search(url, EntityKind.RAW)

    async def posts(
        self, query: str, reading: ReadSpec | None = None
    ) -> PagedResult[Post]:
        url = self.urls.search_url(query, SearchType.POST, reading)
        return await self._search(url, EntityKind.POST)

    async def users(
        self, query: str, reading: ReadSpec | None = None
    ) -> PagedResult[User]:
        url = self.urls.search_url(query, SearchType.USER, reading)
        return await self._search(url, EntityKind.USER)

    async def events(
        self, query: str, reading: ReadSpec | None = None
    ) -> PagedResult[Event]:
        url = self.urls.search_url(query, SearchType.EVENT, reading)
        return await self._search(url, EntityKind.EVENT)

    async def groups(
        self, query: str, reading: ReadSpec | None = None
    ) -> PagedResult[Group]:
        url = self.urls.search_url(query, SearchType.GROUP, reading)
        return await self._search(url, EntityKind.GROUP)

    async def pages(
        self, query: str, reading: ReadSpec | None = None
    ) -> PagedResult[Page]:
        url = self.urls.search_url(query, SearchType.PAGE, reading)
        return await self._search(url, EntityKind.PAGE)

    async def places(
        self,
        query: str,
        center: GeoLocation | None = None,
        distance: int | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[Place]:
        """Searches places by name, optionally within ``distance`` meters of
        ``center``.

        Raises:
            ValueError: If only one of ``center`` and ``distance`` is given.
        """
        url = self.urls.search_url(query, SearchType.PLACE, reading)
        if center is not None or distance is not None:
            url = _with_area(url, center, distance)
        return await self._search(url, EntityKind.PLACE)

    async def checkins(self, reading: ReadSpec | None = None) -> PagedResult[Checkin]:
        """Recent checkins of the user and their friends."""
        url = self.urls.search_url(object_type=SearchType.CHECKIN, reading=reading)
        return await self._search(url, EntityKind.CHECKIN)

    async def locations(
        self,
        center: GeoLocation | None = None,
        distance: int | None = None,
        place_id: str | None = None,
        reading: ReadSpec | None = None,
    ) -> PagedResult[Location]:
        """Location stories around a point or at one place.

        Give either ``center`` with ``distance``, or ``place_id``.

        Raises:
            ValueError: If neither (or both) ways of locating are given.
        """
        if (place_id is None) == (center is None and distance is None):
            raise ValueError(
                "Search locations either around 'center'/'distance' or at 'place_id'."
            )
        url = self.urls.search_url(object_type=SearchType.LOCATION, reading=reading)
        if place_id is not None:
            url = append_query(url, encode_pairs([("place", place_id)]))
        else:
            url = _with_area(url, center, distance)
        return await self._search(url, EntityKind.LOCATION)

    async def _search(self, url: str, kind: EntityKind) -> PagedResult[Any]:
        logger.debug(f"Searching {kind.value}: {url}")
        return await self._fetch_list(url, kind, require_auth=False)


def _with_area(
    url: str, center: GeoLocation | None, distance: int | None
) -> str:
    if center is None or distance is None:
        raise ValueError("'center' and 'distance' must be given together.")
    pairs = [("center", center.as_center()), ("distance", str(distance))]
    return append_query(url, encode_pairs(pairs, safe=","))
