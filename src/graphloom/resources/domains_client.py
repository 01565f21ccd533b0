# graphloom/resources/domains_client.py
"""Client for web domains known to the API."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..log_config import logger
from ..models import Domain
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class DomainsClient(BaseResourceClient):
    """Client for domains, looked up by id or by host name."""

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("DomainsClient initialized")

    async def get(
        self, domain_id: str, reading: ReadSpec | None = None
    ) -> Domain | None:
        url = self.urls.object_url(domain_id, reading=reading)
        return await self._fetch_one(url, EntityKind.DOMAIN)

    async def get_by_name(self, domain_name: str) -> Domain | None:
        """Looks a domain up by host name, e.g. ``example.com``."""
        url = self.urls.root_url([("domain", domain_name)])
        return await self._fetch_one(url, EntityKind.DOMAIN)

    async def get_many_by_name(self, domain_names: Sequence[str]) -> list[Domain]:
        """Looks several domains up at once; the answer is keyed by host name."""
        url = self.urls.root_url([("domains", ",".join(domain_names))])
        return await self._fetch_id_map(url, EntityKind.DOMAIN)
