# graphloom/resources/fql_client.py
"""Client for the legacy FQL query endpoint.

FQL results are not entities of a known kind, so rows are returned as the
raw JSON objects the API sends.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..exceptions import MalformedResponse
from ..log_config import logger
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class FqlClient(BaseResourceClient):
    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("FqlClient initialized")

    async def execute(self, query: str) -> list[Any]:
        """Runs one FQL query and returns its result rows.

        Example:
            ``await fql.execute("SELECT uid, name FROM user WHERE uid = me()")``
        """
        logger.debug(f"Executing FQL: {query}")
        body = await self._fetch_json(self.urls.fql_url(query))
        return _result_rows(body)

    async def execute_multi(self, queries: Mapping[str, str]) -> dict[str, list[Any]]:
        """Runs several named queries in one call.

        Later queries may refer to earlier ones as ``#name``.

        Returns:
            The result rows of each query, keyed by query name.
        """
        logger.debug(f"Executing {len(queries)} FQL queries: {list(queries)}")
        body = await self._fetch_json(self.urls.multi_fql_url(queries))
        results: dict[str, list[Any]] = {}
        for entry in _result_rows(body):
            if not isinstance(entry, dict) or "name" not in entry:
                raise MalformedResponse(f"Unexpected multi-query result entry: {entry!r}")
            rows = entry.get("fql_result_set", [])
            if not isinstance(rows, list):
                raise MalformedResponse(
                    f"Result set of query '{entry['name']}' is not a list."
                )
            results[entry["name"]] = rows
        return results


def _result_rows(body: Any) -> list[Any]:
    if not isinstance(body, dict) or not isinstance(body.get("data"), list):
        raise MalformedResponse("FQL response has no 'data' list.")
    return body["data"]
