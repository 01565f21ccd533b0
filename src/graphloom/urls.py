"""Request URL composition.

Every URL the client requests is built here from a base URL, an object id,
an optional connection name and an optional :class:`ReadSpec`. Query
directives are introduced by ``?`` when they come first and ``&`` after, so
a composed URL never holds more than one ``?``.
"""

import json
from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

from .constants import SearchType
from .params import ensure_encodable
from .reading import ReadSpec, encode_component


def append_query(url: str, fragment: str) -> str:
    """Appends a query fragment using ``?`` or ``&`` as appropriate."""
    if not fragment:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{fragment}"


def encode_pairs(pairs: Sequence[tuple[str, str]], safe: str = "") -> str:
    for name, value in pairs:
        ensure_encodable(name, what="parameter name")
        ensure_encodable(value, what=f"parameter '{name}'")
    return urlencode(list(pairs), safe=safe)


class UrlComposer:
    """Builds request URLs against the REST and video base URLs.

    Attributes:
        rest_base_url: Base URL for all regular calls, with trailing slash.
        video_base_url: Base URL for video uploads, with trailing slash.
    """

    def __init__(self, rest_base_url: str, video_base_url: str):
        self.rest_base_url = _with_trailing_slash(rest_base_url)
        self.video_base_url = _with_trailing_slash(video_base_url)

    def object_url(
        self,
        object_id: str,
        connection: str | None = None,
        reading: ReadSpec | None = None,
    ) -> str:
        """URL of an object or one of its connections.

        Example:
            ``object_url("me", "feed", ReadSpec(limit=2))`` gives
            ``https://graph.facebook.com/me/feed?limit=2``.
        """
        return self._compose(self.rest_base_url, object_id, connection, reading)

    def video_url(
        self,
        object_id: str,
        connection: str | None = None,
        reading: ReadSpec | None = None,
    ) -> str:
        """Same as :meth:`object_url` but against the video upload host."""
        return self._compose(self.video_base_url, object_id, connection, reading)

    def search_url(
        self,
        query: str | None = None,
        object_type: SearchType | str | None = None,
        reading: ReadSpec | None = None,
    ) -> str:
        """URL of the search endpoint.

        ``type`` comes first, then ``q``, then the read directives. Without any
        of them the URL carries no query string at all.
        """
        url = f"{self.rest_base_url}search"
        if object_type is not None:
            type_value = (
                object_type.value
                if isinstance(object_type, SearchType)
                else object_type
            )
            url = append_query(url, f"type={encode_component(type_value)}")
        if query is not None:
            url = append_query(url, f"q={encode_component(query)}")
        if reading is not None:
            url = append_query(url, reading.to_query())
        return url

    def fql_url(self, query: str) -> str:
        """URL running one FQL query."""
        return f"{self.rest_base_url}fql?q={encode_component(query)}"

    def multi_fql_url(self, queries: Mapping[str, str]) -> str:
        """URL running several named FQL queries in one call.

        The queries are sent as a JSON object keyed by query name.
        """
        payload = json.dumps(dict(queries), ensure_ascii=False, separators=(",", ":"))
        return f"{self.rest_base_url}fql?q={encode_component(payload)}"

    def root_url(
        self,
        pairs: Sequence[tuple[str, str]] = (),
        reading: ReadSpec | None = None,
    ) -> str:
        """URL of the API root, used for id-batch lookups such as ``?ids=a,b``."""
        url = self.rest_base_url
        if pairs:
            url = append_query(url, encode_pairs(pairs, safe=","))
        if reading is not None:
            url = append_query(url, reading.to_query())
        return url

    def _compose(
        self,
        base_url: str,
        object_id: str,
        connection: str | None,
        reading: ReadSpec | None,
    ) -> str:
        url = f"{base_url}{object_id}"
        if connection:
            url = f"{url}/{connection}"
        if reading is not None:
            url = append_query(url, reading.to_query())
        return url


def _with_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"
