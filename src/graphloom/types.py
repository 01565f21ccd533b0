# graphloom/types.py
"""Request description and wire encoding.

:class:`RequestData` holds everything needed to send one call and knows how
to encode its :class:`~graphloom.params.ParameterSet` for the verb: into the
query string for GET and DELETE, as a form body for POST, or as a multipart
body when the set carries media.
"""

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .params import ParameterSet
from .urls import append_query, encode_pairs

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class RequestData(BaseModel):
    """Encapsulates data for a single HTTP request."""

    method: str
    url: str
    params: ParameterSet | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_multipart(self) -> bool:
        return self.params is not None and self.params.has_media()

    def final_url(self) -> str:
        """The URL actually requested, including query-string parameters."""
        if self.params and self.method.upper() in ("GET", "DELETE"):
            return append_query(self.url, encode_pairs(self.params.form_pairs()))
        return self.url

    def build_request(self, client: httpx.AsyncClient | None = None) -> httpx.Request:
        """Builds an httpx.Request object from the stored data.

        When ``client`` is given the request is built through it, picking up the
        client's default headers and timeout. Repeated parameter names are
        preserved in every encoding.
        """
        build = client.build_request if client is not None else httpx.Request
        method = self.method.upper()
        headers = dict(self.headers)
        if not self.params or method in ("GET", "DELETE"):
            return build(method, self.final_url(), headers=headers)

        if self.params.has_media():
            data: dict[str, list[str]] = {}
            for name, value in self.params.form_pairs():
                data.setdefault(name, []).append(value)
            return build(
                method,
                self.url,
                data=data,
                files=self.params.files(),
                headers=headers,
            )

        headers["Content-Type"] = FORM_CONTENT_TYPE
        return build(
            method,
            self.url,
            content=encode_pairs(self.params.form_pairs()).encode("ascii"),
            headers=headers,
        )
