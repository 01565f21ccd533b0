"""Base class and mixins shared by the graphloom resource clients.

Every resource operation follows one of a few shapes, implemented once here:

* fetch one: GET, then decode a single entity (``false`` means absent)
* fetch list: GET, then decode a paged list
* mutate: POST, then decode a ``true``/``false`` acknowledgment or the id
  of the created object
* delete: DELETE, then decode an acknowledgment
* redirect: GET, then read the ``Location`` header

Each shape checks that a credential is configured before any request is
sent, unless the caller explicitly allows anonymous use.
"""

from typing import TYPE_CHECKING, Any, Protocol

from ..constants import ME, PictureSize
from ..endpoints import COMMENTS, FEED, LIKES, PICTURE
from ..envelope import (
    PagedResult,
    decode_ack,
    decode_entity,
    decode_id,
    decode_id_map,
    decode_list,
    parse_json,
)
from ..exceptions import MalformedResponse
from ..log_config import logger
from ..models import Comment, Like, Post, PostUpdate
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind, decoder_for
from ..urls import UrlComposer

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class BaseResourceClient:
    """Base class for all resource clients.

    Attributes:
        _api_client: The `BaseGraphClient` used to send requests.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        """
        Initialize the base resource client.

        Args:
            api_client: An instance of BaseGraphClient.
        """
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized")

    @property
    def urls(self) -> UrlComposer:
        return self._api_client.urls

    def _ensure_authorized(self) -> None:
        self._api_client.ensure_authorized()

    async def _fetch_one(
        self,
        url: str,
        kind: EntityKind,
        params: ParameterSet | None = None,
        *,
        require_auth: bool = True,
    ) -> Any | None:
        """GET a single entity; returns None for the ``false`` absent body."""
        if require_auth:
            self._ensure_authorized()
        response = await self._api_client.send("GET", url, params)
        return decode_entity(parse_json(response), decoder_for(kind))

    async def _fetch_list(
        self,
        url: str,
        kind: EntityKind,
        params: ParameterSet | None = None,
        *,
        require_auth: bool = True,
    ) -> PagedResult[Any]:
        """GET a list connection and decode it into a PagedResult."""
        if require_auth:
            self._ensure_authorized()
        response = await self._api_client.send("GET", url, params)
        return decode_list(parse_json(response), decoder_for(kind))

    async def _fetch_id_map(
        self, url: str, kind: EntityKind, params: ParameterSet | None = None
    ) -> list[Any]:
        """GET an id-keyed batch (``?ids=a,b``) and decode each entry."""
        self._ensure_authorized()
        response = await self._api_client.send("GET", url, params)
        return decode_id_map(parse_json(response), decoder_for(kind))

    async def _fetch_json(
        self, url: str, params: ParameterSet | None = None
    ) -> Any:
        """GET and return the decoded JSON body unchanged."""
        self._ensure_authorized()
        response = await self._api_client.send("GET", url, params)
        return parse_json(response)

    async def _post_for_ack(
        self, url: str, params: ParameterSet | None = None
    ) -> bool:
        """POST and decode a plain-text ``true``/``false`` body."""
        self._ensure_authorized()
        response = await self._api_client.send("POST", url, params)
        return decode_ack(response.text)

    async def _post_for_id(
        self, url: str, params: ParameterSet | None = None
    ) -> str:
        """POST and return the id of the created object."""
        self._ensure_authorized()
        response = await self._api_client.send("POST", url, params)
        return decode_id(parse_json(response))

    async def _post_for_entity(
        self, url: str, kind: EntityKind, params: ParameterSet | None = None
    ) -> Any:
        """POST and decode the returned object."""
        self._ensure_authorized()
        response = await self._api_client.send("POST", url, params)
        entity = decode_entity(parse_json(response), decoder_for(kind))
        if entity is None:
            raise MalformedResponse(
                "Create call returned no object.", response=response
            )
        return entity

    async def _delete(self, url: str, params: ParameterSet | None = None) -> bool:
        """DELETE and decode a plain-text ``true``/``false`` body."""
        self._ensure_authorized()
        response = await self._api_client.send("DELETE", url, params)
        return decode_ack(response.text)

    async def _fetch_redirect(
        self, url: str, params: ParameterSet | None = None
    ) -> str:
        """GET a redirecting endpoint and return its ``Location`` header."""
        self._ensure_authorized()
        response = await self._api_client.send(
            "GET", url, params, expect_redirect=True
        )
        location = response.headers.get("Location")
        if not location:
            raise MalformedResponse(
                "Expected a redirect with a Location header.", response=response
            )
        return location


class ResourceClientProtocol(Protocol):
    """The parts of BaseResourceClient the mixins rely on."""

    @property
    def urls(self) -> UrlComposer: ...

    async def _fetch_list(
        self,
        url: str,
        kind: EntityKind,
        params: ParameterSet | None = None,
        *,
        require_auth: bool = True,
    ) -> PagedResult[Any]: ...

    async def _post_for_ack(
        self, url: str, params: ParameterSet | None = None
    ) -> bool: ...

    async def _post_for_id(
        self, url: str, params: ParameterSet | None = None
    ) -> str: ...

    async def _delete(
        self, url: str, params: ParameterSet | None = None
    ) -> bool: ...

    async def _fetch_redirect(
        self, url: str, params: ParameterSet | None = None
    ) -> str: ...


class CommentsMixin:
    """Adds the ``comments`` connection of commentable objects."""

    async def get_comments(
        self: ResourceClientProtocol, object_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Comment]:
        url = self.urls.object_url(object_id, COMMENTS, reading)
        return await self._fetch_list(url, EntityKind.COMMENT)

    async def comment(
        self: ResourceClientProtocol, object_id: str, message: str
    ) -> str:
        """Comments on an object and returns the new comment's id."""
        url = self.urls.object_url(object_id, COMMENTS)
        return await self._post_for_id(url, ParameterSet.of(message=message))


class LikesMixin:
    """Adds the ``likes`` connection of likeable objects."""

    async def get_likes(
        self: ResourceClientProtocol, object_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[Like]:
        url = self.urls.object_url(object_id, LIKES, reading)
        return await self._fetch_list(url, EntityKind.LIKE)

    async def like(self: ResourceClientProtocol, object_id: str) -> bool:
        return await self._post_for_ack(self.urls.object_url(object_id, LIKES))

    async def unlike(self: ResourceClientProtocol, object_id: str) -> bool:
        return await self._delete(self.urls.object_url(object_id, LIKES))


class PictureMixin:
    """Adds picture URL lookup for objects with a ``picture`` connection."""

    async def get_picture_url(
        self: ResourceClientProtocol,
        object_id: str = ME,
        size: PictureSize | None = None,
    ) -> str:
        """Returns the URL of the object's picture.

        The API answers with a redirect to the image; its target is returned.
        """
        params = ParameterSet.of(type=size.value) if size is not None else None
        return await self._fetch_redirect(
            self.urls.object_url(object_id, PICTURE), params
        )


class FeedMixin:
    """Adds reading and posting on the ``feed`` connection of an object."""

    async def get_feed(
        self: ResourceClientProtocol,
        object_id: str = ME,
        reading: ReadSpec | None = None,
    ) -> PagedResult[Post]:
        url = self.urls.object_url(object_id, FEED, reading)
        return await self._fetch_list(url, EntityKind.POST)

    async def post_feed(
        self: ResourceClientProtocol, update: PostUpdate, object_id: str = ME
    ) -> str:
        """Publishes a post on the object's feed and returns the post id."""
        url = self.urls.object_url(object_id, FEED)
        return await self._post_for_id(url, update.to_parameters())

    async def post_link(
        self: ResourceClientProtocol,
        link: str,
        message: str | None = None,
        object_id: str = ME,
    ) -> str:
        url = self.urls.object_url(object_id, FEED)
        params = ParameterSet.of(link=link, message=message)
        return await self._post_for_id(url, params)

    async def post_status_message(
        self: ResourceClientProtocol, message: str, object_id: str = ME
    ) -> str:
        url = self.urls.object_url(object_id, FEED)
        return await self._post_for_id(url, ParameterSet.of(message=message))
