"""Decoding of response envelopes.

The API answers in one of three shapes, and every caller knows in advance
which one a call returns:

* list: ``{"data": [...], "paging": {"next": ..., "previous": ...}}``
* single entity: a bare JSON object, or the literal ``false`` when the
  object is absent
* acknowledgment: the plain-text body ``true`` or ``false``

The functions here decode each shape and raise
:class:`~graphloom.exceptions.MalformedResponse` when a body does not match
the declared shape.
"""

import json
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar, overload

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ApiError, GraphloomError, MalformedResponse
from .log_config import logger

T = TypeVar("T")


class PagedResult(BaseModel, Generic[T]):
    """One page of a list response.

    Behaves as a read-only sequence of its items. Instances are never
    modified; walking to another page produces a new instance decoded with
    the same ``element_decoder``.

    Attributes:
        data: The decoded items, in response order.
        next: Absolute URL of the next page, if any.
        previous: Absolute URL of the previous page, if any.
        raw: The decoded envelope this page was built from.
        summary: The ``summary`` object some connections include.
        element_decoder: The decoder that produced ``data``.
    """

    data: list[T] = Field(default_factory=list)
    next: str | None = None
    previous: str | None = None
    raw: Any = Field(default=None, repr=False)
    summary: dict[str, Any] | None = None
    element_decoder: Callable[[Any], T] | None = Field(
        default=None, exclude=True, repr=False
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self.data[index]

    def __bool__(self) -> bool:
        return bool(self.data)


def raise_for_error_body(
    envelope: Any, response: httpx.Response | None = None
) -> None:
    """Raises ApiError when a successful response carries an ``error`` object."""
    if isinstance(envelope, dict) and isinstance(envelope.get("error"), dict):
        logger.warning("Successful response carried an error object.")
        raise ApiError.from_error_body(envelope, response=response)


def parse_json(response: httpx.Response) -> Any:
    """Decodes a response body as JSON.

    Raises:
        MalformedResponse: If the body is not valid JSON.
        ApiError: If the body is an error object.
    """
    try:
        envelope = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedResponse(
            f"Response body is not valid JSON: {e}", response=response
        ) from e
    raise_for_error_body(envelope, response)
    return envelope


def _apply(decoder: Callable[[Any], T], value: Any, what: str) -> T:
    try:
        return decoder(value)
    except GraphloomError:
        raise
    except (TypeError, ValueError, KeyError) as e:
        raise MalformedResponse(f"Could not decode {what}: {e}") from e


def decode_list(
    envelope: Any, element_decoder: Callable[[Any], T]
) -> PagedResult[T]:
    """Decodes a list envelope into a :class:`PagedResult`.

    Raises:
        MalformedResponse: If ``data`` is missing or not a list, if ``paging``
            is not an object, or if any element fails to decode.
    """
    if not isinstance(envelope, dict):
        raise MalformedResponse(
            f"Expected a list envelope object, got {type(envelope).__name__}."
        )
    items = envelope.get("data")
    if not isinstance(items, list):
        raise MalformedResponse("List envelope has no 'data' array.")

    data = [
        _apply(element_decoder, item, f"list element {index}")
        for index, item in enumerate(items)
    ]

    paging = envelope.get("paging") or {}
    if not isinstance(paging, dict):
        raise MalformedResponse("List envelope 'paging' is not an object.")
    summary = envelope.get("summary")

    return PagedResult(
        data=data,
        next=paging.get("next"),
        previous=paging.get("previous"),
        raw=envelope,
        summary=summary if isinstance(summary, dict) else None,
        element_decoder=element_decoder,
    )


def decode_entity(envelope: Any, entity_decoder: Callable[[Any], T]) -> T | None:
    """Decodes a single-entity envelope.

    The literal ``false`` body means the entity is absent and yields None.

    Raises:
        MalformedResponse: If the object fails to decode.
    """
    if envelope is False:
        return None
    return _apply(entity_decoder, envelope, "entity")


def decode_ack(raw_body: str) -> bool:
    """Decodes a plain-text ``true``/``false`` acknowledgment.

    Surrounding whitespace is ignored.

    Raises:
        MalformedResponse: If the body is anything other than true or false.
    """
    text = raw_body.strip()
    if text == "true":
        return True
    if text == "false":
        return False
    raise MalformedResponse(f"Expected 'true' or 'false', got {text[:50]!r}.")


def decode_id(envelope: Any) -> str:
    """Extracts the ``id`` of the object a mutate call created.

    Raises:
        MalformedResponse: If the envelope has no string or numeric ``id``.
    """
    if isinstance(envelope, dict):
        object_id = envelope.get("id")
        if isinstance(object_id, str | int) and not isinstance(object_id, bool):
            return str(object_id)
    raise MalformedResponse("Mutate response has no 'id'.")


def decode_id_map(envelope: Any, entity_decoder: Callable[[Any], T]) -> list[T]:
    """Decodes an id-keyed object, as returned for ``?ids=a,b``.

    Entities are returned in the envelope's key order.

    Raises:
        MalformedResponse: If the envelope is not an object or an entry fails
            to decode.
    """
    if not isinstance(envelope, dict):
        raise MalformedResponse(
            f"Expected an id-keyed object, got {type(envelope).__name__}."
        )
    return [
        _apply(entity_decoder, value, f"entry '{key}'")
        for key, value in envelope.items()
    ]
