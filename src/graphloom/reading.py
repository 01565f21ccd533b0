"""Response-shaping directives for read calls.

A :class:`ReadSpec` selects fields, bounds a time range, limits and orders
results. It serializes to a query-string fragment (no leading ``?``) that
the URL composer appends to a request URL.

Example:
    >>> spec = ReadSpec().select("id", nested_field("likes", "name")).with_limit(5)
    >>> spec.to_query()
    'fields=id,likes(name)&limit=5'
"""

from datetime import UTC, datetime
from typing import Any, Self
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

from .constants import Order
from .exceptions import EncodingError
from .params import ensure_encodable

# Structural characters of the nested field syntax, kept literal on the wire.
FIELD_SAFE_CHARS = "(),.{}"

TimeBound = datetime | int | str


def encode_component(text: str, safe: str = "") -> str:
    """Percent-encodes one query-string component.

    Raises:
        EncodingError: If the text cannot be encoded as UTF-8.
    """
    ensure_encodable(text)
    try:
        return quote(text, safe=safe)
    except UnicodeEncodeError as e:
        raise EncodingError(f"Cannot encode query value {text!r}: {e}") from e


def nested_field(name: str, *sub_fields: str) -> str:
    """Builds the ``name(sub1,sub2)`` sub-selection syntax."""
    if not sub_fields:
        return name
    return f"{name}({','.join(sub_fields)})"


def _time_value(value: TimeBound) -> str:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return str(int(value.timestamp()))
    return str(value)


class ReadSpec(BaseModel):
    """Immutable set of optional directives shaping a read call's response.

    Attributes:
        fields: Field names to return, in order. Entries may use nested syntax.
        limit: Maximum number of items per page.
        offset: Number of items to skip.
        since: Lower time bound (datetime, unix seconds, or API time string).
        until: Upper time bound.
        order: Result ordering.
        locale: Locale for localized fields, e.g. ``en_US``.
        with_location: Only return items that carry location data.
        filter: Connection-specific filter expression.
        metadata: Ask for the object's connection metadata.
    """

    fields: tuple[str, ...] = ()
    limit: PositiveInt | None = None
    offset: NonNegativeInt | None = None
    since: TimeBound | None = None
    until: TimeBound | None = None
    order: Order | None = None
    locale: str | None = None
    with_location: bool = False
    filter: str | None = Field(default=None)
    metadata: bool = False

    model_config = ConfigDict(frozen=True)

    def _replace(self, **changes: Any) -> Self:
        return self.model_validate({**self.model_dump(), **changes})

    def select(self, *names: str) -> Self:
        """Returns a copy with the given field names appended to the selection."""
        return self._replace(fields=self.fields + tuple(names))

    def with_limit(self, limit: int) -> Self:
        return self._replace(limit=limit)

    def with_offset(self, offset: int) -> Self:
        return self._replace(offset=offset)

    def between(
        self, since: TimeBound | None = None, until: TimeBound | None = None
    ) -> Self:
        """Returns a copy bounded to the given time range."""
        return self._replace(since=since, until=until)

    def ordered(self, order: Order) -> Self:
        return self._replace(order=order)

    def with_locale(self, locale: str) -> Self:
        return self._replace(locale=locale)

    def is_empty(self) -> bool:
        return not self.to_query()

    def to_query(self) -> str:
        """Serializes the directives into a query-string fragment.

        Directives are emitted in a fixed order and unset ones are omitted, so
        equal specs always produce equal strings. An empty spec yields ``""``.

        Raises:
            EncodingError: If a field name or value cannot be encoded.
        """
        parts: list[str] = []
        if self.fields:
            encoded = ",".join(
                encode_component(name, safe=FIELD_SAFE_CHARS) for name in self.fields
            )
            parts.append(f"fields={encoded}")
        if self.limit is not None:
            parts.append(f"limit={self.limit}")
        if self.offset is not None:
            parts.append(f"offset={self.offset}")
        if self.since is not None:
            parts.append(f"since={encode_component(_time_value(self.since))}")
        if self.until is not None:
            parts.append(f"until={encode_component(_time_value(self.until))}")
        if self.order is not None:
            parts.append(f"order={self.order.value}")
        if self.locale is not None:
            parts.append(f"locale={encode_component(self.locale)}")
        if self.with_location:
            parts.append("with=location")
        if self.filter is not None:
            parts.append(f"filter={encode_component(self.filter)}")
        if self.metadata:
            parts.append("metadata=1")
        return "&".join(parts)

    def __str__(self) -> str:
        return self.to_query()
