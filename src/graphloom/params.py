"""Request parameter sets for mutate and lookup calls.

A :class:`ParameterSet` is an ordered, immutable sequence of name/value
pairs. Repeated names are allowed and only ever produced by an explicit
:meth:`ParameterSet.merge`; nothing is silently overwritten. Binary uploads
are carried as :class:`Media` values, which switch the request body to
multipart encoding.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from .constants import ACCESS_TOKEN_PARAM
from .exceptions import EncodingError

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class Media(BaseModel):
    """A binary payload uploaded as a multipart file part.

    Attributes:
        name: The file name reported to the API.
        content: The raw bytes.
        content_type: Optional MIME type; ``application/octet-stream`` if unset.
    """

    name: str
    content: bytes
    content_type: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> "Media":
        """Reads a file from disk into a Media value."""
        file_path = Path(path)
        return cls(
            name=file_path.name,
            content=file_path.read_bytes(),
            content_type=content_type,
        )

    def as_file(self) -> tuple[str, bytes, str]:
        """Returns the ``(filename, content, content_type)`` triple httpx expects."""
        return (self.name, self.content, self.content_type or DEFAULT_MEDIA_TYPE)

    def __repr__(self) -> str:
        return f"Media(name={self.name!r}, size={len(self.content)})"


ParameterValue = str | int | float | bool | Media


class Parameter(BaseModel):
    """A single request parameter."""

    name: str
    value: ParameterValue

    model_config = ConfigDict(frozen=True)

    @property
    def is_media(self) -> bool:
        return isinstance(self.value, Media)

    def wire_value(self) -> str:
        """Returns the value as it is sent in a form or query string.

        Raises:
            EncodingError: If the value is media or not representable as UTF-8.
        """
        if isinstance(self.value, Media):
            raise EncodingError(
                f"Parameter '{self.name}' carries media and has no text form."
            )
        if isinstance(self.value, bool):
            text = "true" if self.value else "false"
        else:
            text = str(self.value)
        ensure_encodable(text, what=f"parameter '{self.name}'")
        return text


class ParameterSet(BaseModel):
    """An ordered, immutable sequence of request parameters."""

    params: tuple[Parameter, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, *pairs: tuple[str, Any], **named: Any) -> "ParameterSet":
        """Builds a parameter set from pairs and keyword arguments, in order.

        Keyword arguments whose value is None are skipped, so optional
        parameters can be passed through unconditionally.

        Raises:
            EncodingError: If a value has a type that cannot be sent.
        """
        items = list(pairs) + [(k, v) for k, v in named.items() if v is not None]
        try:
            return cls(params=tuple(Parameter(name=k, value=v) for k, v in items))
        except ValidationError as e:
            raise EncodingError(f"Unsupported parameter value: {e}") from e

    def merge(self, other: "ParameterSet") -> "ParameterSet":
        """Concatenates two parameter sets without de-duplicating names."""
        return ParameterSet(params=self.params + other.params)

    def add(self, name: str, value: Any) -> "ParameterSet":
        """Returns a new set with one more parameter appended."""
        return self.merge(ParameterSet.of((name, value)))

    def contains_access_token(self) -> bool:
        return any(p.name == ACCESS_TOKEN_PARAM for p in self.params)

    def has_media(self) -> bool:
        return any(p.is_media for p in self.params)

    def pairs(self) -> list[tuple[str, ParameterValue]]:
        return [(p.name, p.value) for p in self.params]

    def form_pairs(self) -> list[tuple[str, str]]:
        """The text parameters encoded for a query string or form body."""
        return [(p.name, p.wire_value()) for p in self.params if not p.is_media]

    def files(self) -> list[tuple[str, tuple[str, bytes, str]]]:
        """The media parameters as httpx multipart file entries."""
        return [
            (p.name, p.value.as_file())
            for p in self.params
            if isinstance(p.value, Media)
        ]

    def __len__(self) -> int:
        return len(self.params)

    def __iter__(self) -> Iterator[Parameter]:  # type: ignore[override]
        return iter(self.params)

    def __bool__(self) -> bool:
        return bool(self.params)


def ensure_encodable(text: str, *, what: str = "value") -> None:
    """Checks that a string can be sent as UTF-8.

    Raises:
        EncodingError: If the string holds characters UTF-8 cannot encode
            (for instance unpaired surrogates).
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Cannot encode {what} as UTF-8: {e}") from e
