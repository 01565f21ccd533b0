"""Base Pydantic models for Graph API entities.

Every entity decoded from the API is an immutable :class:`GraphEntity`. All
attributes are optional: a key missing from the response leaves the attribute
unset (``None``) rather than failing validation, and keys the models do not
declare are kept as extra attributes.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _normalize_graph_time(value: Any) -> Any:
    """Rewrites the API's ``+0000`` offsets as ``+00:00`` before parsing.

    The API emits timestamps such as ``2012-06-20T01:30:00+0000``. Unix
    timestamps (ints) are passed through for pydantic to interpret.
    """
    if isinstance(value, str) and len(value) > 5 and value[-5] in "+-":
        offset = value[-5:]
        if offset[1:].isdigit():
            return f"{value[:-5]}{offset[:3]}:{offset[3:]}"
    return value


GraphDateTime = Annotated[datetime, BeforeValidator(_normalize_graph_time)]
"""A timestamp in the API's wire format, parsed into an aware datetime."""


ENTITY_CONFIG = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class GraphEntity(BaseModel):
    """A base model for every object returned by the Graph API.

    Attributes:
        id: The object id, when the API returns one.
    """

    id: str | None = None

    model_config = ENTITY_CONFIG


class Reference(GraphEntity):
    """A compact pointer to another object, as embedded in ``from``/``to`` keys.

    Attributes:
        name: Display name of the referenced object.
        category: Page category, present when the reference is a page.
    """

    name: str | None = None
    category: str | None = None


class ReferenceList(BaseModel):
    """An embedded connection, ``{"data": [...], "count": N}``."""

    data: list[Reference] = Field(default_factory=list)
    count: int | None = None

    model_config = ENTITY_CONFIG


class Category(GraphEntity):
    name: str | None = None


class Address(BaseModel):
    """A street address with coordinates.

    Attributes:
        latitude: Decimal degrees.
        longitude: Decimal degrees.
    """

    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    model_config = ENTITY_CONFIG


class Privacy(BaseModel):
    value: str | None = None
    description: str | None = None
    friends: str | None = None
    allow: str | None = None
    deny: str | None = None

    model_config = ENTITY_CONFIG


class Action(BaseModel):
    """A call-to-action link attached to a post."""

    name: str | None = None
    link: str | None = None

    model_config = ENTITY_CONFIG


class Place(GraphEntity):
    name: str | None = None
    category: str | None = None
    location: Address | None = None
