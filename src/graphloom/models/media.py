"""Pydantic models for photos, albums, videos and the tags placed on them."""

from typing import Any

from pydantic import BaseModel, Field

from .base import (
    ENTITY_CONFIG,
    GraphDateTime,
    GraphEntity,
    Place,
    Reference,
    ReferenceList,
)


class Image(BaseModel):
    """One rendition of a photo."""

    height: int | None = None
    width: int | None = None
    source: str | None = None

    model_config = ENTITY_CONFIG


class Tag(GraphEntity):
    """A user or page tagged on a photo or video.

    Attributes:
        x: Horizontal position as a percentage of the width.
        y: Vertical position as a percentage of the height.
    """

    name: str | None = None
    x: float | None = None
    y: float | None = None
    created_time: GraphDateTime | None = None


class Photo(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    name: str | None = None
    icon: str | None = None
    picture: str | None = None
    source: str | None = None
    height: int | None = None
    width: int | None = None
    images: list[Image] | None = None
    link: str | None = None
    place: Place | None = None
    position: int | None = None
    tags: ReferenceList | None = None
    likes: ReferenceList | None = None
    comments: dict[str, Any] | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class Album(GraphEntity):
    """Model representing a photo album.

    Attributes:
        cover_photo: Id of the album's cover photo.
        count: Number of photos in the album.
        can_upload: Whether the viewer may add photos.
    """

    from_: Reference | None = Field(default=None, alias="from")
    name: str | None = None
    description: str | None = None
    location: str | None = None
    link: str | None = None
    cover_photo: str | None = None
    privacy: str | None = None
    count: int | None = None
    type: str | None = None
    can_upload: bool | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class Video(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    tags: ReferenceList | None = None
    name: str | None = None
    description: str | None = None
    picture: str | None = None
    embed_html: str | None = None
    icon: str | None = None
    source: str | None = None
    comments: dict[str, Any] | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None
