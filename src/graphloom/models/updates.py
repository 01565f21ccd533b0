"""Input models for create and update calls.

Each model validates the caller's input and turns it into the
:class:`~graphloom.params.ParameterSet` sent as the request body. Unset
fields are left out of the request.
"""

import json
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..constants import PictureSize
from ..params import Media, ParameterSet

__all__ = [
    "AlbumCreate",
    "CheckinCreate",
    "EventUpdate",
    "GeoLocation",
    "PhotoUpload",
    "PictureSize",
    "PostUpdate",
    "PrivacySetting",
    "TagUpdate",
    "format_graph_time",
]


def format_graph_time(value: datetime | int) -> str | int:
    """Formats a datetime the way the API expects it; ints pass through."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.strftime("%Y-%m-%dT%H:%M:%S")
        return value.strftime("%Y-%m-%dT%H:%M:%S%z")
    return value


class _UpdateModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    def _wire_items(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

    def to_parameters(self) -> ParameterSet:
        """Returns the request parameters for this input."""
        return ParameterSet.of(*self._wire_items().items())


class GeoLocation(_UpdateModel):
    """A point given as latitude and longitude in decimal degrees."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    def as_center(self) -> str:
        """The ``lat,lng`` form used by the search ``center`` parameter."""
        return f"{self.latitude},{self.longitude}"

    def as_json(self) -> str:
        return json.dumps({"latitude": self.latitude, "longitude": self.longitude})


class PrivacySetting(_UpdateModel):
    """Who can see a post: ``EVERYONE``, ``ALL_FRIENDS``, ``SELF`` or ``CUSTOM``."""

    value: str
    allow: list[str] | None = None
    deny: list[str] | None = None

    def as_json(self) -> str:
        payload: dict[str, Any] = {"value": self.value}
        if self.allow:
            payload["allow"] = ",".join(self.allow)
        if self.deny:
            payload["deny"] = ",".join(self.deny)
        return json.dumps(payload)


class PostUpdate(_UpdateModel):
    """Content for a new feed post.

    At least one of ``message`` or ``link`` must be given.

    Attributes:
        tags: User ids tagged in the post; requires ``place``.
        published: False to create an unpublished page post.
        scheduled_publish_time: When an unpublished page post goes live.
    """

    message: str | None = None
    link: str | None = None
    picture: str | None = None
    name: str | None = None
    caption: str | None = None
    description: str | None = None
    place: str | None = None
    tags: list[str] | None = None
    privacy: PrivacySetting | None = None
    object_attachment: str | None = None
    published: bool | None = None
    scheduled_publish_time: datetime | int | None = None

    @model_validator(mode="after")
    def check_content(self) -> "PostUpdate":
        if self.message is None and self.link is None:
            raise ValueError("PostUpdate requires 'message' or 'link'.")
        return self

    def _wire_items(self) -> dict[str, Any]:
        items = self.model_dump(
            exclude_none=True, exclude={"tags", "privacy", "scheduled_publish_time"}
        )
        if self.tags:
            items["tags"] = ",".join(self.tags)
        if self.privacy is not None:
            items["privacy"] = self.privacy.as_json()
        if self.scheduled_publish_time is not None:
            items["scheduled_publish_time"] = format_graph_time(
                self.scheduled_publish_time
            )
        return items


class AlbumCreate(_UpdateModel):
    name: str
    message: str | None = None
    location: str | None = None
    privacy: PrivacySetting | None = None

    def _wire_items(self) -> dict[str, Any]:
        items = self.model_dump(exclude_none=True, exclude={"privacy"})
        if self.privacy is not None:
            items["privacy"] = self.privacy.as_json()
        return items


class EventUpdate(_UpdateModel):
    """Details for creating or editing an event.

    ``name`` and ``start_time`` are required by the API when creating.
    """

    name: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    description: str | None = None
    location: str | None = None
    location_id: str | None = None
    privacy_type: str | None = None

    def _wire_items(self) -> dict[str, Any]:
        items = self.model_dump(exclude_none=True)
        for key in ("start_time", "end_time"):
            if key in items:
                items[key] = format_graph_time(items[key])
        return items


class CheckinCreate(_UpdateModel):
    """A new checkin at a place.

    Attributes:
        place: Id of the page of the place.
        coordinates: Where the user is.
        tags: Ids of friends checked in along with the user.
    """

    place: str
    coordinates: GeoLocation
    tags: list[str] | None = None
    message: str | None = None
    link: str | None = None
    picture: str | None = None

    def _wire_items(self) -> dict[str, Any]:
        items: dict[str, Any] = {
            "place": self.place,
            "coordinates": self.coordinates.as_json(),
        }
        if self.tags:
            items["tags"] = ",".join(self.tags)
        items.update(
            self.model_dump(
                exclude_none=True, include={"message", "link", "picture"}
            )
        )
        return items


class TagUpdate(_UpdateModel):
    """A tag placed on a photo.

    Either ``to`` (a user id) or ``tag_text`` names what is tagged. ``x`` and
    ``y`` are percentages from the photo's left and top edges.
    """

    to: str | None = None
    tag_text: str | None = None
    x: float | None = Field(default=None, ge=0, le=100)
    y: float | None = Field(default=None, ge=0, le=100)


class PhotoUpload(_UpdateModel):
    """A photo file with its optional caption and placement."""

    source: Media
    message: str | None = None
    place: str | None = None
    no_story: bool | None = None

    def _wire_items(self) -> dict[str, Any]:
        items: dict[str, Any] = {"source": self.source}
        items.update(self.model_dump(exclude_none=True, exclude={"source"}))
        return items
