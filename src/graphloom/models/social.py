"""Pydantic models for events, groups, pages, interests and app data.

Interests (likes, activities, books, games, movies, music, television) share
one shape: a page reference with a category and the time it was added.
"""

from typing import Any

from pydantic import BaseModel, Field

from .base import (
    ENTITY_CONFIG,
    Address,
    Category,
    GraphDateTime,
    GraphEntity,
    Reference,
)


class Event(GraphEntity):
    """Model representing an event.

    Attributes:
        owner: The event's creator.
        start_time: Start, possibly a bare date for all-day events.
        end_time: End, if given.
        location: Name of the venue.
        venue: Venue address and coordinates.
        privacy: ``OPEN``, ``SECRET`` or ``FRIENDS``.
        rsvp_status: The viewer's RSVP status, on user event connections.
    """

    owner: Reference | None = None
    name: str | None = None
    description: str | None = None
    start_time: GraphDateTime | None = None
    end_time: GraphDateTime | None = None
    location: str | None = None
    venue: Address | None = None
    privacy: str | None = None
    picture: Any | None = None
    rsvp_status: str | None = None
    updated_time: GraphDateTime | None = None


class RSVPStatus(GraphEntity):
    name: str | None = None
    rsvp_status: str | None = None


class Group(GraphEntity):
    owner: Reference | None = None
    name: str | None = None
    description: str | None = None
    link: str | None = None
    icon: str | None = None
    privacy: str | None = None
    venue: Address | None = None
    version: int | None = None
    bookmark_order: int | None = None
    updated_time: GraphDateTime | None = None


class GroupMember(GraphEntity):
    name: str | None = None
    administrator: bool | None = None


class GroupDoc(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    subject: str | None = None
    message: str | None = None
    icon: str | None = None
    revision: int | None = None
    can_edit: bool | None = None
    can_delete: bool | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class Page(GraphEntity):
    """Model representing a page.

    Attributes:
        likes: Number of people who like the page (older API versions).
        is_published: Whether the page is visible to the public.
        access_token: Page token, only when requested by a page admin.
    """

    name: str | None = None
    link: str | None = None
    category: str | None = None
    category_list: list[Category] | None = None
    is_published: bool | None = None
    can_post: bool | None = None
    likes: int | None = None
    location: Address | None = None
    phone: str | None = None
    checkins: int | None = None
    picture: Any | None = None
    cover: dict[str, Any] | None = None
    website: str | None = None
    talking_about_count: int | None = None
    access_token: str | None = None
    created_time: GraphDateTime | None = None


class Interest(GraphEntity):
    name: str | None = None
    category: str | None = None
    created_time: GraphDateTime | None = None


class Like(Interest):
    pass


class Activity(Interest):
    pass


class Book(Interest):
    pass


class Game(Interest):
    pass


class Movie(Interest):
    pass


class Music(Interest):
    pass


class Television(Interest):
    pass


class Score(BaseModel):
    """A user's score in a game application."""

    user: Reference | None = None
    score: int | None = None
    application: Reference | None = None
    type: str | None = None

    model_config = ENTITY_CONFIG


class Achievement(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    application: Reference | None = None
    achievement: dict[str, Any] | None = None
    publish_time: GraphDateTime | None = None


class InsightValue(BaseModel):
    value: Any | None = None
    end_time: GraphDateTime | None = None

    model_config = ENTITY_CONFIG


class Insight(GraphEntity):
    """One metric series from the insights connection.

    Attributes:
        period: Aggregation period (``day``, ``week``, ``days_28``, ...).
        values: The data points, oldest first.
    """

    name: str | None = None
    period: str | None = None
    title: str | None = None
    description: str | None = None
    values: list[InsightValue] | None = None


class Domain(GraphEntity):
    name: str | None = None
