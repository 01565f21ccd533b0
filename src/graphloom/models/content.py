"""Pydantic models for things people publish and receive.

Posts, comments, links, notes, messages, notifications, questions,
checkins and location stories.
"""

from typing import Any

from pydantic import Field

from .base import (
    Action,
    GraphDateTime,
    GraphEntity,
    Place,
    Privacy,
    Reference,
    ReferenceList,
)


class Post(GraphEntity):
    """Model representing a feed story or status update.

    Attributes:
        from_: The author (``from`` on the wire).
        to: The targets of the post.
        message: The post's text.
        type: Kind of post (``status``, ``link``, ``photo``, ...).
        status_type: Finer-grained kind of status update.
        likes: Embedded likes summary.
        comments: Embedded comments summary.
    """

    from_: Reference | None = Field(default=None, alias="from")
    to: ReferenceList | None = None
    message: str | None = None
    picture: str | None = None
    link: str | None = None
    name: str | None = None
    caption: str | None = None
    description: str | None = None
    source: str | None = None
    icon: str | None = None
    type: str | None = None
    status_type: str | None = None
    story: str | None = None
    object_id: str | None = None
    application: Reference | None = None
    actions: list[Action] | None = None
    privacy: Privacy | None = None
    place: Place | None = None
    likes: ReferenceList | None = None
    comments: dict[str, Any] | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class Comment(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    message: str | None = None
    can_remove: bool | None = None
    like_count: int | None = None
    user_likes: bool | None = None
    created_time: GraphDateTime | None = None


class Link(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    link: str | None = None
    name: str | None = None
    caption: str | None = None
    description: str | None = None
    icon: str | None = None
    picture: str | None = None
    message: str | None = None
    created_time: GraphDateTime | None = None


class Note(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    subject: str | None = None
    message: str | None = None
    icon: str | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class Message(GraphEntity):
    """A message or message thread.

    Attributes:
        unread: Number of unread messages in a thread.
        unseen: Number of unseen messages in a thread.
    """

    from_: Reference | None = Field(default=None, alias="from")
    to: ReferenceList | None = None
    message: str | None = None
    unread: int | None = None
    unseen: int | None = None
    comments: dict[str, Any] | None = None
    updated_time: GraphDateTime | None = None
    created_time: GraphDateTime | None = None


class Notification(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    to: Reference | None = None
    title: str | None = None
    link: str | None = None
    application: Reference | None = None
    unread: bool | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class QuestionOption(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    name: str | None = None
    vote_count: int | None = None
    object: Reference | None = None
    votes: ReferenceList | None = None
    created_time: GraphDateTime | None = None


class Question(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    question: str | None = None
    options: dict[str, Any] | None = None
    created_time: GraphDateTime | None = None
    updated_time: GraphDateTime | None = None


class Checkin(GraphEntity):
    from_: Reference | None = Field(default=None, alias="from")
    tags: ReferenceList | None = None
    place: Place | None = None
    application: Reference | None = None
    message: str | None = None
    likes: ReferenceList | None = None
    comments: dict[str, Any] | None = None
    created_time: GraphDateTime | None = None


class Location(GraphEntity):
    """A story that places a user somewhere: a checkin, or a tagged post or photo.

    Attributes:
        type: The kind of object carrying the location (``checkin``,
            ``status``, ``photo``, ...).
    """

    from_: Reference | None = Field(default=None, alias="from")
    tags: ReferenceList | None = None
    place: Place | None = None
    application: Reference | None = None
    type: str | None = None
    created_time: GraphDateTime | None = None
