"""Pydantic models for people and their relationships.

Covers users, test users, friends and friend lists, family members,
subscriptions, pokes, permissions and the pages a user manages (accounts).
"""

from pydantic import BaseModel, Field

from .base import (
    ENTITY_CONFIG,
    Category,
    GraphDateTime,
    GraphEntity,
    Reference,
)


class Education(BaseModel):
    school: Reference | None = None
    type: str | None = None
    year: Reference | None = None
    concentration: list[Reference] | None = None

    model_config = ENTITY_CONFIG


class Work(BaseModel):
    employer: Reference | None = None
    location: Reference | None = None
    position: Reference | None = None
    start_date: str | None = None
    end_date: str | None = None

    model_config = ENTITY_CONFIG


class User(GraphEntity):
    """Model representing a user profile.

    Attributes:
        name: Full display name.
        first_name: Given name.
        last_name: Family name.
        username: Vanity name, if the user has one.
        link: Profile URL.
        gender: Gender as reported by the API.
        locale: Locale string, e.g. ``en_US``.
        timezone: Offset from UTC in hours.
        updated_time: Last profile update.
        verified: Whether the account is verified.
        birthday: Birthday in ``MM/DD/YYYY`` form (year may be missing).
        hometown: Reference to the hometown page.
        location: Reference to the current location page.
        education: Education history.
        work: Work history.
    """

    name: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    link: str | None = None
    gender: str | None = None
    locale: str | None = None
    timezone: float | None = None
    updated_time: GraphDateTime | None = None
    verified: bool | None = None
    bio: str | None = None
    birthday: str | None = None
    email: str | None = None
    hometown: Reference | None = None
    location: Reference | None = None
    relationship_status: str | None = None
    significant_other: Reference | None = None
    website: str | None = None
    education: list[Education] | None = None
    work: list[Work] | None = None


class Friend(User):
    """A user seen through a friends connection."""


class Family(GraphEntity):
    name: str | None = None
    relationship: str | None = None


class FriendRequest(BaseModel):
    """A pending friend request.

    Attributes:
        from_: The requesting user (``from`` on the wire).
        to: The user being asked.
        unread: Whether the request is still unread.
    """

    from_: Reference | None = Field(default=None, alias="from")
    to: Reference | None = None
    message: str | None = None
    created_time: GraphDateTime | None = None
    unread: bool | None = None

    model_config = ENTITY_CONFIG


class Friendlist(GraphEntity):
    name: str | None = None
    list_type: str | None = None


class Subscriber(GraphEntity):
    name: str | None = None


class Subscribedto(GraphEntity):
    name: str | None = None


class Poke(BaseModel):
    from_: Reference | None = Field(default=None, alias="from")
    to: Reference | None = None
    created_time: GraphDateTime | None = None

    model_config = ENTITY_CONFIG


class Permission(BaseModel):
    """One granted (or declined) permission.

    The API reports permissions either as ``{"permission": ..., "status": ...}``
    rows or, on older versions, as a single object of ``name: 1`` flags; the
    latter are kept as extra attributes.
    """

    permission: str | None = None
    status: str | None = None

    model_config = ENTITY_CONFIG


class Account(GraphEntity):
    """A page or application the user manages.

    Attributes:
        access_token: A page access token for acting as the page.
        perms: Permissions the user holds on the page.
    """

    name: str | None = None
    category: str | None = None
    category_list: list[Category] | None = None
    access_token: str | None = None
    perms: list[str] | None = None


class TestUser(GraphEntity):
    """A test user created for an application.

    Attributes:
        access_token: Token for acting as the test user.
        login_url: One-time login URL.
        email: Generated email address.
        password: Generated password (only returned on creation).
    """

    access_token: str | None = None
    login_url: str | None = None
    email: str | None = None
    password: str | None = None
