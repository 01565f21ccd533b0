"""Lookup table of entity decoders.

Each :class:`EntityKind` maps to one decoder: a function turning one decoded
JSON object into its typed model. Decoders raise
:class:`~graphloom.exceptions.MalformedResponse` when the object does not fit
the model.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from . import models
from .exceptions import MalformedResponse

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)

Decoder = Callable[[Any], T]
"""A function decoding one JSON value into a ``T``."""


class EntityKind(Enum):
    """The kinds of object the client decodes responses into."""

    ACCOUNT = "account"
    ACHIEVEMENT = "achievement"
    ACTIVITY = "activity"
    ALBUM = "album"
    BOOK = "book"
    CHECKIN = "checkin"
    COMMENT = "comment"
    DOMAIN = "domain"
    EVENT = "event"
    FAMILY = "family"
    FRIEND = "friend"
    FRIENDLIST = "friendlist"
    FRIEND_REQUEST = "friend_request"
    GAME = "game"
    GROUP = "group"
    GROUP_DOC = "group_doc"
    GROUP_MEMBER = "group_member"
    INSIGHT = "insight"
    INTEREST = "interest"
    LIKE = "like"
    LINK = "link"
    LOCATION = "location"
    MESSAGE = "message"
    MOVIE = "movie"
    MUSIC = "music"
    NOTE = "note"
    NOTIFICATION = "notification"
    PAGE = "page"
    PERMISSION = "permission"
    PHOTO = "photo"
    PLACE = "place"
    POKE = "poke"
    POST = "post"
    QUESTION = "question"
    QUESTION_OPTION = "question_option"
    RSVP_STATUS = "rsvp_status"
    SCORE = "score"
    SUBSCRIBER = "subscriber"
    SUBSCRIBEDTO = "subscribedto"
    TAG = "tag"
    TELEVISION = "television"
    TEST_USER = "test_user"
    USER = "user"
    VIDEO = "video"
    RAW = "raw"


def model_decoder(model_cls: type[ModelT]) -> Decoder[ModelT]:
    """Builds a decoder validating a JSON object into ``model_cls``."""

    def decode(obj: Any) -> ModelT:
        try:
            return model_cls.model_validate(obj)
        except ValidationError as e:
            raise MalformedResponse(
                f"Could not decode {model_cls.__name__}: {e.error_count()} validation error(s)"
            ) from e

    decode.__name__ = f"decode_{model_cls.__name__.lower()}"
    decode.__qualname__ = decode.__name__
    return decode


def decode_raw(obj: Any) -> Any:
    """Returns the JSON value unchanged."""
    return obj


_MODELS: dict[EntityKind, type[BaseModel]] = {
    EntityKind.ACCOUNT: models.Account,
    EntityKind.ACHIEVEMENT: models.Achievement,
    EntityKind.ACTIVITY: models.Activity,
    EntityKind.ALBUM: models.Album,
    EntityKind.BOOK: models.Book,
    EntityKind.CHECKIN: models.Checkin,
    EntityKind.COMMENT: models.Comment,
    EntityKind.DOMAIN: models.Domain,
    EntityKind.EVENT: models.Event,
    EntityKind.FAMILY: models.Family,
    EntityKind.FRIEND: models.Friend,
    EntityKind.FRIENDLIST: models.Friendlist,
    EntityKind.FRIEND_REQUEST: models.FriendRequest,
    EntityKind.GAME: models.Game,
    EntityKind.GROUP: models.Group,
    EntityKind.GROUP_DOC: models.GroupDoc,
    EntityKind.GROUP_MEMBER: models.GroupMember,
    EntityKind.INSIGHT: models.Insight,
    EntityKind.INTEREST: models.Interest,
    EntityKind.LIKE: models.Like,
    EntityKind.LINK: models.Link,
    EntityKind.LOCATION: models.Location,
    EntityKind.MESSAGE: models.Message,
    EntityKind.MOVIE: models.Movie,
    EntityKind.MUSIC: models.Music,
    EntityKind.NOTE: models.Note,
    EntityKind.NOTIFICATION: models.Notification,
    EntityKind.PAGE: models.Page,
    EntityKind.PERMISSION: models.Permission,
    EntityKind.PHOTO: models.Photo,
    EntityKind.PLACE: models.Place,
    EntityKind.POKE: models.Poke,
    EntityKind.POST: models.Post,
    EntityKind.QUESTION: models.Question,
    EntityKind.QUESTION_OPTION: models.QuestionOption,
    EntityKind.RSVP_STATUS: models.RSVPStatus,
    EntityKind.SCORE: models.Score,
    EntityKind.SUBSCRIBER: models.Subscriber,
    EntityKind.SUBSCRIBEDTO: models.Subscribedto,
    EntityKind.TAG: models.Tag,
    EntityKind.TELEVISION: models.Television,
    EntityKind.TEST_USER: models.TestUser,
    EntityKind.USER: models.User,
    EntityKind.VIDEO: models.Video,
}

DECODERS: dict[EntityKind, Decoder[Any]] = {
    kind: model_decoder(model_cls) for kind, model_cls in _MODELS.items()
}
DECODERS[EntityKind.RAW] = decode_raw


def decoder_for(kind: EntityKind) -> Decoder[Any]:
    """Returns the registered decoder for an entity kind."""
    return DECODERS[kind]


def model_for(kind: EntityKind) -> type[BaseModel]:
    """Returns the model class an entity kind decodes into.

    Raises:
        KeyError: For :attr:`EntityKind.RAW`, which has no model.
    """
    return _MODELS[kind]
