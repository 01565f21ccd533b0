# graphloom/resources/__init__.py
"""Exposes the resource client classes."""

from .albums_client import AlbumsClient
from .base import (
    BaseResourceClient,
    CommentsMixin,
    FeedMixin,
    LikesMixin,
    PictureMixin,
)
from .checkins_client import CheckinsClient
from .comments_client import CommentsClient
from .domains_client import DomainsClient
from .events_client import EventsClient
from .fql_client import FqlClient
from .friends_client import FriendsClient
from .games_client import GamesClient
from .groups_client import GroupsClient
from .insights_client import InsightsClient
from .links_client import LinksClient
from .messages_client import MessagesClient
from .notes_client import NotesClient
from .notifications_client import NotificationsClient
from .pages_client import PagesClient
from .photos_client import PhotosClient
from .posts_client import PostsClient
from .questions_client import QuestionsClient
from .search_client import SearchClient
from .test_users_client import TestUsersClient
from .users_client import UsersClient
from .videos_client import VideosClient

__all__ = [
    "AlbumsClient",
    "BaseResourceClient",
    "CheckinsClient",
    "CommentsClient",
    "CommentsMixin",
    "DomainsClient",
    "EventsClient",
    "FeedMixin",
    "FqlClient",
    "FriendsClient",
    "GamesClient",
    "GroupsClient",
    "InsightsClient",
    "LikesMixin",
    "LinksClient",
    "MessagesClient",
    "NotesClient",
    "NotificationsClient",
    "PagesClient",
    "PhotosClient",
    "PictureMixin",
    "PostsClient",
    "QuestionsClient",
    "SearchClient",
    "TestUsersClient",
    "UsersClient",
    "VideosClient",
]
