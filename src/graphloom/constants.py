"""Constants used throughout graphloom.

This module defines the API base URLs, default client settings, the sentinel
id of the authenticated principal and the enumerations used as API parameter
values.
"""

from enum import Enum

# Base URLs
GRAPH_API_BASE_URL = "https://graph.facebook.com/"
GRAPH_VIDEO_BASE_URL = "https://graph-video.facebook.com/"
OAUTH_ACCESS_TOKEN_URL = "https://graph.facebook.com/oauth/access_token"

# Default settings
DEFAULT_TIMEOUT: float = 30.0

# The object id denoting the authenticated user.
ME = "me"

GRAPHLOOM_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"graphloom/{GRAPHLOOM_VERSION}"

ACCESS_TOKEN_PARAM = "access_token"


class PictureSize(Enum):
    """Picture sizes accepted by the ``picture`` connection's ``type`` parameter."""

    SQUARE = "square"
    SMALL = "small"
    NORMAL = "normal"
    LARGE = "large"


class Order(Enum):
    """Result orderings accepted by the ``order`` read directive."""

    CHRONOLOGICAL = "chronological"
    REVERSE_CHRONOLOGICAL = "reverse_chronological"


class SearchType(Enum):
    """Object types accepted by the search endpoint's ``type`` parameter."""

    POST = "post"
    USER = "user"
    PAGE = "page"
    EVENT = "event"
    GROUP = "group"
    PLACE = "place"
    CHECKIN = "checkin"
    LOCATION = "location"
