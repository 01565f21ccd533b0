"""graphloom: an asynchronous, typed client for the Facebook Graph API."""

__version__ = "0.1.0"

from .auth import AppAccessTokenAuth, AuthStrategy, NoAuth, StaticTokenAuth
from .client import BaseGraphClient
from .config import GraphSettings, get_settings
from .constants import ME, Order, PictureSize, SearchType
from .envelope import PagedResult
from .exceptions import (
    ApiError,
    AuthError,
    AuthorizationRequired,
    ConfigurationError,
    EncodingError,
    ErrorKind,
    GraphloomError,
    MalformedResponse,
    NetworkError,
    NotFoundError,
    TimeoutError,
    TransportError,
)
from .graph import GraphApiClient
from .monitoring import CallObserver, CallStatistics, CallSummary, NullObserver
from .params import Media, Parameter, ParameterSet
from .reading import ReadSpec, nested_field
from .registry import EntityKind

__all__ = [
    # Core Client
    "GraphApiClient",
    "BaseGraphClient",
    "GraphSettings",
    "get_settings",
    # Authentication
    "AuthStrategy",
    "AppAccessTokenAuth",
    "NoAuth",
    "StaticTokenAuth",
    # Requests and responses
    "ReadSpec",
    "nested_field",
    "PagedResult",
    "Media",
    "Parameter",
    "ParameterSet",
    "EntityKind",
    "ME",
    "Order",
    "PictureSize",
    "SearchType",
    # Observation
    "CallObserver",
    "CallStatistics",
    "CallSummary",
    "NullObserver",
    # Exceptions
    "GraphloomError",
    "ErrorKind",
    "ApiError",
    "AuthError",
    "AuthorizationRequired",
    "ConfigurationError",
    "EncodingError",
    "MalformedResponse",
    "NetworkError",
    "NotFoundError",
    "TimeoutError",
    "TransportError",
]
