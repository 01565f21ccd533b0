"""Exception hierarchy for graphloom.

Every failure surfaced by the client is a :class:`GraphloomError`. Callers can
catch that single category and branch on :attr:`GraphloomError.kind`, or
catch the concrete subclasses. The original exception, when there is one, is
chained and available as :attr:`GraphloomError.cause`.
"""

from enum import Enum
from typing import Any

import httpx


class ErrorKind(Enum):
    """The kind of failure carried by a :class:`GraphloomError`."""

    AUTHORIZATION_REQUIRED = "authorization_required"
    TRANSPORT = "transport"
    API = "api"
    MALFORMED_RESPONSE = "malformed_response"
    ENCODING = "encoding"
    CONFIGURATION = "configuration"
    AUTH = "auth"
    UNKNOWN = "unknown"


class GraphloomError(Exception):
    """Base exception class for all graphloom errors."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response associated with the error.
            request: Optional httpx.Request associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    @property
    def cause(self) -> BaseException | None:
        """The original exception this error was raised from, if any."""
        return self.__cause__

    def __str__(self) -> str:
        if self.response is not None:
            try:
                url_info = self.response.request.url
            except RuntimeError:
                # Responses built outside a transport carry no request.
                url_info = self.request.url if self.request is not None else "N/A"
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class AuthorizationRequired(GraphloomError):
    """Raised before any network call when an operation needs a credential."""

    kind = ErrorKind.AUTHORIZATION_REQUIRED

    def __init__(self, message: str = "Authorization is required for this call."):
        super().__init__(message)


class TransportError(GraphloomError):
    """Represents a failure of the underlying HTTP transport."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class TimeoutError(TransportError):
    """Represents a request timeout reported by the transport."""


class NetworkError(TransportError):
    """Represents a connection failure (DNS, refused connection, reset...)."""


class ApiError(GraphloomError):
    """Represents an error returned by the Graph API.

    The structured error body (``{"error": {"message": ..., "type": ...,
    "code": ..., "error_subcode": ...}}``) is preserved on the instance.

    Attributes:
        status_code: The HTTP status of the response, if any.
        error_code: The API's numeric error code, if given.
        error_subcode: The API's numeric error subcode, if given.
        error_type: The API's error type (e.g. ``OAuthException``).
        error_message: The API's error message.
    """

    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
        error_code: int | None = None,
        error_subcode: int | None = None,
        error_type: str | None = None,
        error_message: str | None = None,
    ):
        super().__init__(message, response=response, request=request)
        self.status_code = response.status_code if response is not None else None
        self.error_code = error_code
        self.error_subcode = error_subcode
        self.error_type = error_type
        self.error_message = error_message

    @classmethod
    def from_error_body(
        cls, body: Any, *, response: httpx.Response | None = None
    ) -> "ApiError":
        """Builds the most specific ApiError for a decoded error body.

        Args:
            body: The decoded JSON body, or None when the body was not JSON.
            response: The response that carried the error.
        """
        error: dict[str, Any] = {}
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = body["error"]

        status = response.status_code if response is not None else None
        error_message = error.get("message")
        if error_message:
            message = f"API error: {error_message}"
        elif status is not None:
            message = f"API request failed with status {status}"
        else:
            message = "API request failed"

        exc_cls: type[ApiError] = NotFoundError if status == 404 else cls
        return exc_cls(
            message,
            response=response,
            error_code=_as_int(error.get("code")),
            error_subcode=_as_int(error.get("error_subcode")),
            error_type=error.get("type"),
            error_message=error_message,
        )


class NotFoundError(ApiError):
    """Represents a resource not found error (404 Not Found)."""


class MalformedResponse(GraphloomError):
    """The response status was successful but the body has the wrong shape."""

    kind = ErrorKind.MALFORMED_RESPONSE


class EncodingError(GraphloomError):
    """A parameter or query value cannot be represented on the wire."""

    kind = ErrorKind.ENCODING


class ConfigurationError(GraphloomError):
    """Represents an error in the client's configuration."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str):
        super().__init__(message, response=None)


class AuthError(GraphloomError):
    """Raised when obtaining a credential fails, e.g. fetching an app token."""

    kind = ErrorKind.AUTH


def _as_int(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None
