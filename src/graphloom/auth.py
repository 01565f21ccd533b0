import asyncio
from typing import Protocol

import httpx

from .exceptions import AuthError, ConfigurationError
from .log_config import logger


class AuthStrategy(Protocol):
    """Protocol defining the interface for the client's credential sources.

    A strategy attaches the ambient credential to outgoing requests. The
    ``enabled`` flag tells the dispatcher whether a credential is configured
    at all; operations that need one fail fast when it is False.
    """

    @property
    def enabled(self) -> bool:
        """Whether this strategy supplies a credential."""
        ...

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Asynchronously modifies the request to add authentication information.

        Args:
            request: The httpx.Request object to modify.

        Raises:
            AuthError: If authentication fails (e.g., token fetching).
        """
        ...

    async def async_close(self) -> None:
        """
        Asynchronously closes any underlying resources used by the auth strategy.
        This method should be idempotent.
        """
        ...


class NoAuth:
    """Strategy for anonymous use; makes no modifications to the request."""

    @property
    def enabled(self) -> bool:
        return False

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Does nothing as no credential is configured."""
        logger.trace("Using NoAuth strategy, no authentication applied.")

    async def async_close(self) -> None:
        """No resources to close for NoAuth, this method is a no-op."""


class StaticTokenAuth:
    """Implements AuthStrategy using a pre-issued user or page access token.

    The token is sent in the `Authorization` header as a Bearer token.
    """

    def __init__(self, token: str | None):
        """Initializes StaticTokenAuth with the provided access token.

        Raises:
            ConfigurationError: If the token is None or empty.
        """
        if not token:
            raise ConfigurationError("StaticTokenAuth requires a non-empty 'token'.")
        self._token: str = token
        logger.debug("StaticTokenAuth initialized.")

    @property
    def enabled(self) -> bool:
        return True

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the 'Authorization: Bearer <token>' header to the request."""
        logger.trace("Authenticating request using StaticTokenAuth.")
        request.headers["Authorization"] = f"Bearer {self._token}"

    async def async_close(self) -> None:
        """No resources to close for StaticTokenAuth, this method is a no-op."""


class AppAccessTokenAuth:
    """Implements AuthStrategy with an app access token.

    The token is obtained once from the OAuth endpoint with the
    ``client_credentials`` grant and reused for every later request. A lock
    keeps concurrent first requests from fetching it twice.

    Attributes:
        _app_id: The application id.
        _app_secret: The application secret.
        _token_url: The URL of the OAuth access token endpoint.
        _access_token: The fetched app access token, once available.
        _token_client: An internal httpx.AsyncClient for fetching the token.
        _fetch_lock: An asyncio.Lock guarding the token fetch.
    """

    def __init__(
        self,
        app_id: str | None,
        app_secret: str | None,
        token_url: str | None,
        *,
        token_client: httpx.AsyncClient | None = None,
    ):
        if not all([app_id, app_secret, token_url]):
            raise ConfigurationError(
                "AppAccessTokenAuth requires 'app_id', 'app_secret', and 'token_url'."
            )
        assert app_id is not None
        assert app_secret is not None
        assert token_url is not None
        self._app_id: str = app_id
        self._app_secret: str = app_secret
        self._token_url: str = token_url
        self._access_token: str | None = None
        self._token_client: httpx.AsyncClient | None = token_client
        self._owns_token_client = token_client is None
        self._fetch_lock = asyncio.Lock()
        logger.debug("AppAccessTokenAuth initialized.")

    @property
    def enabled(self) -> bool:
        return True

    async def _get_token_client(self) -> httpx.AsyncClient:
        if self._token_client is None:
            self._token_client = httpx.AsyncClient(timeout=15.0)
        return self._token_client

    async def _fetch_access_token(self) -> str:
        """Fetches the app access token.

        Returns:
            The fetched access token.

        Raises:
            AuthError: If the endpoint fails, is unreachable, or returns a body
                without an access token.
        """
        async with self._fetch_lock:
            # Another task may have fetched it while we waited for the lock.
            if self._access_token:
                return self._access_token

            logger.info(f"Fetching app access token from {self._token_url}")
            client = await self._get_token_client()
            try:
                response = await client.get(
                    self._token_url,
                    params={
                        "client_id": self._app_id,
                        "client_secret": self._app_secret,
                        "grant_type": "client_credentials",
                    },
                )
                response.raise_for_status()
                body = response.json()
            except httpx.HTTPStatusError as e:
                logger.error(
                    f"HTTP error fetching app token: {e.response.status_code} - {e.response.text}"
                )
                raise AuthError(
                    f"Failed to fetch app access token: {e.response.status_code} - {e.response.text}",
                    response=e.response,
                ) from e
            except httpx.RequestError as e:
                logger.error(f"Error fetching app token: {e}")
                raise AuthError(f"Failed to fetch app access token: {e}") from e
            except ValueError as e:
                logger.error(f"App token response is not JSON: {e}")
                raise AuthError(f"App token response is not JSON: {e}") from e

            if not isinstance(body, dict):
                logger.error(f"App token response is not an object: {body!r}")
                raise AuthError("App token response is not a JSON object.")
            access_token = body.get("access_token")
            if not access_token:
                raise AuthError("Access token not found in token response.")
            logger.info("Successfully fetched app access token.")
            self._access_token = access_token
            return access_token

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Ensures the app token is available and adds the Authorization header."""
        logger.trace("Authenticating request using AppAccessTokenAuth.")
        token = self._access_token or await self._fetch_access_token()
        request.headers["Authorization"] = f"Bearer {token}"

    async def async_close(self) -> None:
        """Closes the internal HTTP client used for token fetching."""
        if self._token_client and self._owns_token_client:
            await self._token_client.aclose()
            self._token_client = None
            logger.debug("AppAccessTokenAuth internal client closed.")
