"""Transport layer and pagination for graphloom.

This module provides :class:`BaseGraphClient`, which sends one request per
call through an ``httpx.AsyncClient``, attaches the ambient credential, maps
transport and API failures onto the graphloom exception hierarchy and walks
the ``next``/``previous`` cursors of list responses.

The client never retries, caches or prefetches: each call is a single
request/response cycle whose outcome is reported to the caller once.
"""

import ssl
import time
from collections.abc import AsyncIterator
from typing import Any, Self, TypeVar

import certifi
import httpx

from .auth import AuthStrategy, NoAuth
from .config import GraphSettings
from .constants import ACCESS_TOKEN_PARAM
from .envelope import PagedResult, decode_list, parse_json
from .exceptions import (
    ApiError,
    AuthorizationRequired,
    GraphloomError,
    NetworkError,
    TimeoutError,
    TransportError,
)
from .log_config import logger
from .monitoring import CallObserver, NullObserver
from .params import ParameterSet
from .types import RequestData
from .urls import UrlComposer

T = TypeVar("T")


class BaseGraphClient:
    """Asynchronous HTTP client for the Graph API.

    Holds the settings, the authentication strategy, the call observer and the
    underlying ``httpx.AsyncClient``. None of these change after construction,
    so one instance can be shared between tasks.

    Attributes:
        urls: Composer for every URL this client requests.
        _settings: Configuration settings for the client.
        _auth_strategy: Authentication strategy instance.
        _observer: Receives timing notifications for every call.
        _http_client: The underlying httpx.AsyncClient for making requests.
        _should_close_client: Flag indicating if this instance owns the _http_client.
    """

    def __init__(
        self,
        settings: GraphSettings,
        auth_strategy: AuthStrategy | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        observer: CallObserver | None = None,
    ):
        """Initialize the BaseGraphClient.

        Args:
            settings: Configuration settings for the client.
            auth_strategy: Optional authentication strategy. If None, uses NoAuth.
            http_client: Optional pre-configured httpx.AsyncClient instance.
            observer: Optional observer notified after every call.
        """
        self._settings = settings
        self.urls = UrlComposer(settings.rest_base_url, settings.video_base_url)

        self._auth_strategy: AuthStrategy = auth_strategy or NoAuth()
        logger.info(
            f"Using authentication strategy: {type(self._auth_strategy).__name__}"
        )
        self._observer: CallObserver = observer or NullObserver()

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        logger.debug("BaseGraphClient initialized.")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Redirects are not followed, so picture lookups can read the
        ``Location`` header of the redirect response.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning(
                "certifi bundle failed to load. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
            follow_redirects=False,
        )

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    @property
    def auth_strategy(self) -> AuthStrategy:
        return self._auth_strategy

    @property
    def observer(self) -> CallObserver:
        return self._observer

    @property
    def is_authorized(self) -> bool:
        """Whether a credential is configured."""
        return self._auth_strategy.enabled

    def ensure_authorized(self) -> None:
        """Fails fast when no credential is configured.

        Raises:
            AuthorizationRequired: If the auth strategy supplies no credential.
        """
        if not self.is_authorized:
            raise AuthorizationRequired()

    async def send(
        self,
        method: str,
        url: str,
        params: ParameterSet | None = None,
        *,
        authenticate: bool = True,
        expect_redirect: bool = False,
    ) -> httpx.Response:
        """Send one request and return its response.

        The ambient credential is attached unless ``authenticate`` is False or
        the call already carries its own ``access_token``, either in
        ``params`` or embedded in ``url``.

        Args:
            method: HTTP method (GET, POST or DELETE).
            url: Absolute request URL, possibly with a query string.
            params: Parameters sent in the query (GET, DELETE) or body (POST).
            authenticate: Whether to attach the ambient credential.
            expect_redirect: Accept a 3xx response instead of treating it as
                an error.

        Returns:
            httpx.Response: The raw response.

        Raises:
            EncodingError: If a parameter cannot be encoded.
            TimeoutError: If the request times out.
            NetworkError: For connection failures.
            TransportError: For other transport failures.
            ApiError: For error status codes.
        """
        request_data = RequestData(method=method, url=url, params=params)
        request = request_data.build_request(self._http_client)

        if authenticate and not _carries_access_token(request.url, params):
            await self._auth_strategy.async_authenticate(request)

        if "User-Agent" not in request.headers:
            request.headers["User-Agent"] = self._settings.user_agent

        logger.debug(f"Sending request: {request.method} {request.url}")
        logger.trace(f"Request Headers: {request.headers}")

        success = False
        started = time.perf_counter()
        try:
            response = await self._http_client.send(request)
            success = response.status_code < 300 or (
                expect_redirect and 300 <= response.status_code < 400
            )
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise TransportError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e
        finally:
            elapsed = time.perf_counter() - started
            self._notify_observer(str(request.url), elapsed, success)

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        logger.trace(f"Response Headers: {response.headers}")

        if not success:
            raise _api_error(response)
        return response

    def _notify_observer(self, url: str, elapsed: float, success: bool) -> None:
        try:
            self._observer.on_call_completed(url, elapsed, success)
        except Exception as e:
            logger.error(
                f"Error in call observer {type(self._observer).__name__}: {e}"
            )

    async def fetch_next(self, result: PagedResult[T]) -> PagedResult[T] | None:
        """Fetch the page after ``result``.

        Returns:
            The next page decoded with the same element decoder, or None when
            ``result`` has no ``next`` cursor (no request is made then).

        Raises:
            AuthorizationRequired: If no credential is configured.
        """
        return await self._fetch_page(result, result.next)

    async def fetch_previous(self, result: PagedResult[T]) -> PagedResult[T] | None:
        """Fetch the page before ``result``; see :meth:`fetch_next`."""
        return await self._fetch_page(result, result.previous)

    async def _fetch_page(
        self, result: PagedResult[T], cursor: str | None
    ) -> PagedResult[T] | None:
        self.ensure_authorized()
        if cursor is None:
            return None
        if result.element_decoder is None:
            raise ValueError("Cannot page a result that has no element decoder.")
        logger.debug(f"Following cursor {cursor}")
        response = await self.send("GET", cursor)
        return decode_list(parse_json(response), result.element_decoder)

    async def iterate_pages(
        self, result: PagedResult[T]
    ) -> AsyncIterator[PagedResult[T]]:
        """Yield ``result`` and then every following page.

        A page is requested only when the consumer asks for the next one.
        """
        page: PagedResult[T] | None = result
        while page is not None:
            yield page
            page = await self.fetch_next(page)

    async def iterate_items(self, result: PagedResult[T]) -> AsyncIterator[T]:
        """Yield every item of ``result`` and of the pages after it."""
        async for page in self.iterate_pages(result):
            for item in page:
                yield item

    async def aclose(self) -> None:
        """Close the underlying HTTP client and any auth-specific clients."""
        if (
            self._should_close_client
            and self._http_client
            and not self._http_client.is_closed
        ):
            await self._http_client.aclose()
            logger.info(f"{type(self).__name__} internal HTTP client closed.")
        await self._auth_strategy.async_close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()


def _carries_access_token(url: httpx.URL, params: ParameterSet | None) -> bool:
    if params is not None and params.contains_access_token():
        return True
    return ACCESS_TOKEN_PARAM in url.params


def _api_error(response: httpx.Response) -> GraphloomError:
    body: Any
    try:
        body = response.json()
    except ValueError:
        body = None
    error = ApiError.from_error_body(body, response=response)
    logger.error(
        f"API request failed: {response.status_code} {response.request.url} - "
        f"{error.error_message or 'no error body'}"
    )
    return error
