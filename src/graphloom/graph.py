# graphloom/graph.py
"""The high-level Graph API client.

:class:`GraphApiClient` resolves settings and credentials, owns the
transport (:class:`~graphloom.client.BaseGraphClient`) and exposes one
resource client per family of objects.
"""

import httpx

from .auth import AppAccessTokenAuth, AuthStrategy, NoAuth, StaticTokenAuth
from .client import BaseGraphClient
from .config import GraphSettings, get_settings
from .log_config import logger
from .monitoring import CallObserver, CallStatistics
from .resources import (
    AlbumsClient,
    CheckinsClient,
    CommentsClient,
    DomainsClient,
    EventsClient,
    FqlClient,
    FriendsClient,
    GamesClient,
    GroupsClient,
    InsightsClient,
    LinksClient,
    MessagesClient,
    NotesClient,
    NotificationsClient,
    PagesClient,
    PhotosClient,
    PostsClient,
    QuestionsClient,
    SearchClient,
    TestUsersClient,
    UsersClient,
    VideosClient,
)


class GraphApiClient(BaseGraphClient):
    """Asynchronous client for the Graph API and its FQL endpoint.

    Resource clients are available as properties. Every operation is one
    awaited request; list operations return a
    :class:`~graphloom.envelope.PagedResult` that can be paged with
    :meth:`fetch_next`, :meth:`fetch_previous` or :meth:`iterate_pages`.

    Typical usage:
    ```python
    async with GraphApiClient(access_token="...") as client:
        me = await client.users.get_me(ReadSpec().select("id", "name"))
        feed = await client.posts.get_feed(reading=ReadSpec(limit=25))
        async for post in client.iterate_items(feed):
            print(post.message)
    ```

    Attributes:
        users (UsersClient): Profiles and profile connections.
        posts (PostsClient): Feed posts and streams.
        search (SearchClient): The search endpoint (usable without a credential).
        fql (FqlClient): The legacy FQL endpoint.
    """

    def __init__(
        self,
        settings: GraphSettings | None = None,
        auth_strategy: AuthStrategy | None = None,
        *,
        access_token: str | None = None,
        app_id: str | None = None,
        app_secret: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        observer: CallObserver | None = None,
    ):
        """Initializes the GraphApiClient.

        Authentication Strategy Resolution:
        - If `auth_strategy` is explicitly provided, it is used.
        - Otherwise credentials passed to this constructor take precedence
          over those in `settings`, in this order:
            1. App access token (if app_id and app_secret are available)
            2. Static token (if access_token is available)
            3. No authentication; only search calls can be made then.

        Args:
            settings: Optional settings; global settings are loaded via
                `graphloom.config.get_settings()` when omitted.
            auth_strategy: Optional explicit authentication strategy.
            access_token: Optional user or page access token.
            app_id: Optional application id for an app access token.
            app_secret: Optional application secret for an app access token.
            http_client: Optional pre-configured httpx.AsyncClient. It is not
                closed by this client.
            observer: Optional call observer. When omitted and
                `settings.enable_call_statistics` is set, a `CallStatistics`
                observer is installed.
        """
        resolved_settings = settings or get_settings()

        if auth_strategy is not None:
            logger.info(
                f"Using explicitly provided authentication strategy: {type(auth_strategy).__name__}"
            )
            resolved_auth_strategy = auth_strategy
        else:
            resolved_auth_strategy = _resolve_auth_strategy(
                resolved_settings,
                access_token=access_token,
                app_id=app_id,
                app_secret=app_secret,
            )

        if observer is None and resolved_settings.enable_call_statistics:
            logger.info("Recording call statistics.")
            observer = CallStatistics()

        super().__init__(
            resolved_settings,
            resolved_auth_strategy,
            http_client=http_client,
            observer=observer,
        )

        self._users = UsersClient(api_client=self)
        self._posts = PostsClient(api_client=self)
        self._photos = PhotosClient(api_client=self)
        self._albums = AlbumsClient(api_client=self)
        self._videos = VideosClient(api_client=self)
        self._events = EventsClient(api_client=self)
        self._groups = GroupsClient(api_client=self)
        self._pages = PagesClient(api_client=self)
        self._friends = FriendsClient(api_client=self)
        self._comments = CommentsClient(api_client=self)
        self._links = LinksClient(api_client=self)
        self._notes = NotesClient(api_client=self)
        self._checkins = CheckinsClient(api_client=self)
        self._messages = MessagesClient(api_client=self)
        self._notifications = NotificationsClient(api_client=self)
        self._questions = QuestionsClient(api_client=self)
        self._games = GamesClient(api_client=self)
        self._insights = InsightsClient(api_client=self)
        self._domains = DomainsClient(api_client=self)
        self._search = SearchClient(api_client=self)
        self._fql = FqlClient(api_client=self)
        self._test_users = TestUsersClient(api_client=self)

        logger.debug("GraphApiClient initialized successfully.")

    @property
    def users(self) -> UsersClient:
        return self._users

    @property
    def posts(self) -> PostsClient:
        return self._posts

    @property
    def photos(self) -> PhotosClient:
        return self._photos

    @property
    def albums(self) -> AlbumsClient:
        return self._albums

    @property
    def videos(self) -> VideosClient:
        return self._videos

    @property
    def events(self) -> EventsClient:
        return self._events

    @property
    def groups(self) -> GroupsClient:
        return self._groups

    @property
    def pages(self) -> PagesClient:
        return self._pages

    @property
    def friends(self) -> FriendsClient:
        return self._friends

    @property
    def comments(self) -> CommentsClient:
        return self._comments

    @property
    def links(self) -> LinksClient:
        return self._links

    @property
    def notes(self) -> NotesClient:
        return self._notes

    @property
    def checkins(self) -> CheckinsClient:
        return self._checkins

    @property
    def messages(self) -> MessagesClient:
        return self._messages

    @property
    def notifications(self) -> NotificationsClient:
        return self._notifications

    @property
    def questions(self) -> QuestionsClient:
        return self._questions

    @property
    def games(self) -> GamesClient:
        """Scores and achievements of the calling application."""
        return self._games

    @property
    def insights(self) -> InsightsClient:
        return self._insights

    @property
    def domains(self) -> DomainsClient:
        return self._domains

    @property
    def search(self) -> SearchClient:
        return self._search

    @property
    def fql(self) -> FqlClient:
        return self._fql

    @property
    def test_users(self) -> TestUsersClient:
        """Test users of an application; needs an app access token."""
        return self._test_users


def _resolve_auth_strategy(
    settings: GraphSettings,
    *,
    access_token: str | None,
    app_id: str | None,
    app_secret: str | None,
) -> AuthStrategy:
    if app_id or app_secret:
        # A half pair passed here is completed from settings.
        app_id = app_id or settings.app_id
        app_secret = app_secret or settings.app_secret
        access_token = access_token or settings.access_token
    elif not access_token:
        app_id, app_secret = settings.app_id, settings.app_secret
        access_token = settings.access_token

    if app_id and app_secret:
        logger.info("Using app access token authentication.")
        return AppAccessTokenAuth(
            app_id=app_id,
            app_secret=app_secret,
            token_url=settings.oauth_access_token_url,
        )
    if access_token:
        logger.info("Using static token authentication.")
        return StaticTokenAuth(token=access_token)
    logger.info("No authentication credentials found, using NoAuth.")
    return NoAuth()
