# tests/test_graph.py
import httpx
import pytest
from pytest_httpx import HTTPXMock

from graphloom import GraphApiClient
from graphloom.auth import AppAccessTokenAuth, NoAuth, StaticTokenAuth
from graphloom.config import GraphSettings
from graphloom.exceptions import AuthorizationRequired
from graphloom.monitoring import CallStatistics, NullObserver
from graphloom.resources import (
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


@pytest.mark.asyncio
async def test_explicit_strategy_wins(settings: GraphSettings):
    strategy = StaticTokenAuth("explicit")
    async with GraphApiClient(
        settings, strategy, access_token="ignored", app_id="1", app_secret="2"
    ) as client:
        assert client.auth_strategy is strategy


@pytest.mark.asyncio
async def test_app_credentials_take_precedence(settings: GraphSettings):
    async with GraphApiClient(
        settings, access_token="user_token", app_id="1", app_secret="secret"
    ) as client:
        assert isinstance(client.auth_strategy, AppAccessTokenAuth)
        assert client.is_authorized


@pytest.mark.asyncio
async def test_static_token_from_argument(settings: GraphSettings):
    async with GraphApiClient(settings, access_token="user_token") as client:
        assert isinstance(client.auth_strategy, StaticTokenAuth)


@pytest.mark.asyncio
async def test_argument_token_beats_app_credentials_from_settings(
    settings: GraphSettings,
):
    configured = settings.model_copy(update={"app_id": "1", "app_secret": "2"})
    async with GraphApiClient(configured, access_token="user_token") as client:
        assert isinstance(client.auth_strategy, StaticTokenAuth)
        assert client.auth_strategy._token == "user_token"


@pytest.mark.asyncio
async def test_argument_app_id_completed_from_settings(settings: GraphSettings):
    configured = settings.model_copy(
        update={"app_secret": "secret", "access_token": "from_settings"}
    )
    async with GraphApiClient(configured, app_id="1") as client:
        assert isinstance(client.auth_strategy, AppAccessTokenAuth)


@pytest.mark.asyncio
async def test_credentials_from_settings(settings: GraphSettings):
    configured = settings.model_copy(update={"access_token": "from_settings"})
    async with GraphApiClient(configured) as client:
        assert isinstance(client.auth_strategy, StaticTokenAuth)


@pytest.mark.asyncio
async def test_app_id_without_secret_falls_back(settings: GraphSettings):
    async with GraphApiClient(settings, app_id="1") as client:
        assert isinstance(client.auth_strategy, NoAuth)
        assert not client.is_authorized
        with pytest.raises(AuthorizationRequired):
            client.ensure_authorized()


@pytest.mark.asyncio
async def test_global_settings_are_used(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRAPHLOOM_ACCESS_TOKEN", "env_token")
    monkeypatch.setenv("GRAPHLOOM_REQUEST_TIMEOUT", "7")
    monkeypatch.delenv("GRAPHLOOM_APP_ID", raising=False)
    monkeypatch.delenv("GRAPHLOOM_APP_SECRET", raising=False)

    async with GraphApiClient() as client:
        assert client.settings.request_timeout == 7
        assert isinstance(client.auth_strategy, StaticTokenAuth)


@pytest.mark.asyncio
async def test_call_statistics_observer(settings: GraphSettings):
    async with GraphApiClient(settings) as client:
        assert isinstance(client.observer, NullObserver)

    enabled = settings.model_copy(update={"enable_call_statistics": True})
    async with GraphApiClient(enabled) as client:
        assert isinstance(client.observer, CallStatistics)

    observer = CallStatistics()
    async with GraphApiClient(enabled, observer=observer) as client:
        assert client.observer is observer


@pytest.mark.asyncio
async def test_resource_properties(settings: GraphSettings):
    expected = {
        "users": UsersClient,
        "posts": PostsClient,
        "photos": PhotosClient,
        "albums": AlbumsClient,
        "videos": VideosClient,
        "events": EventsClient,
        "groups": GroupsClient,
        "pages": PagesClient,
        "friends": FriendsClient,
        "comments": CommentsClient,
        "links": LinksClient,
        "notes": NotesClient,
        "checkins": CheckinsClient,
        "messages": MessagesClient,
        "notifications": NotificationsClient,
        "questions": QuestionsClient,
        "games": GamesClient,
        "insights": InsightsClient,
        "domains": DomainsClient,
        "search": SearchClient,
        "fql": FqlClient,
        "test_users": TestUsersClient,
    }
    async with GraphApiClient(settings, access_token="token") as client:
        for name, cls in expected.items():
            resource = getattr(client, name)
            assert isinstance(resource, cls)
            assert getattr(client, name) is resource


@pytest.mark.asyncio
async def test_end_to_end_read(settings: GraphSettings, httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        url="https://graph.facebook.com/me",
        json={"id": "4", "name": "Mark"},
    )

    async with GraphApiClient(settings, access_token="token") as client:
        me = await client.users.get_me()

    assert me.id == "4"
    assert me.name == "Mark"
    request = httpx_mock.get_request()
    assert request.headers["Authorization"] == "Bearer token"


@pytest.mark.asyncio
async def test_unauthorized_client_can_search(
    settings: GraphSettings, httpx_mock: HTTPXMock
):
    httpx_mock.add_response(
        url="https://graph.facebook.com/search?type=page&q=coffee",
        json={"data": [{"id": "1", "name": "Coffee"}]},
    )

    async with GraphApiClient(settings) as client:
        pages = await client.search.pages("coffee")
        with pytest.raises(AuthorizationRequired):
            await client.users.get_me()

    assert [p.name for p in pages] == ["Coffee"]
    assert "Authorization" not in httpx_mock.get_request().headers


@pytest.mark.asyncio
async def test_external_http_client_stays_open(settings: GraphSettings):
    http_client = httpx.AsyncClient()
    async with GraphApiClient(settings, http_client=http_client):
        pass
    assert not http_client.is_closed
    await http_client.aclose()
