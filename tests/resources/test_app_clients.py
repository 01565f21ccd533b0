# tests/resources/test_app_clients.py
from unittest.mock import AsyncMock

import pytest

from graphloom import models
from graphloom.exceptions import MalformedResponse
from graphloom.params import ParameterSet
from graphloom.reading import ReadSpec
from graphloom.resources import (
    DomainsClient,
    GamesClient,
    InsightsClient,
    TestUsersClient,
)

REST = "https://graph.facebook.com/"
APP_ID = "1234567890"


# --- Games ---


@pytest.mark.asyncio
async def test_scores(mock_api_client: AsyncMock, respond):
    games = GamesClient(api_client=mock_api_client)

    respond(
        json={
            "data": [
                {
                    "user": {"id": "4", "name": "Mark"},
                    "score": 1200,
                    "application": {"id": APP_ID, "name": "Game"},
                }
            ]
        }
    )
    scores = await games.get_scores()
    mock_api_client.send.assert_awaited_with("GET", f"{REST}me/scores", None)
    assert scores[0].score == 1200

    respond(text="true")
    assert await games.post_score(1500) is True
    mock_api_client.send.assert_awaited_with(
        "POST", f"{REST}me/scores", ParameterSet.of(score=1500)
    )
    assert await games.delete_score("4") is True
    mock_api_client.send.assert_awaited_with("DELETE", f"{REST}4/scores", None)


@pytest.mark.asyncio
async def test_achievements(mock_api_client: AsyncMock, respond):
    games = GamesClient(api_client=mock_api_client)
    achievement = "https://example.com/achievements/first-win.html"

    respond(json={"id": "ach1"})
    assert await games.post_achievement(achievement) == "ach1"
    mock_api_client.send.assert_awaited_with(
        "POST", f"{REST}me/achievements", ParameterSet.of(achievement=achievement)
    )

    respond(text="true")
    assert await games.delete_achievement(achievement) is True
    mock_api_client.send.assert_awaited_with(
        "DELETE", f"{REST}me/achievements", ParameterSet.of(achievement=achievement)
    )

    respond(json={"data": []})
    await games.get_achievements("4")
    mock_api_client.send.assert_awaited_with("GET", f"{REST}4/achievements", None)


# --- Insights ---


@pytest.mark.asyncio
async def test_insights_metric(mock_api_client: AsyncMock, respond):
    respond(
        json={
            "data": [
                {
                    "id": "19292868552/insights/page_views/day",
                    "name": "page_views",
                    "period": "day",
                    "values": [{"value": 12, "end_time": "2012-06-20T07:00:00+0000"}],
                }
            ]
        }
    )
    insights = InsightsClient(api_client=mock_api_client)

    result = await insights.get(
        "19292868552", "page_views", ReadSpec(since=1340155800)
    )

    mock_api_client.send.assert_awaited_once_with(
        "GET", f"{REST}19292868552/insights/page_views?since=1340155800", None
    )
    assert result[0].name == "page_views"
    assert result[0].values[0].value == 12


# --- Domains ---


@pytest.mark.asyncio
async def test_domains(mock_api_client: AsyncMock, respond):
    domains = DomainsClient(api_client=mock_api_client)

    respond(json={"id": "102", "name": "example.com"})
    domain = await domains.get_by_name("example.com")
    mock_api_client.send.assert_awaited_with("GET", f"{REST}?domain=example.com", None)
    assert domain.name == "example.com"

    respond(
        json={
            "example.com": {"id": "102", "name": "example.com"},
            "example.org": {"id": "103", "name": "example.org"},
        }
    )
    result = await domains.get_many_by_name(["example.com", "example.org"])
    mock_api_client.send.assert_awaited_with(
        "GET", f"{REST}?domains=example.com,example.org", None
    )
    assert [d.id for d in result] == ["102", "103"]

    respond(json=False)
    assert await domains.get("999") is None


@pytest.mark.asyncio
async def test_domain_batch_must_be_an_object(mock_api_client: AsyncMock, respond):
    respond(json=[{"id": "102"}])
    with pytest.raises(MalformedResponse, match="id-keyed object"):
        await DomainsClient(api_client=mock_api_client).get_many_by_name(["a"])


# --- Test users ---


@pytest.fixture
def testers(mock_api_client: AsyncMock) -> TestUsersClient:
    return TestUsersClient(api_client=mock_api_client)


@pytest.mark.asyncio
async def test_create_test_user(
    testers: TestUsersClient, mock_api_client: AsyncMock, respond
):
    respond(
        json={
            "id": "100001",
            "access_token": "tu_token",
            "login_url": "https://www.facebook.com/platform/test_account_login.php",
            "email": "tu@tfbnw.net",
            "password": "secret",
        }
    )

    user = await testers.create(APP_ID, permissions=["email", "read_stream"])

    assert isinstance(user, models.TestUser)
    assert user.access_token == "tu_token"
    mock_api_client.send.assert_awaited_once_with(
        "POST",
        f"{REST}{APP_ID}/accounts/test-users",
        ParameterSet.of(installed=True, locale="en_US", permissions="email,read_stream"),
    )


@pytest.mark.asyncio
async def test_create_test_user_with_name(
    testers: TestUsersClient, mock_api_client: AsyncMock, respond
):
    respond(json={"id": "100002"})

    await testers.create(APP_ID, name="Tess", locale="nl_NL")

    params = mock_api_client.send.await_args.args[2]
    assert params.form_pairs() == [
        ("installed", "true"),
        ("name", "Tess"),
        ("locale", "nl_NL"),
    ]


@pytest.mark.asyncio
async def test_create_test_user_false_body(testers: TestUsersClient, respond):
    respond(json=False)
    with pytest.raises(MalformedResponse, match="no object"):
        await testers.create(APP_ID)


@pytest.mark.asyncio
async def test_list_and_delete(
    testers: TestUsersClient, mock_api_client: AsyncMock, respond
):
    respond(json={"data": [{"id": "100001", "access_token": "a"}]})
    users = await testers.list(APP_ID)
    mock_api_client.send.assert_awaited_with(
        "GET", f"{REST}{APP_ID}/accounts/test-users", None
    )
    assert users[0].id == "100001"

    respond(text="true")
    assert await testers.delete("100001") is True
    mock_api_client.send.assert_awaited_with("DELETE", f"{REST}100001", None)


@pytest.mark.asyncio
async def test_make_friends(
    testers: TestUsersClient, mock_api_client: AsyncMock, respond
):
    """Each side sends its request with its own access token."""
    first = models.TestUser(id="1", access_token="token_1")
    second = models.TestUser(id="2", access_token="token_2")
    respond(text="true")

    assert await testers.make_friends(first, second) is True

    assert [c.args for c in mock_api_client.send.await_args_list] == [
        ("POST", f"{REST}1/friends/2", ParameterSet.of(access_token="token_1")),
        ("POST", f"{REST}2/friends/1", ParameterSet.of(access_token="token_2")),
    ]


@pytest.mark.asyncio
async def test_make_friends_stops_on_refusal(
    testers: TestUsersClient, mock_api_client: AsyncMock, respond
):
    respond(text="false")

    result = await testers.make_friends(
        models.TestUser(id="1", access_token="a"),
        models.TestUser(id="2", access_token="b"),
    )

    assert result is False
    mock_api_client.send.assert_awaited_once()
