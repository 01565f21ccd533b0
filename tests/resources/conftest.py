# tests/resources/conftest.py
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from graphloom.client import BaseGraphClient
from graphloom.exceptions import AuthorizationRequired
from graphloom.urls import UrlComposer

REST = "https://graph.facebook.com/"
VIDEO = "https://graph-video.facebook.com/"


@pytest.fixture
def mock_api_client() -> AsyncMock:
    """A BaseGraphClient stand-in with an authorized credential.

    ``send`` answers an empty list envelope unless a test sets another
    response.
    """
    client = AsyncMock(spec=BaseGraphClient)
    client.urls = UrlComposer(REST, VIDEO)
    client.ensure_authorized = MagicMock()
    client.send = AsyncMock(return_value=httpx.Response(200, json={"data": []}))
    return client


@pytest.fixture
def unauthorized_api_client(mock_api_client: AsyncMock) -> AsyncMock:
    mock_api_client.ensure_authorized.side_effect = AuthorizationRequired()
    return mock_api_client


@pytest.fixture
def respond(mock_api_client: AsyncMock):
    """Sets the response the mocked client returns for the next call."""

    def _respond(
        json=None, text: str | None = None, status: int = 200, headers=None
    ) -> None:
        if text is not None:
            response = httpx.Response(status, text=text, headers=headers)
        elif json is not None:
            response = httpx.Response(status, json=json, headers=headers)
        else:
            response = httpx.Response(status, headers=headers)
        mock_api_client.send.return_value = response

    return _respond
