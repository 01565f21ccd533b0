# tests/conftest.py
import os

import pytest
from dotenv import load_dotenv

from graphloom.config import GraphSettings, get_settings

# Load environment variables from .env file if it exists
# Useful for storing an access token locally for the live tests
load_dotenv()

REST_BASE_URL = "https://graph.facebook.com/"
VIDEO_BASE_URL = "https://graph-video.facebook.com/"


@pytest.fixture(scope="session")
def live_access_token() -> str | None:
    """Fixture to provide a Graph API access token from environment variables."""
    return os.getenv("GRAPHLOOM_ACCESS_TOKEN")


@pytest.fixture
def settings() -> GraphSettings:
    """Settings isolated from the environment and any .env file."""
    return GraphSettings(
        _env_file=None,
        rest_base_url=REST_BASE_URL,
        video_base_url=VIDEO_BASE_URL,
        access_token=None,
        app_id=None,
        app_secret=None,
        enable_call_statistics=False,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
