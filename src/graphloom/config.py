# graphloom/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GRAPH_API_BASE_URL,
    GRAPH_VIDEO_BASE_URL,
    OAUTH_ACCESS_TOKEN_URL,
)


class GraphSettings(BaseSettings):
    """
    Manages user-configurable settings for the graphloom client, loaded from
    environment variables (prefixed with 'GRAPHLOOM_') or a .env file.

    Settings are immutable once loaded; use ``model_copy(update=...)`` to
    derive a variant for one client.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="GRAPHLOOM_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    # --- Endpoints ---
    rest_base_url: str = Field(
        default=GRAPH_API_BASE_URL,
        description="Base URL of the Graph API, with trailing slash",
    )
    video_base_url: str = Field(
        default=GRAPH_VIDEO_BASE_URL,
        description="Base URL used for video uploads, with trailing slash",
    )

    # --- Client Behavior Settings ---
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Default request timeout in seconds"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header for requests",
    )
    enable_call_statistics: bool = Field(
        default=False,
        description="Record per-call timing statistics when no observer is given",
    )

    # --- Authentication Settings ---
    # Option 1: user or page access token
    access_token: str | None = Field(
        default=None, description="Static Graph API access token (optional)"
    )

    # Option 2: app credentials for an app access token
    app_id: str | None = Field(
        default=None, description="Application id (required for app access tokens)"
    )
    app_secret: str | None = Field(
        default=None,
        description="Application secret (required for app access tokens)",
    )
    oauth_access_token_url: str = Field(
        default=OAUTH_ACCESS_TOKEN_URL,
        description="OAuth access token endpoint URL",
    )


@lru_cache
def get_settings() -> GraphSettings:
    """
    Provides access to the graphloom settings.

    Settings are loaded from environment variables (prefixed with 'GRAPHLOOM_')
    or .env/secrets.env files. The instance is cached.

    Returns:
        GraphSettings: The settings instance.
    """
    return GraphSettings()
