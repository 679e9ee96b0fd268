"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_var, require_env_vars
from .http_resilience import ResilienceConfig

SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
SPOTIFY_TIMEOUT_SECONDS = 30.0

SPOTIFY_PROFILE_SCOPES = (
    "user-read-private",
    "user-read-email",
)
SPOTIFY_LIBRARY_SCOPES = ("user-library-read",)
SPOTIFY_FOLLOW_SCOPES = (
    "user-follow-read",
    "user-follow-modify",
)
SPOTIFY_TOP_SCOPES = ("user-top-read",)


def merge_spotify_scopes(*scopes: tuple[str, ...]) -> tuple[str, ...]:
    merged: list[str] = []
    for scope_list in scopes:
        for scope in scope_list:
            if scope not in merged:
                merged.append(scope)
    return tuple(merged)


DEFAULT_SPOTIFY_SCOPES = merge_spotify_scopes(
    SPOTIFY_PROFILE_SCOPES,
    SPOTIFY_LIBRARY_SCOPES,
    SPOTIFY_FOLLOW_SCOPES,
    SPOTIFY_TOP_SCOPES,
)


def default_spotify_resilience() -> ResilienceConfig:
    return ResilienceConfig(
        name="spotify",
        base_url=SPOTIFY_API_BASE_URL,
        timeout_seconds=SPOTIFY_TIMEOUT_SECONDS,
    )


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    redirect_uri: str
    scope: tuple[str, ...] = field(default_factory=lambda: DEFAULT_SPOTIFY_SCOPES)
    cache_path: str | None = None
    resilience: ResilienceConfig = field(default_factory=default_spotify_resilience)


def get_spotify_config(
    *,
    scope: tuple[str, ...] | None = None,
    resilience: ResilienceConfig | None = None,
) -> SpotifyConfig:
    values = require_env_vars(
        (
            "SPOTIFY_CLIENT_ID",
            "SPOTIFY_CLIENT_SECRET",
            "SPOTIFY_REDIRECT_URI",
        )
    )
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        redirect_uri=values["SPOTIFY_REDIRECT_URI"],
        scope=scope or DEFAULT_SPOTIFY_SCOPES,
        cache_path=optional_env_var("SPOTIFY_CACHE_PATH"),
        resilience=resilience or default_spotify_resilience(),
    )


def get_access_token_from_environment() -> str:
    """Return a pre-issued bearer token from ``SPOTIFY_ACCESS_TOKEN``."""

    return require_env_var("SPOTIFY_ACCESS_TOKEN")
