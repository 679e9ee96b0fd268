"""Application configuration helpers."""

from __future__ import annotations

from .env import (
    ConfigurationError,
    MissingConfigurationError,
    optional_env_var,
    require_env_var,
    require_env_vars,
)
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, resolve_log_level
from .spotify import (
    DEFAULT_SPOTIFY_SCOPES,
    SPOTIFY_API_BASE_URL,
    SPOTIFY_FOLLOW_SCOPES,
    SPOTIFY_LIBRARY_SCOPES,
    SPOTIFY_PROFILE_SCOPES,
    SPOTIFY_TOP_SCOPES,
    SpotifyConfig,
    default_spotify_resilience,
    get_access_token_from_environment,
    get_spotify_config,
    merge_spotify_scopes,
)

__all__ = [
    "DEFAULT_SPOTIFY_SCOPES",
    "SPOTIFY_API_BASE_URL",
    "SPOTIFY_FOLLOW_SCOPES",
    "SPOTIFY_LIBRARY_SCOPES",
    "SPOTIFY_PROFILE_SCOPES",
    "SPOTIFY_TOP_SCOPES",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpotifyConfig",
    "configure_logging",
    "default_spotify_resilience",
    "get_access_token_from_environment",
    "get_spotify_config",
    "merge_spotify_scopes",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
    "resolve_log_level",
]
