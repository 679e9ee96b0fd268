"""Bearer-token sources for :class:`~spotiweb.adapters.spotify.client.SpotifyWebClient`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from spotipy.oauth2 import SpotifyOAuth

if TYPE_CHECKING:
    from spotiweb.config.spotify import SpotifyConfig


class TokenProvider(Protocol):
    """Anything that hands out a current access token.

    spotipy's auth managers (``SpotifyOAuth``, ``SpotifyClientCredentials``, ...)
    satisfy this protocol and refresh expired tokens on their own.
    """

    def get_access_token(self, *, as_dict: bool = ...) -> str: ...


@dataclass(frozen=True, slots=True)
class StaticTokenProvider:
    """Fixed token, e.g. one issued out of band and passed via the environment."""

    token: str

    def get_access_token(self, *, as_dict: bool = False) -> str:  # noqa: ARG002
        return self.token


def build_oauth_token_provider(config: SpotifyConfig) -> SpotifyOAuth:
    return SpotifyOAuth(
        client_id=config.client_id,
        client_secret=config.client_secret,
        redirect_uri=config.redirect_uri,
        scope=" ".join(config.scope),
        cache_path=config.cache_path,
    )
