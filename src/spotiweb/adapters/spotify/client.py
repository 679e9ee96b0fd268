"""HTTP client for the user-scoped Spotify Web API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from functools import partial
from typing import TYPE_CHECKING, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError
from spotipy.oauth2 import SpotifyOauthError

from spotiweb.adapters.http_resilience import ResilientClient
from spotiweb.config.env import ConfigurationError
from spotiweb.config.spotify import default_spotify_resilience

from .auth import StaticTokenProvider, build_oauth_token_provider
from .errors import (
    SpotifyAPIError,
    SpotifyClientError,
    SpotifyDecodeError,
    SpotifyTransportError,
)
from .schema import (
    BOOLEAN_LIST,
    ArtistPage,
    ErrorEnvelope,
    FollowedArtistsPage,
    FollowedArtistsResponse,
    FollowType,
    PrivateUser,
    SavedAlbumPage,
    SavedTrackPage,
    TimeRange,
    TrackPage,
    User,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine, Iterable, Sequence

    from spotiweb.config.http_resilience import ResilienceConfig
    from spotiweb.config.spotify import SpotifyConfig

    from .auth import TokenProvider
    from .schema import Artist, SavedTrack

log = getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R")

MAX_IDS_PER_REQUEST = 50


def _join_ids(ids: Sequence[str]) -> str:
    if not ids:
        raise ValueError("At least one Spotify ID is required")
    if len(ids) > MAX_IDS_PER_REQUEST:
        raise ValueError(
            f"At most {MAX_IDS_PER_REQUEST} Spotify IDs are allowed per request, got {len(ids)}"
        )
    return ",".join(ids)


def _follow_type(kind: FollowType | str) -> FollowType:
    try:
        return FollowType(kind)
    except ValueError as exc:
        raise ValueError(f"Follow type must be 'artist' or 'user', got {kind!r}") from exc


def _paging_params(
    *,
    limit: int | None = None,
    offset: int | None = None,
) -> dict[str, str]:
    params: dict[str, str] = {}
    if limit is not None:
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        params["limit"] = str(limit)
    if offset is not None:
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        params["offset"] = str(offset)
    return params


def _translate_error(response: httpx.Response) -> SpotifyClientError:
    status = response.status_code
    try:
        envelope = ErrorEnvelope.model_validate_json(response.content)
    except ValidationError:
        log.error("Spotify returned HTTP %s without a readable error body", status)
        return SpotifyTransportError(
            f"Spotify returned HTTP {status} without a readable error body",
            status=status,
        )
    log.warning("Spotify API error %s: %s", status, envelope.message)
    return SpotifyAPIError(envelope.message, status=status)


class SpotifyWebClient:
    """Synchronous accessors for profiles, follows and the saved library.

    Every call opens its own HTTP client, so an instance can be shared between
    threads. The only state held across calls is the token provider.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        resilience: ResilienceConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._token_provider = token_provider
        self._resilience = resilience or default_spotify_resilience()
        self._client_factory = client_factory or ResilientClient

    @classmethod
    def from_config(
        cls,
        config: SpotifyConfig,
        *,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> SpotifyWebClient:
        return cls(
            token_provider=build_oauth_token_provider(config),
            resilience=config.resilience,
            client_factory=client_factory,
        )

    @classmethod
    def from_token(
        cls,
        token: str,
        *,
        resilience: ResilienceConfig | None = None,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> SpotifyWebClient:
        return cls(
            token_provider=StaticTokenProvider(token),
            resilience=resilience,
            client_factory=client_factory,
        )

    # Profiles

    def get_users_public_profile(self, user_id: str) -> User:
        path = f"/users/{quote(user_id, safe='')}"
        return self._run(partial(self._get_model, path, User))

    def current_user(self) -> PrivateUser:
        return self._run(partial(self._get_model, "/me", PrivateUser))

    # Saved library

    def current_users_tracks(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> SavedTrackPage:
        params = _paging_params(limit=limit, offset=offset)
        if market is not None:
            params["market"] = market
        return self._run(partial(self._get_model, "/me/tracks", SavedTrackPage, params=params))

    def current_users_albums(
        self,
        *,
        limit: int | None = None,
        offset: int | None = None,
        market: str | None = None,
    ) -> SavedAlbumPage:
        params = _paging_params(limit=limit, offset=offset)
        if market is not None:
            params["market"] = market
        return self._run(partial(self._get_model, "/me/albums", SavedAlbumPage, params=params))

    def user_has_tracks(self, *ids: str) -> list[bool]:
        return self._run(partial(self._get_booleans, "/me/tracks/contains", ids, params={}))

    # Following

    def current_users_followed_artists(
        self,
        *,
        limit: int | None = None,
        after: str | None = None,
    ) -> FollowedArtistsPage:
        params = {"type": str(FollowType.ARTIST), **_paging_params(limit=limit)}
        if after is not None:
            params["after"] = after
        response = self._run(
            partial(self._get_model, "/me/following", FollowedArtistsResponse, params=params)
        )
        return response.artists

    def current_user_follows(self, kind: FollowType | str, *ids: str) -> list[bool]:
        """Report, per ID and in input order, whether the current user follows it."""

        params = {"type": str(_follow_type(kind))}
        request = partial(self._get_booleans, "/me/following/contains", ids, params=params)
        return self._run(request)

    def follow(self, *ids: str, kind: FollowType | str = FollowType.USER) -> None:
        self._modify_follow("PUT", kind, ids)

    def unfollow(self, *ids: str, kind: FollowType | str = FollowType.USER) -> None:
        self._modify_follow("DELETE", kind, ids)

    def follow_users(self, *ids: str) -> None:
        self.follow(*ids, kind=FollowType.USER)

    def follow_artists(self, *ids: str) -> None:
        self.follow(*ids, kind=FollowType.ARTIST)

    def unfollow_users(self, *ids: str) -> None:
        self.unfollow(*ids, kind=FollowType.USER)

    def unfollow_artists(self, *ids: str) -> None:
        self.unfollow(*ids, kind=FollowType.ARTIST)

    # Top items

    def current_users_top_artists(
        self,
        *,
        time_range: TimeRange | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ArtistPage:
        params = _paging_params(limit=limit, offset=offset)
        if time_range is not None:
            params["time_range"] = str(TimeRange(time_range))
        return self._run(partial(self._get_model, "/me/top/artists", ArtistPage, params=params))

    def current_users_top_tracks(
        self,
        *,
        time_range: TimeRange | str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> TrackPage:
        params = _paging_params(limit=limit, offset=offset)
        if time_range is not None:
            params["time_range"] = str(TimeRange(time_range))
        return self._run(partial(self._get_model, "/me/top/tracks", TrackPage, params=params))

    # Paging helpers

    def iter_saved_tracks(
        self,
        *,
        batch_size: int = 50,
        max_items: int | None = None,
    ) -> Iterable[SavedTrack]:
        if max_items is not None and max_items <= 0:
            return
        offset = 0
        yielded = 0
        while True:
            page = self.current_users_tracks(limit=batch_size, offset=offset)
            items = page.items
            if not items:
                return
            for item in items:
                yield item
                yielded += 1
                if max_items is not None and yielded >= max_items:
                    return
            if page.next is None:
                return
            offset += len(items)

    def iter_followed_artists(
        self,
        *,
        batch_size: int = 50,
        max_items: int | None = None,
    ) -> Iterable[Artist]:
        if max_items is not None and max_items <= 0:
            return
        after: str | None = None
        yielded = 0
        while True:
            page = self.current_users_followed_artists(limit=batch_size, after=after)
            items = page.items
            if not items:
                return
            for item in items:
                yield item
                yielded += 1
                if max_items is not None and yielded >= max_items:
                    return
            after = page.after
            if not after:
                return

    # Transport

    def _modify_follow(self, method: str, kind: FollowType | str, ids: Sequence[str]) -> None:
        params = {"type": str(_follow_type(kind)), "ids": _join_ids(ids)}
        self._run(partial(self._perform_request, method, "/me/following", params=params))

    def _run(self, request: Callable[[dict[str, str]], Coroutine[object, object, R]]) -> R:
        # Token refresh is blocking I/O and stays outside the event loop.
        headers = {
            "Authorization": f"Bearer {self._access_token()}",
            "Accept": "application/json",
        }
        return asyncio.run(request(headers))

    def _access_token(self) -> str:
        try:
            token = self._token_provider.get_access_token(as_dict=False)
        except SpotifyOauthError as exc:
            log.error("Spotify token provider failed: %s", exc)
            raise SpotifyTransportError(
                f"Could not obtain a Spotify access token: {exc}"
            ) from exc
        if not token:
            raise ConfigurationError("Spotify token provider returned no access token")
        return token

    async def _get_model(
        self,
        path: str,
        model: type[M],
        headers: dict[str, str],
        *,
        params: dict[str, str] | None = None,
    ) -> M:
        response = await self._perform_request("GET", path, headers, params=params)
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            log.error("Unexpected Spotify payload for %s", path)
            raise SpotifyDecodeError(
                f"Unexpected Spotify payload for {path}: {exc.error_count()} validation errors",
                status=response.status_code,
            ) from exc

    async def _get_booleans(
        self,
        path: str,
        ids: Sequence[str],
        headers: dict[str, str],
        *,
        params: dict[str, str],
    ) -> list[bool]:
        query = {**params, "ids": _join_ids(ids)}
        response = await self._perform_request("GET", path, headers, params=query)
        try:
            flags = BOOLEAN_LIST.validate_json(response.content)
        except ValidationError as exc:
            raise SpotifyDecodeError(
                f"Unexpected Spotify payload for {path}", status=response.status_code
            ) from exc
        if len(flags) != len(ids):
            raise SpotifyDecodeError(
                f"Spotify answered {len(flags)} flags for {len(ids)} IDs",
                status=response.status_code,
            )
        return flags

    async def _perform_request(
        self,
        method: str,
        path: str,
        headers: dict[str, str],
        *,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        log.debug("Spotify %s %s params=%s", method, path, params)
        try:
            async with self._client_factory(self._resilience) as client:
                response = await client.request(method, path, params=params, headers=headers)
        except httpx.TransportError as exc:
            log.error("Spotify %s %s failed: %s", method, path, exc)
            raise SpotifyTransportError(f"Spotify request {method} {path} failed: {exc}") from exc

        if not response.is_success:
            raise _translate_error(response)
        return response
