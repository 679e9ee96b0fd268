"""Spotify Web API adapter package."""

from __future__ import annotations

from .auth import StaticTokenProvider, TokenProvider, build_oauth_token_provider
from .client import MAX_IDS_PER_REQUEST, SpotifyWebClient
from .errors import (
    SpotifyAPIError,
    SpotifyClientError,
    SpotifyDecodeError,
    SpotifyTransportError,
)
from .schema import (
    Album,
    Artist,
    ArtistPage,
    CursorPage,
    Cursors,
    ErrorEnvelope,
    Followers,
    FollowedArtistsPage,
    FollowType,
    Image,
    Page,
    PrivateUser,
    Product,
    SavedAlbum,
    SavedAlbumPage,
    SavedTrack,
    SavedTrackPage,
    SimpleAlbum,
    SimpleArtist,
    TimeRange,
    Track,
    TrackPage,
    User,
)

__all__ = [
    "MAX_IDS_PER_REQUEST",
    "Album",
    "Artist",
    "ArtistPage",
    "CursorPage",
    "Cursors",
    "ErrorEnvelope",
    "FollowType",
    "FollowedArtistsPage",
    "Followers",
    "Image",
    "Page",
    "PrivateUser",
    "Product",
    "SavedAlbum",
    "SavedAlbumPage",
    "SavedTrack",
    "SavedTrackPage",
    "SimpleAlbum",
    "SimpleArtist",
    "SpotifyAPIError",
    "SpotifyClientError",
    "SpotifyDecodeError",
    "SpotifyTransportError",
    "SpotifyWebClient",
    "StaticTokenProvider",
    "TimeRange",
    "TokenProvider",
    "Track",
    "TrackPage",
    "User",
    "build_oauth_token_provider",
]
