"""Pydantic models for the user-scoped Spotify Web API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime  # noqa: TC003
from enum import StrEnum
from typing import Generic, TypeVar, cast

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

T = TypeVar("T")


class FollowType(StrEnum):
    ARTIST = "artist"
    USER = "user"


class TimeRange(StrEnum):
    SHORT_TERM = "short_term"
    MEDIUM_TERM = "medium_term"
    LONG_TERM = "long_term"


class Product(StrEnum):
    PREMIUM = "premium"
    FREE = "free"
    OPEN = "open"


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ExternalUrls(SpotifyBaseModel):
    spotify: str | None = None


class Image(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class Followers(SpotifyBaseModel):
    total: int
    href: str | None = None


class User(SpotifyBaseModel):
    """Public profile of a Spotify user."""

    id: str
    display_name: str | None = None
    uri: str | None = None
    href: str | None = None
    type: str = "user"
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)
    followers: Followers | None = None
    images: list[Image] = Field(default_factory=list["Image"])


class PrivateUser(User):
    """Profile of the current user; the extra fields depend on granted scopes.

    ``product`` is a :class:`Product` for known tiers and the raw string otherwise.
    """

    email: str | None = None
    country: str | None = None
    product: Product | str | None = Field(default=None, union_mode="left_to_right")
    birthdate: str | None = None
    explicit_content: dict[str, bool] | None = None


class SimpleArtist(SpotifyBaseModel):
    id: str
    name: str
    uri: str | None = None
    href: str | None = None
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class Artist(SimpleArtist):
    popularity: int | None = None
    genres: list[str] = Field(default_factory=list)
    followers: Followers | None = None
    images: list[Image] = Field(default_factory=list["Image"])


class SimpleAlbum(SpotifyBaseModel):
    id: str
    name: str
    uri: str | None = None
    href: str | None = None
    album_type: str | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    total_tracks: int | None = None
    artists: list[SimpleArtist] = Field(default_factory=list["SimpleArtist"])
    images: list[Image] = Field(default_factory=list["Image"])
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class Album(SimpleAlbum):
    genres: list[str] = Field(default_factory=list)
    label: str | None = None
    popularity: int | None = None
    external_ids: dict[str, str] = Field(default_factory=dict)


class Track(SpotifyBaseModel):
    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    album: SimpleAlbum | None = None
    artists: list[SimpleArtist] = Field(default_factory=list["SimpleArtist"])
    duration_ms: int | None = None
    explicit: bool | None = None
    popularity: int | None = None
    track_number: int | None = None
    disc_number: int | None = None
    is_local: bool = False
    external_ids: dict[str, str] = Field(default_factory=dict)
    external_urls: ExternalUrls = Field(default_factory=ExternalUrls)


class SavedTrack(SpotifyBaseModel):
    added_at: datetime | None = None
    track: Track


class SavedAlbum(SpotifyBaseModel):
    added_at: datetime | None = None
    album: Album


class Page(SpotifyBaseModel, Generic[T]):
    """Offset-paged listing envelope."""

    href: str | None = None
    items: list[T] = Field(default_factory=list)
    limit: int | None = None
    next: str | None = None
    offset: int | None = None
    previous: str | None = None
    total: int | None = None

    @property
    def has_next(self) -> bool:
        return self.next is not None


class Cursors(SpotifyBaseModel):
    after: str | None = None
    before: str | None = None


class CursorPage(SpotifyBaseModel, Generic[T]):
    """Cursor-paged listing envelope.

    A present ``after`` token means more results may exist; its absence marks the
    end of the listing.
    """

    href: str | None = None
    items: list[T] = Field(default_factory=list)
    limit: int | None = None
    next: str | None = None
    total: int | None = None
    cursors: Cursors | None = None

    @property
    def after(self) -> str | None:
        return self.cursors.after if self.cursors is not None else None

    @property
    def has_more(self) -> bool:
        return bool(self.after)


SavedTrackPage = Page[SavedTrack]
SavedAlbumPage = Page[SavedAlbum]
ArtistPage = Page[Artist]
TrackPage = Page[Track]
FollowedArtistsPage = CursorPage[Artist]


class FollowedArtistsResponse(SpotifyBaseModel):
    artists: FollowedArtistsPage


BOOLEAN_LIST = TypeAdapter(list[bool])


class ErrorDetail(SpotifyBaseModel):
    status: int | None = None
    message: str


class ErrorEnvelope(SpotifyBaseModel):
    """Error body returned with non-2xx responses.

    The Web API nests ``status``/``message`` under ``error``; the accounts service
    answers with a flat ``error``/``error_description`` pair instead.
    """

    error: ErrorDetail

    @model_validator(mode="before")
    @classmethod
    def _normalize_flat_error(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        mapping_value = cast(Mapping[str, object], value)
        error = mapping_value.get("error")
        if isinstance(error, str):
            description = mapping_value.get("error_description")
            message = description if isinstance(description, str) and description else error
            return {"error": {"message": message}}
        return mapping_value

    @property
    def message(self) -> str:
        return self.error.message
