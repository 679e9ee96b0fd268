"""Exceptions raised by the Spotify Web API client."""

from __future__ import annotations

from http import HTTPStatus


class SpotifyClientError(RuntimeError):
    """Base class for every failure surfaced by :class:`SpotifyWebClient`."""


class SpotifyAPIError(SpotifyClientError):
    """The service answered with a non-2xx status and an error envelope.

    ``status`` is the HTTP status code of the response and ``message`` the text the
    service supplied, both unmodified.
    """

    def __init__(self, message: str, *, status: int) -> None:
        super().__init__(f"Spotify API error {status}: {message}")
        self.status = status
        self.message = message

    @property
    def is_unauthorized(self) -> bool:
        return self.status == HTTPStatus.UNAUTHORIZED

    @property
    def is_forbidden(self) -> bool:
        return self.status == HTTPStatus.FORBIDDEN

    @property
    def is_not_found(self) -> bool:
        return self.status == HTTPStatus.NOT_FOUND


class SpotifyTransportError(SpotifyClientError):
    """The call could not complete: network failure or an unreadable response.

    ``status`` carries the raw HTTP status when a response was received at all.
    """

    def __init__(self, message: str, *, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class SpotifyDecodeError(SpotifyTransportError):
    """A 2xx response body did not match the expected shape."""
