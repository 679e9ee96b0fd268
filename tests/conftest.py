from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import httpx
import pytest

from spotiweb.adapters.http_resilience import ResilientClient
from spotiweb.adapters.spotify import SpotifyWebClient
from spotiweb.config.http_resilience import ResilienceConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    Handler = Callable[[httpx.Request], httpx.Response]
    MakeClient = Callable[..., SpotifyWebClient]

SPOTIFY_FIXTURES = Path(__file__).resolve().parent / "data" / "spotify"
TEST_BASE_URL = "https://api.spotify.com/v1"
TEST_TOKEN = "dummy-token"  # noqa: S105


@pytest.fixture
def spotify_payload() -> Callable[[str], dict[str, object]]:
    def load(name: str) -> dict[str, object]:
        return json.loads((SPOTIFY_FIXTURES / name).read_text(encoding="utf-8"))

    return load


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(sent_requests: list[httpx.Request]) -> MakeClient:
    """Build a client whose HTTP traffic is answered by ``handler``."""

    def factory(
        handler: Handler,
        *,
        resilience: ResilienceConfig | None = None,
    ) -> SpotifyWebClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        def client_factory(config: ResilienceConfig) -> ResilientClient:
            return ResilientClient(config, transport=httpx.MockTransport(recording_handler))

        return SpotifyWebClient.from_token(
            TEST_TOKEN,
            resilience=resilience or ResilienceConfig(name="spotify", base_url=TEST_BASE_URL),
            client_factory=client_factory,
        )

    return factory


@pytest.fixture
def json_client(make_client: MakeClient) -> Callable[[int, object], SpotifyWebClient]:
    """Build a client that answers every request with the same status and JSON body."""

    def factory(status_code: int, payload: object) -> SpotifyWebClient:
        return make_client(lambda _request: httpx.Response(status_code, json=payload))

    return factory
