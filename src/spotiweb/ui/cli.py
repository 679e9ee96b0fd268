from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv
from pydantic import BaseModel

from spotiweb.adapters.spotify import FollowType, SpotifyClientError, SpotifyWebClient
from spotiweb.config import (
    ConfigurationError,
    configure_logging,
    get_spotify_config,
    optional_env_var,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_FOLLOW_CHOICES = [kind.value for kind in FollowType]


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the Spotify Web API for the current user")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("me", help="Show the current user's profile")

    profile = subparsers.add_parser("profile", help="Show a user's public profile")
    profile.add_argument("user_id", help="Spotify user id")

    saved = subparsers.add_parser("saved-tracks", help="List one page of saved tracks")
    saved.add_argument("--limit", type=int, help="Page size (service default when omitted)")
    saved.add_argument("--offset", type=int, help="Index of the first item to return")

    following = subparsers.add_parser("following", help="List one page of followed artists")
    following.add_argument("--limit", type=int, help="Page size (service default when omitted)")
    following.add_argument("--after", type=str, help="Cursor returned by the previous page")

    for name, help_text in (
        ("follows", "Check whether the current user follows the given ids"),
        ("follow", "Follow the given artists or users"),
        ("unfollow", "Unfollow the given artists or users"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("kind", choices=_FOLLOW_CHOICES)
        sub.add_argument("ids", nargs="+", help="Spotify ids")

    return parser.parse_args(list(argv))


def _build_client() -> SpotifyWebClient:
    token = optional_env_var("SPOTIFY_ACCESS_TOKEN")
    if token is not None:
        return SpotifyWebClient.from_token(token)
    return SpotifyWebClient.from_config(get_spotify_config())


def _emit(payload: BaseModel | list[bool]) -> None:
    if isinstance(payload, BaseModel):
        text = payload.model_dump_json(indent=2, exclude_none=True)
    else:
        text = json.dumps(payload)
    sys.stdout.write(text + "\n")


def _dispatch(client: SpotifyWebClient, args: argparse.Namespace) -> None:
    if args.command == "me":
        _emit(client.current_user())
    elif args.command == "profile":
        _emit(client.get_users_public_profile(args.user_id))
    elif args.command == "saved-tracks":
        _emit(client.current_users_tracks(limit=args.limit, offset=args.offset))
    elif args.command == "following":
        _emit(client.current_users_followed_artists(limit=args.limit, after=args.after))
    elif args.command == "follows":
        _emit(client.current_user_follows(args.kind, *args.ids))
    elif args.command == "follow":
        client.follow(*args.ids, kind=args.kind)
        log.info("Followed %d %s(s)", len(args.ids), args.kind)
    elif args.command == "unfollow":
        client.unfollow(*args.ids, kind=args.kind)
        log.info("Unfollowed %d %s(s)", len(args.ids), args.kind)
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        client = _build_client()
        _dispatch(client, parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except (SpotifyClientError, ConfigurationError):
        log.exception("Spotify request failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
