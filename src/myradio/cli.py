# src/myradio/cli.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

import httpx

from myradio.errors import MyRadioError
from myradio.session import Session
from myradio.tracks import get_track, get_track_album, get_track_title
from myradio.users import (
    get_user_bio,
    get_user_name,
    get_user_officerships,
    get_user_profile_photo,
    get_user_show_credits,
)

logger = logging.getLogger(__name__)


class UserField(str, Enum):
    BIO = "bio"
    NAME = "name"
    PHOTO = "photo"
    OFFICERSHIPS = "officerships"
    SHOWS = "shows"


def main(argv: list[str] | None = None) -> None:
    """Entry point for the myradio CLI."""
    args = _build_arg_parser().parse_args(argv)

    _configure_logging(verbose=args.verbose)

    try:
        with Session.from_env() as session:
            if args.command == "track":
                result = _cmd_track(
                    session,
                    track_id=args.track_id,
                    album=args.album,
                    title_only=args.title,
                )
            elif args.command == "user":
                result = _cmd_user(
                    session,
                    user_id=args.user_id,
                    user_field=UserField(args.field),
                )
            else:
                msg = f"Unknown command: {args.command}"
                raise ValueError(msg)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user. Exiting.")
        sys.exit(1)
    except (MyRadioError, httpx.HTTPError) as exc:
        logger.error("Request failed: %s", exc)
        sys.exit(1)

    print(_to_json(result))


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="myradio",
        description="Look up tracks and users in the MyRadio API.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        help="Sub-command to run.",
    )

    track_parser = subparsers.add_parser("track", help="Look up a track.")
    track_parser.add_argument("track_id", type=int, help="Track ID.")
    track_group = track_parser.add_mutually_exclusive_group()
    track_group.add_argument(
        "--album",
        action="store_true",
        help="Show the track's album instead of the track.",
    )
    track_group.add_argument(
        "--title",
        action="store_true",
        help="Show only the track's title.",
    )

    user_parser = subparsers.add_parser("user", help="Look up a user.")
    user_parser.add_argument("user_id", type=int, help="User ID.")
    user_parser.add_argument(
        "field",
        choices=[f.value for f in UserField],
        help="What to show for the user.",
    )

    return parser


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _cmd_track(
    session: Session,
    *,
    track_id: int,
    album: bool,
    title_only: bool,
) -> Any:
    if album:
        return get_track_album(session, track_id)
    if title_only:
        return get_track_title(session, track_id)
    return get_track(session, track_id)


def _cmd_user(session: Session, *, user_id: int, user_field: UserField) -> Any:
    if user_field is UserField.BIO:
        return get_user_bio(session, user_id)
    if user_field is UserField.NAME:
        return get_user_name(session, user_id)
    if user_field is UserField.PHOTO:
        return get_user_profile_photo(session, user_id)
    if user_field is UserField.OFFICERSHIPS:
        return get_user_officerships(session, user_id)
    return get_user_show_credits(session, user_id)


def _to_json(result: Any) -> str:
    if isinstance(result, list):
        data: Any = [asdict(item) if is_dataclass(item) else item for item in result]
    elif is_dataclass(result):
        data = asdict(result)
    else:
        data = result
    return json.dumps(data, ensure_ascii=False, indent=2, default=str)


if __name__ == "__main__":
    # python -m myradio.cli -v track 1234 --album
    # python -m myradio.cli user 5678 officerships
    main()
