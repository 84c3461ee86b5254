# myradio/models.py

"""Records returned by the MyRadio API, and their payload decoders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from myradio.errors import DecodeError, TrackLengthError

if TYPE_CHECKING:
    from myradio.session import ApiSession

_USEC_PER_SEC = 1_000_000

_TRUE_FLAGS = {"y", "t", "true", "1"}
_FALSE_FLAGS = {"n", "f", "false", "0", ""}


@dataclass(slots=True)
class Album:
    """An album in the station's track database."""

    album_id: int
    title: str = ""
    artist: str = ""

    # Opaque date strings, as sent by the API.
    date_added: str = ""
    date_released: str = ""
    last_modified: str = ""

    # Physical copy, if any.
    cd_id: str = ""
    location: str = ""
    shelf_letter: str = ""
    shelf_number: str = ""

    format: str = ""  # single-character format code
    medium: str = ""  # single-character medium code

    adding_member: int = 0
    editing_member: int = 0

    record_label: str = ""
    status: str = ""  # digitisation status code


@dataclass(slots=True)
class Track:
    """A single audio item in the station's library."""

    track_id: int
    title: str = ""
    artist: str = ""
    type: str = ""
    length: str = ""  # e.g. "0:03:42"
    intro: int = 0  # seconds
    is_clean: bool = False
    is_digitised: bool = False

    def get_album(self, session: ApiSession) -> Album:
        """Fetch the album this track belongs to.

        This consumes one API request.
        """
        from myradio.tracks import get_track_album

        return get_track_album(session, self.track_id)

    def length_sec(self) -> int:
        """Return the track's length in seconds.

        Raises:
            TrackLengthError: If the length is not hours:minutes:seconds.
        """
        parts = self.length.split(":")
        if len(parts) != 3:
            msg = f"Track length {self.length!r} is not hours:minutes:seconds."
            raise TrackLengthError(msg)

        values: list[int] = []
        for part in parts:
            part = part.strip()
            if not part.isdecimal():
                msg = f"Track length {self.length!r} contains {part!r}."
                raise TrackLengthError(msg)
            values.append(int(part))

        hours, minutes, seconds = values
        return hours * 60 * 60 + minutes * 60 + seconds

    def length_usec(self) -> int:
        """Return the track's length in microseconds.

        This is not precise, as it is derived from the length in seconds.
        Measure the audio file itself if exact timing matters.
        """
        return self.length_sec() * _USEC_PER_SEC

    def intro_usec(self) -> int:
        return self.intro * _USEC_PER_SEC


@dataclass(slots=True)
class Officership:
    """A user holding an officer role for a span of time."""

    officer_id: int
    officer_name: str = ""
    team_id: int = 0
    from_date_raw: str = ""
    from_date: date | None = None
    till_date_raw: str = ""
    till_date: date | None = None


@dataclass(slots=True)
class Photo:
    """A photo uploaded by a user."""

    photo_id: int
    date_added_raw: str = ""
    date_added: datetime | None = None
    format: str = ""
    owner: int = 0
    url: str = ""


@dataclass(slots=True)
class ShowMeta:
    """Show metadata, kept as the API sent it."""

    show_id: int | None = None
    title: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Payload decoding
# ---------------------------------------------------------------------------


def decode_string(payload: Any) -> str:
    """Decode a bare string payload, such as a title or a bio."""
    if not isinstance(payload, str):
        msg = f"Expected a string payload, got {_type_name(payload)}."
        raise DecodeError(msg)
    return payload


def track_from_dict(payload: Any) -> Track:
    obj = _require_object(payload, "track")
    return Track(
        track_id=_as_int(obj, "trackid"),
        title=_as_str(obj, "title"),
        artist=_as_str(obj, "artist"),
        type=_as_str(obj, "type"),
        length=_as_str(obj, "length"),
        intro=_as_int(obj, "intro"),
        is_clean=_as_bool(obj, "clean"),
        is_digitised=_as_bool(obj, "digitised"),
    )


def album_from_dict(payload: Any) -> Album:
    obj = _require_object(payload, "album")
    return Album(
        album_id=_as_int(obj, "recordid"),
        title=_as_str(obj, "title"),
        artist=_as_str(obj, "artist"),
        date_added=_as_str(obj, "date_added"),
        date_released=_as_str(obj, "date_released"),
        last_modified=_as_str(obj, "last_modified"),
        cd_id=_as_str(obj, "cdid"),
        location=_as_str(obj, "location"),
        shelf_letter=_as_str(obj, "shelf_letter"),
        shelf_number=_as_str(obj, "shelf_number"),
        format=_as_str(obj, "format"),
        medium=_as_str(obj, "media"),
        adding_member=_as_int(obj, "member_add"),
        editing_member=_as_int(obj, "member_edit"),
        record_label=_as_str(obj, "record_label"),
        status=_as_str(obj, "status"),
    )


def officership_from_dict(payload: Any) -> Officership:
    """Decode one officership. Derived dates are left unset."""
    obj = _require_object(payload, "officership")
    return Officership(
        officer_id=_as_int(obj, "officerid"),
        officer_name=_as_str(obj, "officer_name"),
        team_id=_as_int(obj, "teamid"),
        from_date_raw=_as_str(obj, "from_date"),
        till_date_raw=_as_str(obj, "till_date"),
    )


def photo_from_dict(payload: Any) -> Photo:
    """Decode a photo. The derived date is left unset."""
    obj = _require_object(payload, "photo")
    return Photo(
        photo_id=_as_int(obj, "photoid"),
        date_added_raw=_as_str(obj, "date_added"),
        format=_as_str(obj, "format"),
        owner=_as_int(obj, "owner"),
        url=_as_str(obj, "url"),
    )


def show_meta_from_dict(payload: Any) -> ShowMeta:
    obj = _require_object(payload, "show")
    show_id = _as_int(obj, "show_id") if "show_id" in obj else None
    title = _as_str(obj, "title") if "title" in obj else None
    return ShowMeta(show_id=show_id, title=title, raw=dict(obj))


def decode_list(payload: Any, what: str) -> list[Any]:
    """Return a list payload; JSON null decodes as an empty list."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = f"Expected a list of {what}, got {_type_name(payload)}."
        raise DecodeError(msg)
    return payload


def _require_object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        msg = f"Expected a {what} object, got {_type_name(payload)}."
        raise DecodeError(msg)
    return payload


def _as_str(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"Field {key!r} should be a string, got {_type_name(value)}."
        raise DecodeError(msg)
    return value


def _as_int(obj: dict[str, Any], key: str) -> int:
    """Read a non-negative integer; the API sends some IDs as strings."""
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool):
        msg = f"Field {key!r} should be an integer, got bool."
        raise DecodeError(msg)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isdecimal():
        number = int(value)
    else:
        msg = f"Field {key!r} should be an integer, got {value!r}."
        raise DecodeError(msg)
    if number < 0:
        msg = f"Field {key!r} should not be negative, got {number}."
        raise DecodeError(msg)
    return number


def _as_bool(obj: dict[str, Any], key: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        flag = value.strip().lower()
        if flag in _TRUE_FLAGS:
            return True
        if flag in _FALSE_FLAGS:
            return False
    msg = f"Field {key!r} should be a boolean flag, got {value!r}."
    raise DecodeError(msg)


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    return type(value).__name__
