# src/myradio/tracks.py

"""Track and album lookups.

Every function here consumes exactly one API request.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from myradio.models import (
    Album,
    Track,
    album_from_dict,
    decode_string,
    track_from_dict,
)
from myradio.session import ApiSession

logger = logging.getLogger(__name__)


def get_track(
    session: ApiSession,
    track_id: int,
    mixins: Sequence[str] | None = None,
) -> Track:
    """Fetch the track with the given ID.

    Track IDs are unique, so the album's record ID is not needed.
    """
    payload = session.api_request(f"/track/{track_id}", mixins)
    track = track_from_dict(payload)
    logger.debug("Fetched track %s (%s - %s).", track_id, track.artist, track.title)
    return track


def get_track_title(session: ApiSession, track_id: int) -> str:
    payload = session.api_request(f"/track/{track_id}/title")
    return decode_string(payload)


def get_track_album(
    session: ApiSession,
    track_id: int,
    mixins: Sequence[str] | None = None,
) -> Album:
    """Fetch the album of the track with the given ID.

    A track without an album is reported however the API and the decoder
    report it; there is no special case here.
    """
    payload = session.api_request(f"/track/{track_id}/album", mixins)
    return album_from_dict(payload)
