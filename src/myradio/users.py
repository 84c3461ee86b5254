# src/myradio/users.py

"""User lookups: bio, name, profile photo, officerships and show credits."""

from __future__ import annotations

import logging
from datetime import date, datetime

from myradio.errors import NoBioError, NoProfilePhotoError
from myradio.models import (
    Officership,
    Photo,
    ShowMeta,
    decode_list,
    decode_string,
    officership_from_dict,
    photo_from_dict,
    show_meta_from_dict,
)
from myradio.session import ApiSession

logger = logging.getLogger(__name__)

PHOTO_DATE_FORMAT = "%d/%m/%Y %H:%M"
OFFICERSHIP_DATE_FORMAT = "%Y-%m-%d"


def get_user_bio(session: ApiSession, user_id: int) -> str:
    """Fetch a user's bio.

    An absent payload means the user never set a bio and raises NoBioError;
    an empty string is a valid (empty) bio.
    """
    payload = session.api_request(f"/user/{user_id}/bio/")
    if payload is None:
        raise NoBioError()
    return decode_string(payload)


def get_user_name(session: ApiSession, user_id: int) -> str:
    """Fetch a user's display name.

    Unlike the bio, an absent name is not special-cased: it fails to decode.
    """
    payload = session.api_request(f"/user/{user_id}/name/")
    return decode_string(payload)


def get_user_profile_photo(session: ApiSession, user_id: int) -> Photo:
    """Fetch a user's profile photo and parse its upload date.

    Raises:
        NoProfilePhotoError: If the user has no profile picture.
        ValueError: If the upload date is not ``DD/MM/YYYY HH:MM``.
    """
    payload = session.api_request(f"/user/{user_id}/profilephoto/")
    if payload is None:
        raise NoProfilePhotoError()

    photo = photo_from_dict(payload)
    photo.date_added = datetime.strptime(photo.date_added_raw, PHOTO_DATE_FORMAT)
    return photo


def get_user_officerships(session: ApiSession, user_id: int) -> list[Officership]:
    """Fetch a user's officerships, parsing the from/till dates.

    Empty dates are left as None. The first unparseable date aborts the
    whole call.
    """
    payload = session.api_request(f"/user/{user_id}/officerships/")
    officerships = [
        officership_from_dict(item) for item in decode_list(payload, "officerships")
    ]

    for officership in officerships:
        if officership.from_date_raw:
            officership.from_date = _parse_officership_date(officership.from_date_raw)
        # Parsed from till_date_raw, not from_date_raw.
        if officership.till_date_raw:
            officership.till_date = _parse_officership_date(officership.till_date_raw)

    logger.debug("Fetched %d officerships for user %s.", len(officerships), user_id)
    return officerships


def get_user_show_credits(session: ApiSession, user_id: int) -> list[ShowMeta]:
    payload = session.api_request(f"/user/{user_id}/shows/")
    return [show_meta_from_dict(item) for item in decode_list(payload, "shows")]


def _parse_officership_date(raw: str) -> date:
    return datetime.strptime(raw, OFFICERSHIP_DATE_FORMAT).date()
