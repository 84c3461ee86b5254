# myradio/errors.py

"""Exceptions raised by the MyRadio client.

Transport failures are not wrapped: httpx exceptions reach the caller as-is.
"""

from __future__ import annotations

from typing import Any


class MyRadioError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(MyRadioError):
    """Required configuration is missing or invalid."""


class ApiError(MyRadioError):
    """The API answered, but its envelope reported a failure."""

    def __init__(self, status: str, payload: Any = None) -> None:
        self.status = status
        self.payload = payload
        super().__init__(f"MyRadio API returned status {status!r}: {payload!r}")


class DecodeError(MyRadioError, ValueError):
    """A payload does not have the shape the caller expects."""


class NoBioError(MyRadioError):
    """The user has no bio set."""

    def __init__(self) -> None:
        super().__init__("No bio set")


class NoProfilePhotoError(MyRadioError):
    """The user has no profile picture set."""

    def __init__(self) -> None:
        super().__init__("No profile picture set")


class TrackLengthError(MyRadioError, ValueError):
    """A track length is not of the form hours:minutes:seconds."""
