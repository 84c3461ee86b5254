# myradio/config.py

"""Shared configuration and environment setup."""

from __future__ import annotations

import logging
from os import getenv

from dotenv import load_dotenv

from myradio.errors import ConfigError

load_dotenv(override=True)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://ury.org.uk/api/v2"
DEFAULT_TIMEOUT = 10.0


def get_api_key() -> str:
    """Return the MyRadio API key from MYRADIO_API_KEY.

    Raises:
        ConfigError: If the variable is unset or blank.
    """
    api_key = getenv("MYRADIO_API_KEY", "").strip()
    if not api_key:
        msg = "MYRADIO_API_KEY is not set."
        raise ConfigError(msg)
    return api_key


def get_base_url() -> str:
    """Return the API root, without a trailing slash."""
    return getenv("MYRADIO_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def get_timeout() -> float:
    raw = getenv("MYRADIO_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as exc:
        msg = f"MYRADIO_TIMEOUT must be a number, got {raw!r}."
        raise ConfigError(msg) from exc
    if timeout <= 0:
        msg = "MYRADIO_TIMEOUT must be positive."
        raise ConfigError(msg)
    return timeout


def verify_tls() -> bool:
    """Return whether TLS certificates should be verified.

    Toggle via env:
      MYRADIO_VERIFY_TLS=true  (default)
      MYRADIO_VERIFY_TLS=false (local testing only)
    """
    verify = getenv("MYRADIO_VERIFY_TLS", "true").lower() == "true"
    if not verify:
        logger.warning(
            "MyRadio TLS verification is DISABLED (MYRADIO_VERIFY_TLS=false). "
            "Do not use this setting in production."
        )
    return verify
