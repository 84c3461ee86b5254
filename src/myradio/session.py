# src/myradio/session.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

import httpx

from myradio import config
from myradio.errors import ApiError

logger = logging.getLogger(__name__)


class ApiSession(Protocol):
    """Anything able to perform a MyRadio API request and return its payload."""

    def api_request(
        self,
        path: str,
        mixins: Sequence[str] | None = None,
    ) -> Any | None:
        ...


class Session:
    """Authenticated HTTP session for the MyRadio API."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = config.DEFAULT_BASE_URL,
        timeout: float = config.DEFAULT_TIMEOUT,
        verify: bool = True,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            msg = "api_key must not be empty."
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive."
            raise ValueError(msg)

        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

        headers = {
            "User-Agent": user_agent or "myradio-client/0.1",
            "Accept": "application/json",
        }

        self._client = httpx.Client(
            headers=headers,
            timeout=timeout,
            verify=verify,
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Session":
        """Build a session from MYRADIO_* environment variables."""
        return cls(
            config.get_api_key(),
            base_url=config.get_base_url(),
            timeout=config.get_timeout(),
            verify=config.verify_tls(),
            **kwargs,
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        self.close()

    def build_url(self, path: str) -> str:
        """Build the full URL for an endpoint path such as ``/track/1``."""
        return f"{self._base_url}/{path.lstrip('/')}"

    def api_request(
        self,
        path: str,
        mixins: Sequence[str] | None = None,
    ) -> Any | None:
        """Perform a GET request and return the response payload.

        Returns:
            The decoded ``payload`` member of the API envelope, or None if the
            API sent no payload (JSON null or no payload member at all).

        Raises:
            httpx.HTTPStatusError: For non-2xx responses.
            httpx.RequestError: For network problems.
            json.JSONDecodeError: If the body is not JSON.
            ApiError: If the envelope status is not "OK".
        """
        params: dict[str, str] = {"api_key": self._api_key}
        if mixins:
            params["mixins"] = ",".join(mixins)

        response = self._client.get(self.build_url(path), params=params)
        logger.debug("GET %s (status=%s).", path, response.status_code)
        response.raise_for_status()

        body = response.json()
        if not isinstance(body, dict):
            raise ApiError("malformed", body)

        status = body.get("status")
        payload = body.get("payload")
        if status != "OK":
            raise ApiError(str(status), payload)

        return payload
