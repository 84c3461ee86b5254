"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest


class StubSession:
    """In-memory ApiSession that serves canned payloads by path."""

    def __init__(self, payloads: dict[str, Any]) -> None:
        self._payloads = payloads
        self.requests: list[tuple[str, tuple[str, ...] | None]] = []

    def api_request(
        self,
        path: str,
        mixins: Sequence[str] | None = None,
    ) -> Any | None:
        self.requests.append((path, tuple(mixins) if mixins else None))
        return self._payloads.get(path)


@pytest.fixture
def make_session():
    def _make(payloads: dict[str, Any]) -> StubSession:
        return StubSession(payloads)

    return _make
