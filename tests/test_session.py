"""Tests for the httpx-backed Session."""

from __future__ import annotations

import json

import httpx
import pytest

from myradio.errors import ApiError
from myradio.session import Session
from myradio.tracks import get_track


def _session(handler) -> Session:
    return Session(
        "secret",
        base_url="https://api.example.com/v2/",
        transport=httpx.MockTransport(handler),
    )


def test_api_request_returns_payload() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "OK", "payload": "Song A"})

    with _session(handler) as session:
        assert session.api_request("/track/1/title") == "Song A"

    (request,) = seen
    assert request.method == "GET"
    assert request.url.path == "/v2/track/1/title"
    assert request.url.params["api_key"] == "secret"
    assert "mixins" not in request.url.params


def test_api_request_sends_mixins() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "OK", "payload": {}})

    with _session(handler) as session:
        session.api_request("/track/1", mixins=["album", "credits"])

    assert seen[0].url.params["mixins"] == "album,credits"


@pytest.mark.parametrize(
    "body",
    [{"status": "OK", "payload": None}, {"status": "OK"}],
)
def test_api_request_absent_payload_is_none(body: dict) -> None:
    with _session(lambda request: httpx.Response(200, json=body)) as session:
        assert session.api_request("/user/1/bio/") is None


def test_api_request_envelope_failure() -> None:
    body = {"status": "FAIL", "payload": "Unknown track"}

    with _session(lambda request: httpx.Response(200, json=body)) as session:
        with pytest.raises(ApiError) as excinfo:
            session.api_request("/track/1")

    assert excinfo.value.status == "FAIL"
    assert excinfo.value.payload == "Unknown track"


def test_api_request_http_error_passes_through() -> None:
    with _session(lambda request: httpx.Response(403, json={})) as session:
        with pytest.raises(httpx.HTTPStatusError):
            session.api_request("/track/1")


def test_api_request_malformed_json_passes_through() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"{not json")

    with _session(handler) as session:
        with pytest.raises(json.JSONDecodeError):
            session.api_request("/track/1")


def test_get_track_issues_one_request() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        payload = {"trackid": 5, "title": "Song B", "length": "0:01:00"}
        return httpx.Response(200, json={"status": "OK", "payload": payload})

    with _session(handler) as session:
        track = get_track(session, 5)

    assert seen == ["/v2/track/5"]
    assert track.length_sec() == 60


def test_session_rejects_empty_api_key() -> None:
    with pytest.raises(ValueError):
        Session("")


def test_build_url() -> None:
    with _session(lambda request: httpx.Response(200)) as session:
        assert session.build_url("/user/1/bio/") == "https://api.example.com/v2/user/1/bio/"
