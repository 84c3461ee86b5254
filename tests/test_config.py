"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from myradio import config
from myradio.errors import ConfigError
from myradio.session import Session


def test_get_api_key(monkeypatch) -> None:
    monkeypatch.setenv("MYRADIO_API_KEY", "abc123")
    assert config.get_api_key() == "abc123"


def test_get_api_key_missing(monkeypatch) -> None:
    monkeypatch.delenv("MYRADIO_API_KEY", raising=False)
    with pytest.raises(ConfigError):
        config.get_api_key()


def test_base_url_default_and_override(monkeypatch) -> None:
    monkeypatch.delenv("MYRADIO_BASE_URL", raising=False)
    assert config.get_base_url() == config.DEFAULT_BASE_URL

    monkeypatch.setenv("MYRADIO_BASE_URL", "https://example.com/api/v2/")
    assert config.get_base_url() == "https://example.com/api/v2"


def test_get_timeout(monkeypatch) -> None:
    monkeypatch.delenv("MYRADIO_TIMEOUT", raising=False)
    assert config.get_timeout() == config.DEFAULT_TIMEOUT

    monkeypatch.setenv("MYRADIO_TIMEOUT", "2.5")
    assert config.get_timeout() == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_get_timeout_invalid(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("MYRADIO_TIMEOUT", raw)
    with pytest.raises(ConfigError):
        config.get_timeout()


def test_verify_tls(monkeypatch) -> None:
    monkeypatch.delenv("MYRADIO_VERIFY_TLS", raising=False)
    assert config.verify_tls() is True

    monkeypatch.setenv("MYRADIO_VERIFY_TLS", "false")
    assert config.verify_tls() is False


def test_session_from_env(monkeypatch) -> None:
    monkeypatch.setenv("MYRADIO_API_KEY", "abc123")
    monkeypatch.setenv("MYRADIO_BASE_URL", "https://example.com/api/v2")

    with Session.from_env() as session:
        assert session.build_url("/track/1") == "https://example.com/api/v2/track/1"
