from __future__ import annotations

import pytest
from pydantic import ValidationError

from contact_feed.infrastructure.external_apis.contact_feed.settings import ContactFeedSettings


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("URL", "USER_AGENT", "TIMEOUT_S", "MAX_RETRIES"):
        monkeypatch.delenv(f"CONTACT_FEED_{name}", raising=False)


def test_contact_feed_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)

    settings = ContactFeedSettings()

    assert settings.url is None
    assert settings.user_agent == "contact-feed/0.1"
    assert settings.timeout_s == 8.0
    assert settings.max_retries == 3


def test_contact_feed_settings_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CONTACT_FEED_URL", "https://feeds.example.test/c.json")
    monkeypatch.setenv("CONTACT_FEED_TIMEOUT_S", "2.5")
    monkeypatch.setenv("CONTACT_FEED_MAX_RETRIES", "0")

    settings = ContactFeedSettings()

    assert settings.url == "https://feeds.example.test/c.json"
    assert settings.timeout_s == 2.5
    assert settings.max_retries == 0


def test_contact_feed_settings_rejects_non_positive_timeout(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CONTACT_FEED_TIMEOUT_S", "0")

    with pytest.raises(ValidationError):
        ContactFeedSettings()


def test_contact_feed_settings_ignores_unknown_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("CONTACT_FEED_SOME_UNUSED_FLAG", "1")

    settings = ContactFeedSettings()

    assert not hasattr(settings, "some_unused_flag")
