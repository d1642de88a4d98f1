"""Shared test fixtures for the slackweb test suite."""

from __future__ import annotations

import os

import pytest

from slackweb.config.settings import SlackSettings
from slackweb.testing import MockSlackWebRequestSender


# ---------------------------------------------------------------------------
# Keep ambient SLACK_* env vars from leaking into SlackSettings in tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_slack_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove SLACK_* env vars so settings tests see the documented defaults."""
    for key in list(os.environ):
        if key.startswith("SLACK_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Settings / canned bodies
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> SlackSettings:
    """Test settings pointing at a local base URL."""
    return SlackSettings(
        api_base_url="https://slack.test/api",
        timeout_seconds=5.0,
        user_agent="slackweb-tests/1.0",
    )


ACCESS_LOGS_BODY = r"""{
    "ok": true,
    "logins": [
        {
            "user_id": "U12345",
            "username": "bob",
            "date_first": 1422922864,
            "date_last": 1422922864,
            "count": 1,
            "ip": "127.0.0.1",
            "user_agent": "SlackWeb Mozilla\/5.0 (Macintosh; Intel Mac OS X 10_10_2) AppleWebKit\/537.36 (KHTML, like Gecko) Chrome\/41.0.2272.35 Safari\/537.36",
            "isp": "BigCo ISP",
            "country": "US",
            "region": "CA"
        },
        {
            "user_id": "U45678",
            "username": "alice",
            "date_first": 1422922493,
            "date_last": 1422922493,
            "count": 1,
            "ip": "127.0.0.1",
            "user_agent": "SlackWeb Mozilla\/5.0 (iPhone; CPU iPhone OS 8_1_3 like Mac OS X) AppleWebKit\/600.1.4 (KHTML, like Gecko) Version\/8.0 Mobile\/12B466 Safari\/600.1.4",
            "isp": "BigCo ISP",
            "country": "US",
            "region": "CA"
        }
    ],
    "paging": {
        "count": 100,
        "total": 2,
        "page": 1,
        "pages": 1
    }
}"""

TEAM_INFO_BODY = r"""{
    "ok": true,
    "team": {
        "id": "T12345",
        "name": "My Team",
        "domain": "example",
        "email_domain": "",
        "icon": {
            "image_34": "https:\/\/...",
            "image_44": "https:\/\/...",
            "image_68": "https:\/\/...",
            "image_88": "https:\/\/...",
            "image_102": "https:\/\/...",
            "image_132": "https:\/\/...",
            "image_default": true
        }
    }
}"""

AUTH_TEST_BODY = """{
    "ok": true,
    "url": "https://example.slack.com/",
    "team": "My Team",
    "user": "bob",
    "team_id": "T12345",
    "user_id": "U12345"
}"""


@pytest.fixture
def access_logs_body() -> str:
    return ACCESS_LOGS_BODY


@pytest.fixture
def team_info_body() -> str:
    return TEAM_INFO_BODY


@pytest.fixture
def auth_test_body() -> str:
    return AUTH_TEST_BODY


@pytest.fixture
def respond_with():
    """Factory for a mock sender that replays the given body."""
    return MockSlackWebRequestSender.respond_with
