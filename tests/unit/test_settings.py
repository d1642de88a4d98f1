"""Unit tests for SlackSettings."""

import pytest

from slackweb.config.settings import SlackSettings


class TestSlackSettings:
    def test_defaults_are_correct(self):
        settings = SlackSettings()

        assert settings.api_base_url == "https://slack.com/api"
        assert settings.token is None
        assert settings.timeout_seconds == 30.0
        assert settings.user_agent == "slackweb/0.1"
        assert settings.log_level == "INFO"

    def test_env_prefix_is_slack(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SLACK_API_BASE_URL", "https://slack.example/api")
        monkeypatch.setenv("SLACK_TOKEN", "xoxb-from-env")
        monkeypatch.setenv("SLACK_TIMEOUT_SECONDS", "7.5")

        settings = SlackSettings()

        assert settings.api_base_url == "https://slack.example/api"
        assert settings.token == "xoxb-from-env"
        assert settings.timeout_seconds == 7.5

    def test_unprefixed_env_is_ignored(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TIMEOUT_SECONDS", "3")

        settings = SlackSettings()
        assert settings.timeout_seconds == 30.0

    def test_timeout_must_be_positive(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SLACK_TIMEOUT_SECONDS", "0")

        with pytest.raises(Exception):
            SlackSettings()

    def test_user_agent_must_not_be_empty(self):
        with pytest.raises(Exception):
            SlackSettings(user_agent="")

    def test_explicit_values_override_defaults(self):
        settings = SlackSettings(api_base_url="http://localhost:9000/api", log_level="DEBUG")

        assert settings.api_base_url == "http://localhost:9000/api"
        assert settings.log_level == "DEBUG"
