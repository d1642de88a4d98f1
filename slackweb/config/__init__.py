"""Configuration module — client settings."""

from slackweb.config.settings import SlackSettings

__all__ = [
    "SlackSettings",
]
