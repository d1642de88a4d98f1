"""Typed client for Slack's Web API."""

from slackweb.config.settings import SlackSettings
from slackweb.envelope import parse_slack_response
from slackweb.errors import ApiError, DecodeError, ErrorKind, SlackError, TransportError
from slackweb.logging_config import configure_logging
from slackweb.transport import HttpxRequestSender, SlackWebRequestSender

__all__ = [
    "ApiError",
    "DecodeError",
    "ErrorKind",
    "HttpxRequestSender",
    "SlackError",
    "SlackSettings",
    "SlackWebRequestSender",
    "TransportError",
    "configure_logging",
    "parse_slack_response",
]
