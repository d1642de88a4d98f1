"""Public models for the Slack Web API client."""

from slackweb.models.requests import (
    AccessLogsRequest,
    ConversationRequest,
    SlackRequest,
)
from slackweb.models.responses import (
    AccessLogsResponse,
    AuthTestResponse,
    InfoResponse,
    Pagination,
    SlackResponse,
)
from slackweb.models.schemas import (
    IconInfo,
    LoginInfo,
    SlackRecord,
    TeamInfo,
)

__all__ = [
    "AccessLogsRequest",
    "AccessLogsResponse",
    "AuthTestResponse",
    "ConversationRequest",
    "IconInfo",
    "InfoResponse",
    "LoginInfo",
    "Pagination",
    "SlackRecord",
    "SlackRequest",
    "SlackResponse",
    "TeamInfo",
]
