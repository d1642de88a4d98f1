"""Response payload models for Web API methods.

Every endpoint payload extends SlackResponse: an immutable, strictly typed
record of the top-level envelope fields beyond ``ok``. Unknown keys (e.g.
``warning``, ``response_metadata``) are ignored; missing or mistyped keys
fail validation so a record is never partially populated.
"""

from __future__ import annotations

from slackweb.models.schemas import LoginInfo, SlackRecord, TeamInfo


class SlackResponse(SlackRecord):
    """Base for endpoint payloads decoded from a successful envelope."""


class Pagination(SlackRecord):
    """Paging metadata attached to list-returning responses."""

    count: int
    total: int
    page: int
    pages: int


class AccessLogsResponse(SlackResponse):
    """Payload of ``team.accessLogs``."""

    logins: list[LoginInfo]
    paging: Pagination


class InfoResponse(SlackResponse):
    """Payload of ``team.info``."""

    team: TeamInfo


class AuthTestResponse(SlackResponse):
    """Payload of ``auth.test``."""

    url: str
    team: str
    user: str
    team_id: str
    user_id: str
