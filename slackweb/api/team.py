"""Web API methods of the ``team`` family.

For more information, see https://api.slack.com/methods.
"""

from __future__ import annotations

from slackweb.envelope import parse_slack_response
from slackweb.models.requests import AccessLogsRequest
from slackweb.models.responses import AccessLogsResponse, InfoResponse
from slackweb.transport import SlackWebRequestSender


def access_logs(
    client: SlackWebRequestSender,
    token: str,
    count: int | None = None,
    page: int | None = None,
) -> AccessLogsResponse:
    """Gets the access logs for the current team.

    Wraps https://api.slack.com/methods/team.accessLogs
    """
    params = AccessLogsRequest(count=count, page=page).to_params()
    response = client.send_authed("team.accessLogs", token, params)
    return parse_slack_response(response, True, AccessLogsResponse)


def info(client: SlackWebRequestSender, token: str) -> InfoResponse:
    """Gets information about the current team.

    Wraps https://api.slack.com/methods/team.info
    """
    response = client.send_authed("team.info", token, {})
    return parse_slack_response(response, True, InfoResponse)
