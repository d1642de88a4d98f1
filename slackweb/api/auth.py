"""Web API methods of the ``auth`` family."""

from __future__ import annotations

from slackweb.envelope import parse_slack_response
from slackweb.models.responses import AuthTestResponse
from slackweb.transport import SlackWebRequestSender


def test(client: SlackWebRequestSender, token: str) -> AuthTestResponse:
    """Checks authentication and tells you who you are.

    Wraps https://api.slack.com/methods/auth.test
    """
    response = client.send_authed("auth.test", token, {})
    return parse_slack_response(response, True, AuthTestResponse)
