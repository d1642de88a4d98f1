"""Web API methods of the ``conversations`` family.

Archive and unarchive succeed with a bare ``{"ok": true}`` envelope, so they
return None.
"""

from __future__ import annotations

from slackweb.envelope import parse_slack_response
from slackweb.models.requests import ConversationRequest
from slackweb.transport import SlackWebRequestSender


def archive(client: SlackWebRequestSender, token: str, channel: str) -> None:
    """Archives a conversation.

    Wraps https://api.slack.com/methods/conversations.archive
    """
    params = ConversationRequest(channel=channel).to_params()
    response = client.send_authed("conversations.archive", token, params)
    parse_slack_response(response, False)


def unarchive(client: SlackWebRequestSender, token: str, channel: str) -> None:
    """Reverses conversation archival.

    Wraps https://api.slack.com/methods/conversations.unarchive
    """
    params = ConversationRequest(channel=channel).to_params()
    response = client.send_authed("conversations.unarchive", token, params)
    parse_slack_response(response, False)
