"""Per-method Web API functions, grouped by method family."""

from slackweb.api import auth, conversations, team

__all__ = [
    "auth",
    "conversations",
    "team",
]
