"""Pydantic request models for Web API methods.

A request model validates an endpoint's arguments and flattens them into the
string-to-string parameter mapping the transport sends. Fields left as None
are omitted from the mapping entirely rather than sent empty.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SlackRequest(BaseModel):
    """Base for endpoint request parameters."""

    model_config = {"frozen": True}

    def to_params(self) -> dict[str, str]:
        """Stringify every present field; absent (None) fields are dropped."""
        params: dict[str, str] = {}
        for name, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, bool):
                params[name] = "true" if value else "false"
            else:
                params[name] = str(value)
        return params


class AccessLogsRequest(SlackRequest):
    """Parameters of ``team.accessLogs``."""

    count: int | None = Field(default=None, ge=0)
    page: int | None = Field(default=None, ge=0)


class ConversationRequest(SlackRequest):
    """Parameters of single-conversation methods (archive, unarchive)."""

    channel: str = Field(..., min_length=1)
