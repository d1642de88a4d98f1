"""Nested records carried inside Web API payloads.

All records are immutable and strictly typed. Unknown keys are ignored so
that fields Slack adds later do not break decoding; every declared field is
required.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SlackRecord(BaseModel):
    """Base for all decoded records."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


class LoginInfo(SlackRecord):
    """One entry of a team's access log."""

    user_id: str
    username: str
    date_first: int  # Unix timestamp
    date_last: int  # Unix timestamp
    count: int
    ip: str
    user_agent: str
    isp: str
    country: str
    region: str


class IconInfo(SlackRecord):
    """Team icon URLs by pixel size."""

    image_34: str
    image_44: str
    image_68: str
    image_88: str
    image_102: str
    image_132: str
    image_default: bool


class TeamInfo(SlackRecord):
    id: str
    name: str
    domain: str
    email_domain: str
    icon: IconInfo
