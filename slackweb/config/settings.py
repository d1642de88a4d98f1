"""Pydantic Settings for the Slack Web API client.

All environment variables use the SLACK_ prefix.
Example: SLACK_API_BASE_URL=https://slack.com/api, SLACK_TIMEOUT_SECONDS=10
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class SlackSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Endpoint
    api_base_url: str = Field(default="https://slack.com/api", min_length=1)
    token: str | None = None  # Default token; endpoint functions take one explicitly

    # HTTP
    timeout_seconds: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="slackweb/0.1", min_length=1)

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "SLACK_"}
