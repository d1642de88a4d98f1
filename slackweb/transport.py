"""Transport for Slack Web API calls.

A sender delivers one named API method with an auth token and a mapping of
string parameters and returns the raw response body. The default
implementation POSTs form-encoded parameters to ``{api_base_url}/{method}``
over httpx, opening a short-lived client per call.

SECURITY: Never logs the token or parameter values.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Mapping, Protocol, runtime_checkable

import httpx

from slackweb.config.settings import SlackSettings
from slackweb.errors import TransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class SlackWebRequestSender(Protocol):
    """Anything that can send an authenticated Web API method call."""

    def send_authed(self, method: str, token: str, params: Mapping[str, str]) -> str:
        """Send ``method`` and return the raw response body.

        Raises
        ------
        TransportError
            If the request could not be completed.
        """
        ...


class HttpxRequestSender:
    """Sends Web API calls over HTTPS with httpx.

    Parameters
    ----------
    api_base_url:
        Base URL for the Web API (e.g. "https://slack.com/api").
    timeout_seconds:
        Per-request timeout (default 30s).
    user_agent:
        User-Agent header sent with every call.
    """

    def __init__(
        self,
        api_base_url: str = "https://slack.com/api",
        timeout_seconds: float = 30.0,
        user_agent: str = "slackweb/0.1",
    ) -> None:
        self._api_base_url = api_base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent

    @classmethod
    def from_settings(cls, settings: SlackSettings | None = None) -> HttpxRequestSender:
        settings = settings or SlackSettings()
        return cls(
            api_base_url=settings.api_base_url,
            timeout_seconds=settings.timeout_seconds,
            user_agent=settings.user_agent,
        )

    def send_authed(self, method: str, token: str, params: Mapping[str, str]) -> str:
        """POST ``params`` to ``method`` and return the response text.

        Raises
        ------
        TransportError
            On connection/timeout failures (``status_code`` is None) or when
            Slack answers with a non-2xx status.
        """
        url = f"{self._api_base_url}/{method}"
        request_id = str(uuid.uuid4())
        started = time.monotonic()

        try:
            with httpx.Client(timeout=self._timeout_seconds) as client:
                response = client.post(
                    url,
                    data=dict(params),
                    headers={
                        "Authorization": f"Bearer {token}",
                        "User-Agent": self._user_agent,
                    },
                )
        except httpx.HTTPError as exc:
            logger.warning(
                "Slack call %s failed before a response was received: %s",
                method,
                type(exc).__name__,
                extra={
                    "request_id": request_id,
                    "method": method,
                    "error_reason": str(exc),
                },
            )
            raise TransportError(
                f"Request to '{method}' failed: {exc}", method=method
            ) from exc

        duration_ms = round((time.monotonic() - started) * 1000, 2)

        if not response.is_success:
            logger.warning(
                "Slack call %s returned status %d",
                method,
                response.status_code,
                extra={
                    "request_id": request_id,
                    "method": method,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            raise TransportError(
                f"Request to '{method}' returned HTTP {response.status_code}",
                method=method,
                status_code=response.status_code,
            )

        logger.debug(
            "Slack call %s completed",
            method,
            extra={
                "request_id": request_id,
                "method": method,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response.text
