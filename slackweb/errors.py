"""Error hierarchy for Slack Web API calls.

Every failure a caller can see extends SlackError and carries an ErrorKind tag,
so callers may branch either on the exception type or on ``exc.kind``:

- TransportError: the HTTP send itself failed (network, timeout, non-2xx).
- ApiError: Slack answered ``{"ok": false, ...}``.
- DecodeError: the body was not JSON or did not match the expected schema.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed Web API call."""

    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"


class SlackError(Exception):
    """Base error for all Slack client errors."""

    kind: ErrorKind
    message: str = "Slack Web API call failed"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(SlackError):
    """The request could not be delivered or the server answered non-2xx."""

    kind = ErrorKind.TRANSPORT
    message = "Slack Web API request failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        method: str | None = None,
        status_code: int | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(message, **kwargs)
        self.method = method
        self.status_code = status_code


class ApiError(SlackError):
    """Slack returned ``ok: false``; ``error`` is the server's code verbatim."""

    kind = ErrorKind.API
    message = "Slack Web API returned an error"

    def __init__(self, error: str, **kwargs: object) -> None:
        super().__init__(error, **kwargs)
        self.error = error


class DecodeError(SlackError):
    """Response body was not valid JSON or did not match the target schema."""

    kind = ErrorKind.DECODE
    message = "Could not decode Slack Web API response"
