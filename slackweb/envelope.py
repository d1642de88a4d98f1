"""Decoding of the Web API response envelope.

Every Web API method answers with a JSON object carrying ``ok``. A failed
call adds an ``err`` string (``error`` in current Slack responses); a
successful one carries the method-specific payload as sibling top-level keys:

    {"ok": true, "team": {...}}
    {"ok": false, "err": "not_authed"}
"""

from __future__ import annotations

import json
import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from slackweb.errors import ApiError, DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def parse_slack_response(
    body: str,
    expect_payload: bool,
    model: type[T] | None = None,
) -> T | None:
    """Decode a raw response body into ``model``.

    Returns None when the call succeeded and ``expect_payload`` is False.

    Raises
    ------
    ApiError
        If the envelope says ``ok: false``.
    DecodeError
        If the body is not a JSON object with a boolean ``ok``, or the
        payload does not match ``model``.
    """
    if expect_payload and model is None:
        raise ValueError("A response model is required when a payload is expected")

    try:
        envelope = json.loads(body)
    except ValueError as exc:
        raise DecodeError("Response body is not valid JSON", reason=str(exc)) from exc

    if not isinstance(envelope, dict):
        raise DecodeError("Response body is not a JSON object")

    ok = envelope.get("ok")
    if not isinstance(ok, bool):
        raise DecodeError("Response envelope has no boolean 'ok' field")

    if not ok:
        error = envelope["err"] if "err" in envelope else envelope.get("error")
        if not isinstance(error, str):
            raise DecodeError("Error envelope carries no error string")
        logger.debug("Slack returned error %s", error, extra={"error_code": error})
        raise ApiError(error)

    if not expect_payload:
        return None

    assert model is not None
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            f"Response does not match {model.__name__}",
            errors=exc.errors(include_url=False),
        ) from exc
