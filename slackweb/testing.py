"""Test doubles for code that calls the Web API through a sender."""

from __future__ import annotations

from typing import Mapping


class MockSlackWebRequestSender:
    """Replays one canned response body and records every call made."""

    def __init__(self, body: str) -> None:
        self.body = body
        self.calls: list[tuple[str, str, dict[str, str]]] = []

    @classmethod
    def respond_with(cls, body: str) -> MockSlackWebRequestSender:
        return cls(body)

    def send_authed(self, method: str, token: str, params: Mapping[str, str]) -> str:
        self.calls.append((method, token, dict(params)))
        return self.body

    @property
    def last_params(self) -> dict[str, str]:
        return self.calls[-1][2]
