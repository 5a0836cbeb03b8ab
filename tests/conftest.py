"""Shared fixtures: an in-memory transport and a bot bound to it."""

import json
import os
import sys
from typing import Any

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telebind.client import Bot

TOKEN = "123456:ABC-DEF1234ghIkl-zyx57W2v1u123ew11"


class FakeTransport:
    """Records every exchange and replays queued ``(status, body)`` responses."""

    def __init__(self) -> None:
        self.calls: list = []
        self.fetches: list = []
        self.long_polls: list = []
        self._responses: list = []

    def queue(self, payload: Any, status: int = 200) -> None:
        raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        self._responses.append((status, raw))

    def execute(self, url, headers, body, long_poll=0):
        self.calls.append((url, headers, body))
        self.long_polls.append(long_poll)
        response = self._responses.pop(0)
        if isinstance(response[1], BaseException):
            raise response[1]
        return response

    def fail(self, exc: BaseException) -> None:
        self._responses.append((0, exc))

    def fetch(self, url):
        self.fetches.append(url)
        response = self._responses.pop(0)
        if isinstance(response[1], BaseException):
            raise response[1]
        return response


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def bot(transport: FakeTransport) -> Bot:
    return Bot(TOKEN, transport=transport)
