"""Fixture payloads and a recording transport handler for DSpace tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

DSpacePayload = dict[str, object]
FIXTURES = Path(__file__).resolve().parents[1] / "data" / "dspace"
BASE_URL = "https://repo.example/server/api/"


def load_fixture(name: str) -> DSpacePayload:
    return json.loads((FIXTURES / name).read_text())


class RecordingHandler:
    """MockTransport handler answering with canned responses and keeping every request."""

    def __init__(self, *responses: httpx.Response) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]
