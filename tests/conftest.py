"""Shared fixtures: a fake aiohttp session returning canned responses."""

from __future__ import annotations

from typing import Any

import pytest

from google_webapi.config import ClientConfig


class FakeResponse:
    def __init__(
        self, status: int = 200, payload: Any = None, body: str = ""
    ) -> None:
        self.status = status
        self._payload = payload
        self._body = body

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *_exc: object) -> None:
        return None

    async def text(self) -> str:
        return self._body

    async def json(self) -> Any:
        return self._payload


class RaisingResponse(FakeResponse):
    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    async def __aenter__(self) -> FakeResponse:
        raise self._error


class FakeSession:
    """Records GET calls and replays one response."""

    def __init__(self, response: FakeResponse) -> None:
        self._response = response
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, *, params: dict[str, str]) -> FakeResponse:
        self.calls.append((url, params))
        return self._response


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_key="test-key")
