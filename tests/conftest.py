"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest


def completion_payload(
    content: str = "Hello there!",
    *,
    role: str = "assistant",
    extra_choices: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """A Chat Completions response body with one (or more) choices."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1677652288,
        "model": "gpt-3.5-turbo-0613",
        "usage": {"prompt_tokens": 9, "completion_tokens": 12, "total_tokens": 21},
        "choices": [
            {
                "index": 0,
                "message": {"role": role, "content": content},
                "finish_reason": "stop",
            },
            *(extra_choices or []),
        ],
    }


class MockResponse:
    """Mimics ``requests.Response`` for testing post_json."""

    def __init__(
        self,
        json_data: Any = None,
        status_code: int = 200,
        text: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.ok = 200 <= status_code < 300
        self.text = text if text is not None else json.dumps(json_data)

    def json(self) -> Any:
        return json.loads(self.text)


@pytest.fixture
def mock_post(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.post`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.post", mock)
    return mock


@pytest.fixture(autouse=True)
def no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
