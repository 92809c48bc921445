"""Tests for the synchronous ChatClient."""

from __future__ import annotations

import socket
from unittest.mock import MagicMock

import pytest

from ai_chat_cli.llm._client import ChatClient, resolve_api_key
from ai_chat_cli.llm._exceptions import (
    ConfigurationError,
    DeserializationError,
    TransportError,
)
from ai_chat_cli.llm._types import Message
from tests.conftest import MockResponse, completion_payload


def _make_client() -> ChatClient:
    return ChatClient("sk-test")


def test_complete_request_contract(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data=completion_payload())
    _make_client().complete(
        "gpt-3.5-turbo",
        [Message.system("You are a helpful assistant."), Message.user("Hello")],
    )

    mock_post.assert_called_once()
    args, kwargs = mock_post.call_args
    assert args[0] == "https://api.openai.com/v1/chat/completions"
    assert kwargs["headers"] == {
        "Content-Type": "application/json",
        "Authorization": "Bearer sk-test",
    }
    assert kwargs["json"] == {
        "model": "gpt-3.5-turbo",
        "messages": [
            {"role": "system", "content": "You are a helpful assistant."},
            {"role": "user", "content": "Hello"},
        ],
    }


def test_complete_parses_result(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data=completion_payload("Hi!"))
    result = _make_client().complete("gpt-3.5-turbo", [Message.user("Hello")])
    assert result.reply == Message.assistant("Hi!")
    assert result.usage.total_tokens == 21
    assert result.choices[0].finish_reason == "stop"


def test_complete_one_request_per_call(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data=completion_payload())
    client = _make_client()
    client.complete("m", [Message.user("a")])
    client.complete("m", [Message.user("b")])
    assert mock_post.call_count == 2


def test_complete_malformed_json(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(text="not json")
    with pytest.raises(DeserializationError):
        _make_client().complete("m", [Message.user("Hello")])


def test_complete_unexpected_shape(mock_post: MagicMock) -> None:
    mock_post.return_value = MockResponse(json_data={"id": "x", "choices": []})
    with pytest.raises(DeserializationError):
        _make_client().complete("m", [Message.user("Hello")])


def test_complete_connection_refused() -> None:
    # Bind then close a socket to get a local port with no listener.
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    client = ChatClient("sk-test", base_url=f"http://127.0.0.1:{port}", timeout=5)
    with pytest.raises(TransportError):
        client.complete("m", [Message.user("Hello")])


def test_base_url_override() -> None:
    client = ChatClient("sk-test", base_url="http://localhost:8080/")
    assert client.url == "http://localhost:8080/v1/chat/completions"


def test_empty_api_key() -> None:
    with pytest.raises(ConfigurationError):
        ChatClient("")


def test_from_env() -> None:
    client = ChatClient.from_env({"OPENAI_API_KEY": "sk-env", "OPENAI_BASE_URL": "http://h"})
    assert client.url == "http://h/v1/chat/completions"


def test_from_env_missing_key() -> None:
    with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
        ChatClient.from_env({})


def test_resolve_api_key_prefers_explicit() -> None:
    assert resolve_api_key("sk-direct", {"OPENAI_API_KEY": "sk-env"}) == "sk-direct"
