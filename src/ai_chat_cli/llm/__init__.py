"""Chat Completions client — request building, transport and response parsing."""

from ai_chat_cli.llm._async_client import AsyncChatClient
from ai_chat_cli.llm._client import DEFAULT_BASE_URL, ChatClient, resolve_api_key
from ai_chat_cli.llm._exceptions import (
    APIError,
    ChatClientError,
    ConfigurationError,
    DeserializationError,
    TransportError,
)
from ai_chat_cli.llm._types import (
    Choice,
    CompletionResult,
    Message,
    Role,
    Usage,
    build_payload,
    messages_to_wire,
    parse_completion,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "APIError",
    "AsyncChatClient",
    "ChatClient",
    "ChatClientError",
    "Choice",
    "CompletionResult",
    "ConfigurationError",
    "DeserializationError",
    "Message",
    "Role",
    "TransportError",
    "Usage",
    "build_payload",
    "messages_to_wire",
    "parse_completion",
    "resolve_api_key",
]
