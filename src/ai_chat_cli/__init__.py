"""ai_chat_cli — a terminal client for chat-completion APIs."""

from ai_chat_cli.conversation import DEFAULT_SYSTEM_PROMPT, Conversation
from ai_chat_cli.llm import (
    APIError,
    AsyncChatClient,
    ChatClient,
    ChatClientError,
    Choice,
    CompletionResult,
    ConfigurationError,
    DeserializationError,
    Message,
    Role,
    TransportError,
    Usage,
)
from ai_chat_cli.session import Session, State

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "APIError",
    "AsyncChatClient",
    "ChatClient",
    "ChatClientError",
    "Choice",
    "CompletionResult",
    "ConfigurationError",
    "Conversation",
    "DeserializationError",
    "Message",
    "Role",
    "Session",
    "State",
    "TransportError",
    "Usage",
]
