"""Conversation store — the ordered message history of one session."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import overload

from ai_chat_cli.llm._types import Message, Role, WireMessage, messages_to_wire

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."


class Conversation:
    """Append-only list of messages, starting with the system message."""

    def __init__(self, messages: Iterable[Message] = ()) -> None:
        self._messages: list[Message] = []
        for m in messages:
            self.append(m)

    @classmethod
    def initialize(
        cls,
        system_prompt: str | None = None,
        initial_user_message: str | None = None,
    ) -> Conversation:
        """Start a conversation with a system message and an optional user message."""
        if system_prompt is None:
            system_prompt = DEFAULT_SYSTEM_PROMPT
        conversation = cls([Message.system(system_prompt)])
        if initial_user_message is not None:
            conversation.append(Message.user(initial_user_message))
        return conversation

    def append(self, message: Message) -> None:
        if not isinstance(message, Message):
            raise TypeError(f"expected Message, got {type(message).__name__}")
        self._messages.append(message)

    def needs_user_turn(self) -> bool:
        """True when the last message is not from the user. False when empty."""
        return bool(self._messages) and self._messages[-1].role is not Role.USER

    @property
    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def to_wire(self) -> list[WireMessage]:
        return messages_to_wire(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    @overload
    def __getitem__(self, index: int) -> Message: ...
    @overload
    def __getitem__(self, index: slice) -> list[Message]: ...
    def __getitem__(self, index: int | slice) -> Message | list[Message]:
        return self._messages[index]

    def __repr__(self) -> str:
        return f"Conversation({self._messages!r})"


# Functional aliases over the Conversation methods.


def initialize(
    system_prompt: str | None = None, initial_user_message: str | None = None
) -> Conversation:
    return Conversation.initialize(system_prompt, initial_user_message)


def needs_user_turn(conversation: Conversation) -> bool:
    return conversation.needs_user_turn()


def append(conversation: Conversation, message: Message) -> None:
    conversation.append(message)
