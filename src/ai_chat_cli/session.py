"""Session loop — alternates user and assistant turns over one conversation."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Callable
from contextlib import AbstractContextManager
from enum import Enum, auto
from typing import Protocol

from ai_chat_cli.conversation import Conversation
from ai_chat_cli.llm._types import CompletionResult, Message, Role
from ai_chat_cli.theme import DEFAULT_WIDTH, format_message, format_prompt

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    def complete(self, model: str, messages: list[Message]) -> CompletionResult: ...


class State(Enum):
    AWAITING_USER_TURN = auto()
    AWAITING_ASSISTANT_TURN = auto()
    DONE = auto()


class Session:
    """Drives a conversation against a completion client.

    ``read_input`` is called with the prompt text and returns one line;
    ``write`` receives every block of output. Errors from the client are
    not caught here: they end the session.
    """

    def __init__(
        self,
        client: CompletionClient,
        conversation: Conversation,
        *,
        model: str,
        interactive: bool = False,
        read_input: Callable[[str], str] = input,
        write: Callable[[str], object] = print,
        width: int = DEFAULT_WIDTH,
        progress: Callable[[], AbstractContextManager[object]] = contextlib.nullcontext,
    ) -> None:
        self._client = client
        self.conversation = conversation
        self._model = model
        self._interactive = interactive
        self._read_input = read_input
        self._write = write
        self._width = width
        self._progress = progress
        self._state = self._next_turn()

    @property
    def state(self) -> State:
        return self._state

    def _next_turn(self) -> State:
        if self.conversation.needs_user_turn():
            return State.AWAITING_USER_TURN
        return State.AWAITING_ASSISTANT_TURN

    def _user_turn(self) -> None:
        text = self._read_input(format_prompt("User"))
        while not text.strip():
            text = self._read_input(format_prompt("User"))
        self.conversation.append(Message(Role.USER, text))
        self._state = State.AWAITING_ASSISTANT_TURN

    def _assistant_turn(self) -> None:
        self._write("")
        with self._progress():
            result = self._client.complete(self._model, list(self.conversation))
        reply = Message(Role.ASSISTANT, result.reply.content)
        self.conversation.append(reply)
        self._write(f"{format_message(reply, self._width)}\n")
        self._state = self._next_turn() if self._interactive else State.DONE

    def step(self) -> State:
        """Perform one transition and return the new state."""
        if self._state is State.AWAITING_USER_TURN:
            self._user_turn()
        elif self._state is State.AWAITING_ASSISTANT_TURN:
            self._assistant_turn()
        return self._state

    def run(self) -> Conversation:
        """Run until DONE. EOF or Ctrl-C while waiting for input ends the session."""
        while self._state is not State.DONE:
            try:
                self.step()
            except (EOFError, KeyboardInterrupt):
                if self._state is not State.AWAITING_USER_TURN:
                    raise
                logger.debug("Input closed, ending session")
                self._write("")
                self._state = State.DONE
        return self.conversation
