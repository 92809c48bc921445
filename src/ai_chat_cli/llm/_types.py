"""Chat Completions types and their wire mapping."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from ai_chat_cli.llm._exceptions import DeserializationError


class Role(StrEnum):
    """Author of a message. Values are the API's role tags."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True, slots=True)
class Message:
    """A chat message."""

    role: Role
    content: str

    def __post_init__(self) -> None:
        # Accept raw tags ("user") as well as Role members.
        object.__setattr__(self, "role", Role(self.role))
        if not isinstance(self.content, str):
            raise TypeError(f"content must be str, got {type(self.content).__name__}")

    def to_wire(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}

    @classmethod
    def from_wire(cls, raw: Any) -> Message:
        try:
            return cls(role=Role(raw["role"]), content=raw["content"])
        except (KeyError, TypeError, ValueError) as exc:
            raise DeserializationError(f"invalid message: {raw!r}") from exc

    @classmethod
    def system(cls, content: str) -> Message:
        return cls(Role.SYSTEM, content)

    @classmethod
    def user(cls, content: str) -> Message:
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> Message:
        return cls(Role.ASSISTANT, content)


@dataclass(frozen=True, slots=True)
class Usage:
    """Token usage counts."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True, slots=True)
class Choice:
    """One candidate reply from the model."""

    message: Message
    finish_reason: str
    index: int


@dataclass(frozen=True, slots=True)
class CompletionResult:
    """Parsed Chat Completions response."""

    id: str
    object: str
    created: int
    model: str
    usage: Usage = field(default_factory=Usage)
    choices: tuple[Choice, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def reply(self) -> Message:
        """The assistant message of the first choice."""
        if not self.choices:
            raise DeserializationError("response contains no choices", body=self.raw)
        return self.choices[0].message


WireMessage: TypeAlias = dict[str, str]


def messages_to_wire(messages: Iterable[Message]) -> list[WireMessage]:
    """Serialize messages in order to ``{"role", "content"}`` dicts."""
    return [m.to_wire() for m in messages]


def build_payload(model: str, messages: Iterable[Message]) -> dict[str, Any]:
    """Build the request body for a Chat Completions call."""
    return {"model": model, "messages": messages_to_wire(messages)}


def _require(raw: dict[str, Any], key: str, kind: type) -> Any:
    if key not in raw:
        raise DeserializationError(f"missing field {key!r}", body=raw)
    value = raw[key]
    # bool is an int subclass; counters and timestamps must be real ints.
    if not isinstance(value, kind) or (isinstance(value, bool) and kind is int):
        raise DeserializationError(
            f"field {key!r} has type {type(value).__name__}", body=raw
        )
    return value


def _parse_usage(raw: dict[str, Any]) -> Usage:
    return Usage(
        prompt_tokens=_require(raw, "prompt_tokens", int),
        completion_tokens=_require(raw, "completion_tokens", int),
        total_tokens=_require(raw, "total_tokens", int),
    )


def _parse_choice(raw: Any) -> Choice:
    if not isinstance(raw, dict):
        raise DeserializationError("choice is not an object", body=raw)
    return Choice(
        message=Message.from_wire(_require(raw, "message", dict)),
        finish_reason=_require(raw, "finish_reason", str),
        index=_require(raw, "index", int),
    )


def parse_completion(raw: Any) -> CompletionResult:
    """Convert a decoded response body into a :class:`CompletionResult`.

    Raises :class:`DeserializationError` if any required field is missing or
    has the wrong type.
    """
    if not isinstance(raw, dict):
        raise DeserializationError("response is not a JSON object", body=raw)
    return CompletionResult(
        id=_require(raw, "id", str),
        object=_require(raw, "object", str),
        created=_require(raw, "created", int),
        model=_require(raw, "model", str),
        usage=_parse_usage(_require(raw, "usage", dict)),
        choices=tuple(_parse_choice(c) for c in _require(raw, "choices", list)),
        raw=raw,
    )
