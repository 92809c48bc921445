"""Tests for terminal formatting helpers."""

from __future__ import annotations

import io
import time

import pytest

from ai_chat_cli.llm._types import Message, Role
from ai_chat_cli.theme import (
    BLUE,
    BOLD,
    GREEN,
    RESET,
    UNDERLINE,
    Spinner,
    format_message,
    format_prompt,
    format_role,
    style,
    wrap_text,
)


def test_style_respects_no_color() -> None:
    assert style("x", BOLD) == "x"


def test_style_with_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR")
    assert style("x", BOLD) == f"{BOLD}x{RESET}"


def test_format_role_colors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR")
    assert format_role(Role.USER) == f"{GREEN}{BOLD}{UNDERLINE}User{RESET}"
    assert format_role(Role.ASSISTANT) == f"{BLUE}{BOLD}{UNDERLINE}Assistant{RESET}"
    assert format_role(Role.SYSTEM) == f"{BOLD}{UNDERLINE}System{RESET}"


def test_format_message() -> None:
    assert format_message(Message.assistant("Hi!")) == "Assistant\nHi!"


def test_wrap_text_width() -> None:
    wrapped = wrap_text("lorem ipsum " * 20, width=30)
    assert all(len(line) <= 30 for line in wrapped.splitlines())


def test_wrap_text_keeps_paragraphs() -> None:
    assert wrap_text("first\n\nsecond", width=72) == "first\n\nsecond"


def test_format_prompt() -> None:
    assert format_prompt() == "User\n> "


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_spinner_clears_line() -> None:
    stream = _TtyStream()
    with Spinner("processing", interval=0.01, stream=stream):
        time.sleep(0.05)
    out = stream.getvalue()
    assert "processing" in out
    assert out.endswith("\r")


def test_spinner_stop_without_start() -> None:
    stream = io.StringIO()
    Spinner(stream=stream).stop()
    assert stream.getvalue() == ""


def test_spinner_silent_when_not_a_tty() -> None:
    stream = io.StringIO()
    with Spinner("processing", interval=0.01, stream=stream):
        time.sleep(0.03)
    assert stream.getvalue() == ""
