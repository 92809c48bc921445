"""Terminal presentation: ANSI styling, message formatting and a spinner."""

from __future__ import annotations

import itertools
import os
import sys
import textwrap
import threading
from typing import TextIO

from ai_chat_cli.llm._types import Message, Role

DEFAULT_WIDTH = 72

RESET = "\033[0m"
BOLD = "\033[1m"
UNDERLINE = "\033[4m"
GREEN = "\033[32m"
BLUE = "\033[34m"

_ROLE_LABELS: dict[Role, tuple[str, tuple[str, ...]]] = {
    Role.SYSTEM: ("System", ()),
    Role.USER: ("User", (GREEN,)),
    Role.ASSISTANT: ("Assistant", (BLUE,)),
}


def style(text: str, *codes: str) -> str:
    """Wrap *text* in ANSI codes unless ``NO_COLOR`` is set."""
    if not codes or os.getenv("NO_COLOR") is not None:
        return text
    return "".join(codes) + text + RESET


def format_role(role: Role) -> str:
    label, colours = _ROLE_LABELS[role]
    return style(label, *colours, BOLD, UNDERLINE)


def wrap_text(text: str, width: int = DEFAULT_WIDTH) -> str:
    """Wrap each line of *text* to *width*, keeping blank lines."""
    lines: list[str] = []
    for line in text.splitlines() or [""]:
        lines.extend(textwrap.wrap(line, width) or [""])
    return "\n".join(lines)


def format_message(message: Message, width: int = DEFAULT_WIDTH) -> str:
    return f"{format_role(message.role)}\n{wrap_text(message.content, width)}"


def format_prompt(label: str = "User") -> str:
    """Prompt shown before reading a user turn."""
    return f"{style(label, GREEN, BOLD, UNDERLINE)}\n> "


class Spinner:
    """Transient progress indicator shown while a request is in flight.

    Usage::

        with Spinner("processing"):
            result = client.complete(model, messages)
    """

    _frames = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"

    def __init__(
        self,
        message: str = "processing",
        *,
        interval: float = 0.1,
        stream: TextIO | None = None,
    ) -> None:
        self._message = message
        self._interval = interval
        self._stream = stream or sys.stderr
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _spin(self) -> None:
        for frame in itertools.cycle(self._frames):
            self._stream.write(f"\r{frame} {self._message}")
            self._stream.flush()
            if self._stop.wait(self._interval):
                break

    def start(self) -> None:
        # Redirected output gets no animation.
        if self._thread is not None or not self._stream.isatty():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        # Clear the spinner line.
        self._stream.write("\r" + " " * (len(self._message) + 2) + "\r")
        self._stream.flush()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()
