"""Runtime settings resolved from command-line arguments and the environment."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass

from ai_chat_cli.conversation import DEFAULT_SYSTEM_PROMPT
from ai_chat_cli.llm._client import BASE_URL_ENV, DEFAULT_BASE_URL, resolve_api_key
from ai_chat_cli.theme import DEFAULT_WIDTH

DEFAULT_MODEL = "gpt-3.5-turbo"


@dataclass(frozen=True, slots=True)
class Settings:
    """Everything one session needs to run."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    system_message: str = DEFAULT_SYSTEM_PROMPT
    prompt: str | None = None
    interactive: bool = False
    width: int = DEFAULT_WIDTH
    verbose: bool = False

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks.
        return (
            f"Settings(base_url={self.base_url!r}, model={self.model!r}, "
            f"interactive={self.interactive!r}, width={self.width!r})"
        )

    @classmethod
    def from_args(
        cls, args: argparse.Namespace, environ: Mapping[str, str] | None = None
    ) -> Settings:
        """Build settings from parsed CLI args, raising ``ConfigurationError`` without a key."""
        env = os.environ if environ is None else environ
        return cls(
            api_key=resolve_api_key(environ=env),
            base_url=env.get(BASE_URL_ENV) or DEFAULT_BASE_URL,
            model=DEFAULT_MODEL if args.model is None else args.model,
            system_message=(
                DEFAULT_SYSTEM_PROMPT if args.system_message is None else args.system_message
            ),
            prompt=args.prompt,
            interactive=args.interactive,
            width=args.width,
            verbose=args.verbose,
        )
