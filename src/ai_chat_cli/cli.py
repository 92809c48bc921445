"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ai_chat_cli.config import DEFAULT_MODEL, Settings
from ai_chat_cli.conversation import DEFAULT_SYSTEM_PROMPT, Conversation
from ai_chat_cli.llm import ChatClient, ChatClientError
from ai_chat_cli.session import Session
from ai_chat_cli.theme import DEFAULT_WIDTH, Spinner

logger = logging.getLogger("ai_chat_cli")


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-chat",
        description="Chat with an OpenAI model from the terminal.",
    )
    parser.add_argument(
        "-m", "--model", help=f"OpenAI model identifier (default: {DEFAULT_MODEL!r})"
    )
    parser.add_argument(
        "-s",
        "--system-message",
        help=f"System message (default: {DEFAULT_SYSTEM_PROMPT!r})",
    )
    parser.add_argument("-p", "--prompt", help="Initial user message")
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Start an interactive session"
    )
    parser.add_argument(
        "-w",
        "--width",
        type=positive_int,
        default=DEFAULT_WIDTH,
        help=f"Wrap replies at this column (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests and responses to stderr"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def run(settings: Settings) -> Conversation:
    client = ChatClient(settings.api_key, base_url=settings.base_url)
    conversation = Conversation.initialize(settings.system_message, settings.prompt)
    session = Session(
        client,
        conversation,
        model=settings.model,
        interactive=settings.interactive,
        width=settings.width,
        progress=lambda: Spinner("processing"),
    )
    return session.run()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        settings = Settings.from_args(args)
        logger.debug("Starting session: %r", settings)
        run(settings)
    except ChatClientError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0
