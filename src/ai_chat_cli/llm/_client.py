"""ChatClient — the synchronous Chat Completions client."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Self

from ai_chat_cli.llm._exceptions import ConfigurationError
from ai_chat_cli.llm._http import post_json
from ai_chat_cli.llm._types import CompletionResult, Message, build_payload, parse_completion

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com"
CHAT_COMPLETIONS_PATH = "/v1/chat/completions"
API_KEY_ENV = "OPENAI_API_KEY"
BASE_URL_ENV = "OPENAI_BASE_URL"


def resolve_api_key(api_key: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Return *api_key* or the ``OPENAI_API_KEY`` value, raising if neither is set."""
    env = os.environ if environ is None else environ
    key = api_key or env.get(API_KEY_ENV, "")
    if not key:
        raise ConfigurationError(f"{API_KEY_ENV} is not defined")
    return key



class _EndpointConfig:
    """URL, headers and timeout shared by the sync and async clients."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = 60,
    ) -> None:
        if not api_key:
            raise ConfigurationError("api_key must not be empty")
        self._url = base_url.rstrip("/") + CHAT_COMPLETIONS_PATH
        self._timeout = timeout
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **kwargs: object) -> Self:
        env = os.environ if environ is None else environ
        kwargs.setdefault("base_url", env.get(BASE_URL_ENV) or DEFAULT_BASE_URL)
        return cls(resolve_api_key(environ=env), **kwargs)  # type: ignore[arg-type]

    @property
    def url(self) -> str:
        return self._url


class ChatClient(_EndpointConfig):
    """Sends a conversation to the Chat Completions endpoint.

    One call, one HTTP request; nothing is kept between calls except the key.

    Usage::

        from ai_chat_cli.llm import ChatClient, Message

        client = ChatClient.from_env()
        result = client.complete("gpt-3.5-turbo", [Message.user("Hello!")])
        print(result.reply.content)
    """

    def complete(self, model: str, messages: Sequence[Message]) -> CompletionResult:
        """Request a completion for *messages*.

        Raises:
            TransportError: the request could not be sent or answered.
            DeserializationError: the body is not a well-formed completion.
        """
        payload = build_payload(model, messages)
        logger.debug("Requesting completion: model=%s messages=%d", model, len(messages))
        raw = post_json(self._url, self._headers, payload, timeout=self._timeout)
        result = parse_completion(raw)
        logger.debug("Completion %s: usage=%s", result.id, result.usage)
        return result
