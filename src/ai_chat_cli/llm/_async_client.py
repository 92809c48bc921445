"""AsyncChatClient — the async Chat Completions client."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ai_chat_cli.llm._async_http import async_post_json
from ai_chat_cli.llm._client import _EndpointConfig
from ai_chat_cli.llm._types import CompletionResult, Message, build_payload, parse_completion

logger = logging.getLogger(__name__)


class AsyncChatClient(_EndpointConfig):
    """Async counterpart of :class:`ChatClient` built on ``httpx``.

    Usage::

        client = AsyncChatClient.from_env()
        result = await client.complete("gpt-3.5-turbo", [Message.user("Hello!")])
    """

    async def complete(self, model: str, messages: Sequence[Message]) -> CompletionResult:
        payload = build_payload(model, messages)
        logger.debug("Requesting completion: model=%s messages=%d", model, len(messages))
        raw = await async_post_json(self._url, self._headers, payload, timeout=self._timeout)
        result = parse_completion(raw)
        logger.debug("Completion %s: usage=%s", result.id, result.usage)
        return result
