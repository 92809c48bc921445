"""Async HTTP helpers using ``httpx``."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ai_chat_cli.llm._exceptions import TransportError
from ai_chat_cli.llm._http import decode_body

logger = logging.getLogger(__name__)


async def async_post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float | None = 60,
) -> dict[str, Any]:
    """POST JSON once asynchronously and return the decoded response object."""
    try:
        async with httpx.AsyncClient() as client:
            r = await client.post(url, headers=headers, json=payload, timeout=timeout)
            text = r.text
    except httpx.HTTPError as exc:
        raise TransportError(f"request to {url} failed: {exc}") from exc
    logger.debug("POST %s -> HTTP %s (%d bytes)", url, r.status_code, len(text))
    return decode_body(r.status_code, text)
