"""Thin HTTP helpers around ``requests``."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from ai_chat_cli.llm._exceptions import APIError, DeserializationError, TransportError

logger = logging.getLogger(__name__)


def decode_body(status_code: int, text: str) -> dict[str, Any]:
    """Decode a response body, independent of the HTTP status.

    Error-shaped payloads become :class:`APIError`; anything that is not a
    JSON object becomes :class:`DeserializationError`.
    """
    try:
        body = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(
            f"HTTP {status_code}: response is not valid JSON", body=text
        ) from exc
    if not isinstance(body, dict):
        raise DeserializationError(f"HTTP {status_code}: response is not a JSON object", body=body)
    if "error" in body and "choices" not in body:
        raise APIError(status_code, body)
    return body


def post_json(
    url: str,
    headers: dict[str, str],
    payload: dict[str, Any],
    timeout: float | None = 60,
) -> dict[str, Any]:
    """POST JSON once and return the decoded response object."""
    try:
        r = requests.post(url, headers=headers, json=payload, timeout=timeout)
        text = r.text
    except requests.RequestException as exc:
        raise TransportError(f"request to {url} failed: {exc}") from exc
    logger.debug("POST %s -> HTTP %s (%d bytes)", url, r.status_code, len(text))
    return decode_body(r.status_code, text)
