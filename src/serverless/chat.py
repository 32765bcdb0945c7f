"""Serverless entry point: one function call per chat request.

The platform invokes :func:`handler` with an event carrying ``httpMethod``,
``body`` and optionally ``isBase64Encoded``. The result uses the matching
``statusCode``/``headers``/``body`` shape, with ``body`` always a string.
"""

import asyncio
import base64
import binascii
import json
import logging
from functools import lru_cache
from typing import Any

from openai import AsyncOpenAI

from ..openai_service.client import build_client
from ..relay.config import RelayConfig, load_config
from ..relay.handler import handle

log = logging.getLogger("relay")
logging.basicConfig(level=logging.INFO)


@lru_cache(maxsize=1)
def get_config() -> RelayConfig:
    """Return the config, read once per cold start."""
    return load_config()


def _event_body(event: dict[str, Any]) -> str | bytes | None:
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body)
        except binascii.Error as e:
            log.warning("Body flagged as base64 but not decodable: %s", e)
    return body


async def invoke(
    event: dict[str, Any], config: RelayConfig, client: AsyncOpenAI | None = None
) -> dict[str, Any]:
    """Run the relay for a single event."""
    method = event.get("httpMethod") or ""
    body = _event_body(event)

    if client is None:
        async with build_client(config) as owned:
            status, payload = await handle(method, body, config, owned)
    else:
        status, payload = await handle(method, body, config, client)

    if isinstance(payload, str):
        return {
            "statusCode": status,
            "headers": {"Content-Type": "text/plain; charset=utf-8"},
            "body": payload,
        }
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload, ensure_ascii=False),
    }


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Platform entry point."""
    return asyncio.run(invoke(event, get_config()))
