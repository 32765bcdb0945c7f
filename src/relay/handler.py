"""Kernlogica van de relay: valideren, doorsturen, antwoord vertalen.

Both deployment adapters (the FastAPI app and the serverless function) call
:func:`handle`; neither contains relay logic of its own.
"""

import json
import logging
from typing import Any

from openai import AsyncOpenAI
from pydantic import ValidationError

from ..openai_service.client import chat_completion
from .config import RelayConfig
from .models import ChatRequest, ChatResponse, ErrorResponse

log = logging.getLogger("relay")

METHOD_NOT_ALLOWED = "Method Not Allowed"
MESSAGE_REQUIRED = "Message is required."
UPSTREAM_FAILED = "Failed to get response from AI."

Body = str | bytes | bytearray | dict[str, Any] | None


def _error(status: int, message: str) -> tuple[int, dict[str, Any]]:
    return status, ErrorResponse(error=message).model_dump()


def _decode(body: Body) -> Any:
    """Decode the raw request payload. An empty body counts as an empty object."""
    if body is None or isinstance(body, dict):
        return body or {}
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8")
    if not body.strip():
        return {}
    return json.loads(body)


async def handle(
    method: str, body: Body, config: RelayConfig, client: AsyncOpenAI
) -> tuple[int, dict[str, Any] | str]:
    """Handle one inbound chat request and return ``(status_code, body)``.

    The body is plain text for 405 and a JSON-able dict otherwise. Upstream
    failures are logged here and never passed through to the caller.
    """
    if method.upper() != "POST":
        return 405, METHOD_NOT_ALLOWED

    try:
        payload = _decode(body)
    except ValueError as e:
        log.error("Unreadable request body: %s", e)
        return _error(500, UPSTREAM_FAILED)

    try:
        request = ChatRequest.model_validate(payload)
    except ValidationError:
        return _error(400, MESSAGE_REQUIRED)

    try:
        reply = await chat_completion(client, config.model, request.message)
        response = ChatResponse(reply=reply)
    except Exception as e:
        log.error("Error in chat relay (%s): %s", type(e).__name__, e)
        return _error(500, UPSTREAM_FAILED)

    return 200, response.model_dump()
