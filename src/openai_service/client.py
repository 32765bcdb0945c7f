"""OpenAI-clientconfiguratie voor de OpenRouter upstream."""

import httpx
from openai import AsyncOpenAI

from ..relay.config import RelayConfig


class UpstreamFormatError(Exception):
    """The upstream answered 2xx but without a usable reply."""


def build_client(config: RelayConfig, http_client: httpx.AsyncClient | None = None) -> AsyncOpenAI:
    """Maak een AsyncOpenAI-client die naar de geconfigureerde upstream wijst.

    Retries are disabled: every inbound request results in exactly one
    upstream call. The SDK's default timeout is left untouched.
    """
    return AsyncOpenAI(
        api_key=config.api_key.get_secret_value(),
        base_url=config.base_url,
        default_headers=config.default_headers() or None,
        max_retries=0,
        http_client=http_client,
    )


async def chat_completion(client: AsyncOpenAI, model: str, message: str) -> str:
    """Send a single user message upstream and return the first choice's text."""
    completion = await client.chat.completions.create(
        model=model,
        messages=[{"role": "user", "content": message}],
    )
    choices = getattr(completion, "choices", None)
    if not choices:
        raise UpstreamFormatError("upstream response has no choices")
    content = choices[0].message.content
    if not isinstance(content, str):
        raise UpstreamFormatError(f"upstream message content is {type(content).__name__}, not text")
    return content
