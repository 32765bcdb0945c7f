import json
from typing import Any, Callable

import httpx


API_KEY = "sk-or-test-key"  # pragma: allowlist secret
MODEL = "deepseek/deepseek-r1:free"


def completion(content: Any = "hi there") -> dict[str, Any]:
    return {
        "id": "gen-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": MODEL,
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class Upstream:
    """
    Stand-in for the OpenRouter API: records every request and answers with
    whatever ``respond`` returns (or raises).
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=completion()
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


