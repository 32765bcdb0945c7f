import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from openai import AsyncOpenAI

from ..openai_service.client import build_client
from ..relay.config import RelayConfig
from ..relay.handler import handle

log = logging.getLogger("relay")


def create_app(config: RelayConfig, client: AsyncOpenAI | None = None) -> FastAPI:
    """Build the long-running relay app.

    When no upstream client is given, one is created at startup and closed
    at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned = client is None
        app.state.client = build_client(config) if owned else client
        log.info("Chat relay ready (model=%s, upstream=%s)", config.model, config.base_url)
        yield
        if owned:
            await app.state.client.close()

    # ---------- App Init ----------
    app = FastAPI(title="Chat Relay", version="0.1.0", lifespan=lifespan)

    # --------- Middleware ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.allowed_origins) or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health():
        """Simple health check."""
        return {"ok": True}

    async def chat(request: Request) -> Response:
        """Relay a chat message to the upstream model and return its reply."""
        status, payload = await handle(
            request.method, await request.body(), config, request.app.state.client
        )
        if isinstance(payload, str):
            return PlainTextResponse(payload, status_code=status)
        return JSONResponse(payload, status_code=status)

    # Plain route without a method list: every method reaches the relay handler,
    # which answers 405 itself.
    app.router.add_route("/chat", chat, include_in_schema=False)

    return app
