"""Configuratie voor de chat relay, eenmalig ingelezen uit de omgeving."""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, SecretStr

DEFAULT_MODEL = "deepseek/deepseek-r1:free"
DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_PORT = 3000

# OPENROUTER_API_KEY wins; DEEPSEEK_API_KEY is what older deployments set.
API_KEY_VARS = ("OPENROUTER_API_KEY", "DEEPSEEK_API_KEY")


class ConfigError(RuntimeError):
    """Raised at startup when the relay cannot be configured."""


class RelayConfig(BaseModel):
    """Process-wide relay settings. Built once, passed explicitly, never mutated."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    http_referer: str | None = None
    x_title: str | None = None
    allowed_origins: tuple[str, ...] = ()
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def default_headers(self) -> dict[str, str]:
        """Optional identification headers some upstream deployments require."""
        headers = {}
        if self.http_referer:
            headers["HTTP-Referer"] = self.http_referer
        if self.x_title:
            headers["X-Title"] = self.x_title
        return headers


def load_config(env: Mapping[str, str] | None = None) -> RelayConfig:
    """Lees de configuratie uit de omgeving; faalt hard als de API key ontbreekt."""
    if env is None:
        env = os.environ

    api_key = next((env[name].strip() for name in API_KEY_VARS if env.get(name, "").strip()), None)
    if not api_key:
        raise ConfigError(f"Missing upstream API key: set one of {', '.join(API_KEY_VARS)}")

    raw_port = env.get("PORT") or str(DEFAULT_PORT)
    try:
        port = int(raw_port)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw_port!r}") from None

    log_level = (env.get("LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"LOG_LEVEL must be a logging level name, got {log_level!r}")

    origins = env.get("ALLOWED_ORIGINS", "")
    return RelayConfig(
        api_key=SecretStr(api_key),
        model=env.get("RELAY_MODEL") or DEFAULT_MODEL,
        base_url=env.get("OPENROUTER_BASE_URL") or DEFAULT_BASE_URL,
        http_referer=env.get("HTTP_REFERER") or None,
        x_title=env.get("X_TITLE") or None,
        allowed_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        port=port,
        log_level=log_level,
    )
