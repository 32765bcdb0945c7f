"""Entry point voor de langlopende chat relay (FastAPI + uvicorn)."""

import logging

import uvicorn
from dotenv import load_dotenv

from src.api.main import create_app
from src.relay.config import load_config

load_dotenv()

# Faalt direct bij opstarten als de API key ontbreekt
config = load_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = create_app(config)


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=config.port)
