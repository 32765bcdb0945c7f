import httpx
import pytest

from src.openai_service.client import build_client
from src.relay.config import RelayConfig
from tests.utils import API_KEY, MODEL, Upstream


@pytest.fixture
def config() -> RelayConfig:
    return RelayConfig(
        api_key=API_KEY,
        model=MODEL,
        http_referer="https://chat.example.com",
        x_title="Chat Relay",
    )


@pytest.fixture
def upstream() -> Upstream:
    return Upstream()


@pytest.fixture
def client(config: RelayConfig, upstream: Upstream):
    return build_client(config, http_client=httpx.AsyncClient(transport=httpx.MockTransport(upstream)))
