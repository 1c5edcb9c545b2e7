from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from etherscan_sdk.core.config import Settings
from etherscan_sdk.dispatch.dispatcher import Dispatcher
from etherscan_sdk.dispatch.types import DispatcherConfig

TEST_API_KEY = "TESTKEY123"
TEST_BASE_URL = "https://api.etherscan.io/v2/api?chainid=1"

ADDRESS = "0xde0b295669a9fd93d5f28d9ec85e40f4cb697bae"
OTHER_ADDRESS = "0x06012c8cf97BEaD5deAe237070F9587f8E7A266d"
TX_HASH = "0x" + "ab" * 32


def envelope(result, status: str = "1", message: str = "OK") -> dict:
    return {"status": status, "message": message, "result": result}


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    return Settings(_env_file=None, api_key="", network="eth-mainnet", version="v2")


@pytest.fixture
def make_dispatcher() -> Callable[..., Dispatcher]:
    """Build a Dispatcher whose HTTP traffic is served by ``handler``."""

    def _factory(handler, **config_overrides) -> Dispatcher:
        config = DispatcherConfig(base_url=config_overrides.pop("base_url", TEST_BASE_URL), **config_overrides)
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return Dispatcher(config, http_client=client)

    return _factory


@pytest.fixture
def fake_dispatcher() -> MagicMock:
    """Dispatcher stand-in recording the params each module sends."""
    dispatcher = MagicMock(spec=Dispatcher)
    dispatcher.get = AsyncMock(return_value=envelope("ok"))
    return dispatcher
