"""Tests for the client entry point and its ambient stack.

Covers:
  - Network table and endpoint resolution
  - Settings and validate_settings
  - EtherscanClient wiring (mocked HTTP end to end)
  - Logging helpers and request metrics
"""

from __future__ import annotations

import asyncio
import io
import json
import logging

import httpx
import pytest
from prometheus_client import REGISTRY

from etherscan_sdk import EtherscanClient
from etherscan_sdk.core.config import Settings, validate_settings
from etherscan_sdk.core.logging import JSONFormatter, redact_url, setup_logging
from etherscan_sdk.exceptions import (
    EtherscanError,
    RemoteAPIError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from etherscan_sdk.networks import (
    SUPPORTED_NETWORKS,
    V1_API_URLS,
    V2_CHAIN_IDS,
    ApiVersion,
    Network,
    parse_network,
    resolve_api_url,
)
from tests.conftest import ADDRESS, TEST_API_KEY, envelope


def _mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# ==========================================================================
# Test: Networks
# ==========================================================================


class TestNetworks:
    def test_every_network_has_both_endpoints(self):
        assert len(Network) == 61
        assert set(V1_API_URLS) == set(Network)
        assert set(V2_CHAIN_IDS) == set(Network)

    def test_resolve_v2(self):
        assert resolve_api_url("eth-mainnet") == "https://api.etherscan.io/v2/api?chainid=1"
        assert resolve_api_url(Network.ARB_MAINNET, ApiVersion.V2) == "https://api.etherscan.io/v2/api?chainid=42161"
        assert resolve_api_url("polygon-mainnet", "v2").endswith("chainid=137")

    def test_resolve_v1(self):
        assert resolve_api_url("eth-mainnet", "v1") == "https://api.etherscan.io/api"
        assert resolve_api_url(Network.ARB_MAINNET, ApiVersion.V1) == "https://api.arbiscan.io/api"

    def test_parse_network_invalid(self):
        with pytest.raises(ValidationError, match="Invalid network: eth-moon"):
            parse_network("eth-moon")

    def test_invalid_version(self):
        with pytest.raises(ValidationError, match="Invalid API version"):
            resolve_api_url("eth-mainnet", "v3")

    def test_supported_networks_are_values(self):
        assert "eth-sepolia" in SUPPORTED_NETWORKS


# ==========================================================================
# Test: Settings
# ==========================================================================


class TestSettings:
    def test_defaults(self, test_settings):
        assert test_settings.network == "eth-mainnet"
        assert test_settings.timeout_ms == 30000
        assert test_settings.rate_limit_enabled is True
        assert test_settings.max_requests_per_second == 5

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ETHERSCAN_API_KEY", "from-env")
        monkeypatch.setenv("ETHERSCAN_MAX_REQUESTS_PER_SECOND", "2")
        monkeypatch.setenv("ETHERSCAN_RATE_LIMIT_ENABLED", "false")

        config = Settings(_env_file=None)

        assert config.api_key == "from-env"
        assert config.max_requests_per_second == 2
        assert config.rate_limit_enabled is False

    def test_validate_settings_ok(self):
        validate_settings(Settings(_env_file=None, api_key="k"))

    def test_validate_settings_collects_errors(self):
        config = Settings(_env_file=None, api_key="", network="nowhere", timeout_ms=0)

        with pytest.raises(ValidationError) as exc_info:
            validate_settings(config)

        message = str(exc_info.value)
        assert "ETHERSCAN_API_KEY must be set" in message
        assert "ETHERSCAN_NETWORK 'nowhere'" in message
        assert "ETHERSCAN_TIMEOUT_MS" in message


# ==========================================================================
# Test: EtherscanClient
# ==========================================================================


class TestEtherscanClient:
    def test_requires_api_key(self, test_settings):
        with pytest.raises(ValidationError, match="API key is required"):
            EtherscanClient(config=test_settings)

    def test_falls_back_to_settings(self, test_settings):
        test_settings.api_key = "settings-key"
        test_settings.max_requests_per_second = 3

        client = EtherscanClient(config=test_settings)

        assert client.api_key == "settings-key"
        assert client.dispatcher.config.max_requests_per_second == 3
        assert client.accounts.api_key == "settings-key"

    def test_network_and_version(self, test_settings):
        client = EtherscanClient(TEST_API_KEY, network="arb-mainnet", version="v1", config=test_settings)

        assert client.get_network() is Network.ARB_MAINNET
        assert client.dispatcher.config.base_url == "https://api.arbiscan.io/api"

    def test_invalid_network(self, test_settings):
        with pytest.raises(ValidationError, match="Invalid network"):
            EtherscanClient(TEST_API_KEY, network="bogus", config=test_settings)

    def test_modules_share_dispatcher(self, test_settings):
        client = EtherscanClient(TEST_API_KEY, config=test_settings)

        assert len(client.modules) == 9
        assert all(module.dispatcher is client.dispatcher for module in client.modules)

    def test_error_class_aliases(self):
        assert EtherscanClient.APIError is RemoteAPIError
        assert EtherscanClient.NetworkError is TransportError
        assert EtherscanClient.ValidationError is ValidationError
        assert issubclass(TransportTimeoutError, EtherscanClient.NetworkError)
        assert issubclass(RemoteAPIError, EtherscanError)

    @pytest.mark.asyncio
    async def test_end_to_end_balance(self, test_settings):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=envelope("123"))

        async with EtherscanClient(TEST_API_KEY, http_client=_mock_client(handler), config=test_settings) as client:
            balance = await client.accounts.get_balance(ADDRESS)

        assert balance == "123"
        params = seen[0].url.params
        assert seen[0].url.path == "/v2/api"
        assert params["chainid"] == "1"
        assert params["module"] == "account"
        assert params["action"] == "balance"
        assert params["apikey"] == TEST_API_KEY

    @pytest.mark.asyncio
    async def test_end_to_end_remote_error(self, test_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=envelope("Invalid API Key", status="0", message="NOTOK"))

        client = EtherscanClient(TEST_API_KEY, http_client=_mock_client(handler), config=test_settings)

        with pytest.raises(EtherscanClient.APIError) as exc_info:
            await client.stats.get_eth_price()
        assert exc_info.value.code == "Invalid API Key"

    @pytest.mark.asyncio
    async def test_set_timeout_rebuilds_dispatcher(self, test_settings):
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(5)
            return httpx.Response(200, json=envelope("late"))

        client = EtherscanClient(
            TEST_API_KEY,
            http_client=_mock_client(handler),
            max_requests_per_second=4,
            config=test_settings,
        )
        previous = client.dispatcher

        client.set_timeout(100)

        assert client.dispatcher is not previous
        assert client.dispatcher.config.timeout_ms == 100
        assert client.dispatcher.config.max_requests_per_second == 4
        assert client.dispatcher.transport is previous.transport
        assert all(module.dispatcher is client.dispatcher for module in client.modules)

        with pytest.raises(TransportTimeoutError) as exc_info:
            await client.gas.get_gas_oracle()
        assert exc_info.value.timeout_ms == 100

    @pytest.mark.asyncio
    async def test_set_timeout_keeps_admission_window(self, test_settings):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=envelope("1"))

        client = EtherscanClient(
            TEST_API_KEY,
            http_client=_mock_client(handler),
            max_requests_per_second=1,
            config=test_settings,
        )
        previous = client.dispatcher
        await client.stats.get_eth_supply()

        client.set_timeout(2000)

        assert client.dispatcher.admission is previous.admission
        assert client.dispatcher.admission.requests_this_window == 1
        assert client.dispatcher.get_stats()["admission"]["max_per_second"] == 1

        await client.aclose()
        assert previous.admission.get_stats()["draining"] is False
        with pytest.raises(TransportError, match="closed"):
            await previous.get()

    def test_set_timeout_invalid(self, test_settings):
        client = EtherscanClient(TEST_API_KEY, config=test_settings)
        with pytest.raises(ValidationError, match="Timeout must be a positive integer"):
            client.set_timeout(0)

    def test_set_rate_limit(self, test_settings):
        client = EtherscanClient(TEST_API_KEY, config=test_settings)

        client.set_rate_limit(False)

        assert client.dispatcher.config.rate_limit_enabled is False
        assert client.dispatcher.admission.enabled is False

        with pytest.raises(ValidationError):
            client.set_rate_limit(True, 0)


# ==========================================================================
# Test: Logging and metrics
# ==========================================================================


class TestLogging:
    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("etherscan_sdk")
        handlers, level = logger.handlers[:], logger.level
        yield logger
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_redact_url(self):
        url = "https://api.etherscan.io/v2/api?chainid=1&module=account&apikey=SECRET&tag=latest"
        assert redact_url(url) == "https://api.etherscan.io/v2/api?chainid=1&module=account&apikey=***&tag=latest"

    def test_json_formatter(self):
        record = logging.LogRecord("etherscan_sdk.test", logging.WARNING, __file__, 1, "GET %s failed", ("url",), None)
        record.request_id = "abc123"
        record.http_status = 502

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "WARNING"
        assert data["logger"] == "etherscan_sdk.test"
        assert data["message"] == "GET url failed"
        assert data["request_id"] == "abc123"
        assert data["http_status"] == 502
        assert "network" not in data

    def test_json_formatter_masks_api_key(self):
        record = logging.LogRecord("etherscan_sdk", logging.INFO, __file__, 1, "GET %s", ("/api?apikey=SECRET",), None)

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "GET /api?apikey=***"

    def test_setup_logging_json(self, package_logger):
        stream = io.StringIO()

        returned = setup_logging(level="DEBUG", json_output=True, stream=stream)
        setup_logging(level="DEBUG", json_output=True, stream=stream)
        logging.getLogger("etherscan_sdk.dispatch").debug("hello %s", "world")

        assert returned is package_logger
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JSONFormatter)
        assert json.loads(stream.getvalue().splitlines()[-1])["message"] == "hello world"
        assert logging.getLogger("httpx").level == logging.WARNING

    @pytest.mark.asyncio
    async def test_failure_log_hides_api_key(self, make_dispatcher, caplog):
        dispatcher = make_dispatcher(lambda request: httpx.Response(500))

        with caplog.at_level(logging.WARNING, logger="etherscan_sdk"):
            with pytest.raises(TransportError):
                await dispatcher.get("", {"apikey": "SECRET"})

        assert "apikey=***" in caplog.text
        assert "SECRET" not in caplog.text


class TestMetrics:
    @pytest.mark.asyncio
    async def test_request_counted(self, make_dispatcher):
        labels = {"method": "GET", "status": "remote_api_error"}
        before = REGISTRY.get_sample_value("etherscan_requests_total", labels) or 0.0
        body = envelope("Max rate limit reached", status="0", message="NOTOK")
        dispatcher = make_dispatcher(lambda request: httpx.Response(200, json=body))

        with pytest.raises(RemoteAPIError):
            await dispatcher.get()

        assert REGISTRY.get_sample_value("etherscan_requests_total", labels) == before + 1
