"""EtherscanClient: entry point wiring settings, dispatcher and modules.

Usage:
    async with EtherscanClient(api_key="...", network="eth-mainnet") as client:
        balance = await client.accounts.get_balance("0xde0b2956...")
        oracle = await client.gas.get_gas_oracle()

    try:
        await client.contracts.get_abi(address)
    except EtherscanClient.APIError as e:
        print(e.code, e.message)
"""

from __future__ import annotations

import logging

import httpx

from etherscan_sdk.core.config import Settings, settings
from etherscan_sdk.dispatch.dispatcher import Dispatcher
from etherscan_sdk.dispatch.types import DispatcherConfig
from etherscan_sdk.exceptions import RemoteAPIError, TransportError, ValidationError
from etherscan_sdk.modules import (
    AccountsModule,
    BaseModule,
    BlocksModule,
    ContractsModule,
    GasModule,
    LogsModule,
    ProxyModule,
    StatsModule,
    TokensModule,
    TransactionsModule,
)
from etherscan_sdk.networks import ApiVersion, Network, parse_network, parse_version, resolve_api_url

logger = logging.getLogger(__name__)


class EtherscanClient:
    """Typed async client for the Etherscan API family.

    Options left as None fall back to :data:`etherscan_sdk.core.config.settings`
    (``ETHERSCAN_*`` environment variables).
    """

    APIError = RemoteAPIError
    ValidationError = ValidationError
    NetworkError = TransportError

    def __init__(
        self,
        api_key: str | None = None,
        network: Network | str | None = None,
        version: ApiVersion | str | None = None,
        timeout_ms: int | None = None,
        rate_limit_enabled: bool | None = None,
        max_requests_per_second: int | None = None,
        http_client: httpx.AsyncClient | None = None,
        config: Settings | None = None,
    ):
        config = config or settings

        self.api_key = api_key if api_key is not None else config.api_key
        if not self.api_key:
            raise ValidationError("API key is required")

        self.network = parse_network(network or config.network)
        self.version = parse_version(version or config.version)
        self._http_client = http_client

        self.dispatcher = Dispatcher(
            DispatcherConfig(
                base_url=resolve_api_url(self.network, self.version),
                timeout_ms=timeout_ms or config.timeout_ms,
                rate_limit_enabled=(
                    rate_limit_enabled if rate_limit_enabled is not None else config.rate_limit_enabled
                ),
                max_requests_per_second=max_requests_per_second or config.max_requests_per_second,
            ),
            http_client=http_client,
        )

        self.accounts = AccountsModule(self.dispatcher, self.api_key)
        self.contracts = ContractsModule(self.dispatcher, self.api_key)
        self.transactions = TransactionsModule(self.dispatcher, self.api_key)
        self.blocks = BlocksModule(self.dispatcher, self.api_key)
        self.logs = LogsModule(self.dispatcher, self.api_key)
        self.proxy = ProxyModule(self.dispatcher, self.api_key)
        self.tokens = TokensModule(self.dispatcher, self.api_key)
        self.gas = GasModule(self.dispatcher, self.api_key)
        self.stats = StatsModule(self.dispatcher, self.api_key)

        dispatcher_config = self.dispatcher.config
        logger.info(
            "EtherscanClient initialized (network=%s, version=%s, rate_limit=%s)",
            self.network.value,
            self.version.value,
            f"{dispatcher_config.max_requests_per_second}/s" if dispatcher_config.rate_limit_enabled else "off",
            extra={"network": self.network.value},
        )

    @property
    def modules(self) -> list[BaseModule]:
        return [
            self.accounts,
            self.contracts,
            self.transactions,
            self.blocks,
            self.logs,
            self.proxy,
            self.tokens,
            self.gas,
            self.stats,
        ]

    def get_network(self) -> Network:
        return self.network

    def set_rate_limit(self, enabled: bool, max_requests_per_second: int = 5) -> None:
        self.dispatcher.set_rate_limit(enabled, max_requests_per_second)

    def set_timeout(self, timeout_ms: int) -> None:
        """Replace the dispatcher with one using ``timeout_ms``.

        The new dispatcher shares the old one's transport and admission
        queue, so calls keep one FIFO order and one per-window count. Calls
        queued before the change keep the old timeout.
        """
        if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
            raise ValidationError("Timeout must be a positive integer")

        previous = self.dispatcher
        self.dispatcher = Dispatcher(
            DispatcherConfig(
                base_url=previous.config.base_url,
                timeout_ms=timeout_ms,
                rate_limit_enabled=previous.config.rate_limit_enabled,
                max_requests_per_second=previous.config.max_requests_per_second,
                headers=previous.config.headers,
            ),
            transport=previous.transport,
            admission=previous.admission,
        )
        for module in self.modules:
            module.dispatcher = self.dispatcher
        logger.info("Request timeout set to %dms", timeout_ms)

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    async def __aenter__(self) -> EtherscanClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
