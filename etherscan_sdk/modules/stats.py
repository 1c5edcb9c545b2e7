"""Stats module: price, supply, node and daily chain statistics."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import validate_choice, validate_date, validate_sort

CLIENT_TYPES = ("geth", "parity")
SYNC_MODES = ("default", "archive")


class StatsModule(BaseModule):
    async def get_eth_price(self) -> dict[str, Any]:
        """Latest Ether price: ``ethbtc``, ``ethusd`` and their timestamps."""
        params = self.create_params("stats", "ethprice")
        return await self._fetch_result(params)

    async def get_eth_supply(self) -> dict[str, Any]:
        """Ether supply including staking rewards, burnt fees and withdrawals."""
        params = self.create_params("stats", "ethsupply2")
        return await self._fetch_result(params)

    async def get_basic_eth_supply(self) -> str:
        """Ether supply excluding ETH2 staking rewards and burnt fees, in wei."""
        params = self.create_params("stats", "ethsupply")
        return await self._fetch_result(params)

    async def get_node_count(self) -> dict[str, Any]:
        params = self.create_params("stats", "nodecount")
        return await self._fetch_result(params)

    async def get_node_size(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
        client_type: str = "geth",
        sync_mode: str = "default",
        sort: str = "asc",
    ) -> list[dict[str, Any]]:
        """Chain size history for the given client type and sync mode."""
        if start_date is not None:
            validate_date(start_date)
        if end_date is not None:
            validate_date(end_date)
        validate_choice(client_type, CLIENT_TYPES, "Client type")
        validate_choice(sync_mode, SYNC_MODES, "Sync mode")
        validate_sort(sort)

        params = self.create_params(
            "stats",
            "chainsize",
            startdate=start_date or "",
            enddate=end_date or "",
            clienttype=client_type,
            syncmode=sync_mode,
            sort=sort,
        )
        return await self._fetch_result(params)

    async def get_daily_network_fee(self) -> list[dict[str, Any]]:
        params = self.create_params("stats", "dailytxnfee")
        return await self._fetch_result(params)

    async def get_daily_new_address_count(self) -> list[dict[str, Any]]:
        params = self.create_params("stats", "dailynewaddress")
        return await self._fetch_result(params)

    async def _daily(self, action: str, start_date: str, end_date: str, sort: str) -> list[dict[str, Any]]:
        validate_date(start_date)
        validate_date(end_date)
        validate_sort(sort)
        params = self.create_params("stats", action, startdate=start_date, enddate=end_date, sort=sort)
        return await self._fetch_result(params)

    async def get_daily_transaction_count(
        self, start_date: str, end_date: str, sort: str = "asc"
    ) -> list[dict[str, Any]]:
        return await self._daily("dailytx", start_date, end_date, sort)

    async def get_daily_block_size(self, start_date: str, end_date: str, sort: str = "asc") -> list[dict[str, Any]]:
        return await self._daily("dailyavgblocksize", start_date, end_date, sort)

    async def get_daily_average_block_time(
        self, start_date: str, end_date: str, sort: str = "asc"
    ) -> list[dict[str, Any]]:
        return await self._daily("dailyavgblocktime", start_date, end_date, sort)

    async def get_daily_uncle_block_count(
        self, start_date: str, end_date: str, sort: str = "asc"
    ) -> list[dict[str, Any]]:
        return await self._daily("dailyuncleblkcount", start_date, end_date, sort)
