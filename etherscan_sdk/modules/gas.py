"""Gas tracker module."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import validate_address, validate_hex_data, validate_positive_int


class GasModule(BaseModule):
    async def get_gas_oracle(self) -> dict[str, Any]:
        """Safe, proposed and fast gas prices (Gwei) plus the base fee."""
        params = self.create_params("gastracker", "gasoracle")
        return await self._fetch_result(params)

    async def estimate_confirmation_time(self, gas_price: int) -> str:
        """Estimated confirmation time in seconds for ``gas_price`` (wei)."""
        validate_positive_int(gas_price, "Gas price")
        params = self.create_params("gastracker", "gasestimate", gasprice=gas_price)
        return await self._fetch_result(params)

    async def estimate_gas_for_contract_execution(self, to: str, data: str, value: str = "0") -> str:
        validate_address(to)
        validate_hex_data(data)
        params = self.create_params(
            "gastracker",
            "contractexecutionstatus",
            to=to,
            data=data,
            value=value,
        )
        return await self._fetch_result(params)
