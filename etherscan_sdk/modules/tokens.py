"""Tokens module: ERC-20 balances, supply, holders and metadata."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import validate_address


class TokensModule(BaseModule):
    async def get_token_balance(self, contract_address: str, address: str, tag: str = "latest") -> str:
        """Balance of ``address`` in the token's base units."""
        validate_address(contract_address)
        validate_address(address)
        params = self.create_params(
            "account",
            "tokenbalance",
            contractaddress=contract_address,
            address=address,
            tag=tag or "latest",
        )
        return await self._fetch_result(params)

    async def get_token_supply(self, contract_address: str) -> str:
        validate_address(contract_address)
        params = self.create_params("stats", "tokensupply", contractaddress=contract_address)
        return await self._fetch_result(params)

    async def get_token_circulation_supply(self, contract_address: str) -> str:
        validate_address(contract_address)
        params = self.create_params("stats", "tokenCsupply", contractaddress=contract_address)
        return await self._fetch_result(params)

    async def get_token_holders(self, contract_address: str, page: int = 1, offset: int = 10) -> list[dict[str, Any]]:
        validate_address(contract_address)
        params = self.create_params(
            "token",
            "tokenholderlist",
            contractaddress=contract_address,
            page=page,
            offset=offset,
        )
        return await self._fetch_result(params)

    async def get_token_info(self, contract_address: str) -> dict[str, Any] | None:
        """Project information for a token; the API wraps it in a one-item list."""
        validate_address(contract_address)
        params = self.create_params("token", "tokeninfo", contractaddress=contract_address)
        result = await self._fetch_result(params)
        if isinstance(result, list):
            return result[0] if result else None
        return result
