"""Proxy module: Geth/Parity JSON-RPC methods relayed by Etherscan.

Responses are raw JSON-RPC objects (``{"jsonrpc", "id", "result"}``), not
status envelopes, so they never raise RemoteAPIError; the ``result`` member
is returned as-is (hex strings, or ``None`` for unknown blocks/txs).
"""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import (
    validate_address,
    validate_block_number,
    validate_hex_data,
    validate_positive_int,
    validate_required,
    validate_tx_hash,
)


class ProxyModule(BaseModule):
    async def get_block_number(self) -> str:
        """Most recent block number, hex-encoded."""
        params = self.create_params("proxy", "eth_blockNumber")
        return await self._fetch_result(params)

    async def get_block_by_number(self, tag: int | str, full_transactions: bool = True) -> dict[str, Any] | None:
        validate_required({"tag": tag, "boolean": full_transactions}, ["tag", "boolean"])
        if isinstance(tag, int) and not isinstance(tag, bool):
            validate_block_number(tag)
            tag = hex(tag)

        params = self.create_params("proxy", "eth_getBlockByNumber", tag=tag, boolean=full_transactions)
        return await self._fetch_result(params)

    async def get_transaction_by_hash(self, txhash: str) -> dict[str, Any] | None:
        validate_tx_hash(txhash)
        params = self.create_params("proxy", "eth_getTransactionByHash", txhash=txhash)
        return await self._fetch_result(params)

    async def get_transaction_count(self, address: str, tag: str = "latest") -> str:
        """Nonce of ``address`` at ``tag``, hex-encoded."""
        validate_address(address)
        params = self.create_params("proxy", "eth_getTransactionCount", address=address, tag=tag)
        return await self._fetch_result(params)

    async def send_raw_transaction(self, hex_data: str) -> str:
        validate_hex_data(hex_data, name="hex")
        params = self.create_params("proxy", "eth_sendRawTransaction", hex=hex_data)
        return await self._fetch_result(params)

    async def call(self, to: str, data: str, tag: str = "latest") -> str:
        validate_address(to)
        validate_hex_data(data)
        params = self.create_params("proxy", "eth_call", to=to, data=data, tag=tag)
        return await self._fetch_result(params)

    async def get_code(self, address: str, tag: str = "latest") -> str:
        validate_address(address)
        params = self.create_params("proxy", "eth_getCode", address=address, tag=tag)
        return await self._fetch_result(params)

    async def get_storage_at(self, address: str, position: int, tag: str = "latest") -> str:
        validate_address(address)
        validate_positive_int(position, "Position", allow_zero=True)
        params = self.create_params(
            "proxy",
            "eth_getStorageAt",
            address=address,
            position=hex(position),
            tag=tag,
        )
        return await self._fetch_result(params)

    async def get_gas_price(self) -> str:
        """Current gas price in wei, hex-encoded."""
        params = self.create_params("proxy", "eth_gasPrice")
        return await self._fetch_result(params)

    async def estimate_gas(
        self,
        to: str | None = None,
        value: str | None = None,
        data: str | None = None,
        from_address: str | None = None,
        gas: str | None = None,
        gas_price: str | None = None,
    ) -> str:
        if to:
            validate_address(to)
        if from_address:
            validate_address(from_address)
        if data is not None:
            validate_hex_data(data)

        params = self.create_params(
            "proxy",
            "eth_estimateGas",
            to=to,
            value=value,
            data=data,
            gas=gas,
            gasPrice=gas_price,
        )
        # "from" is a keyword, so it cannot go through create_params kwargs
        params["from"] = from_address
        return await self._fetch_result(params)
