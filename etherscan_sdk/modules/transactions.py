"""Transactions module: execution and receipt status checks."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import validate_tx_hash


class TransactionsModule(BaseModule):
    async def get_status(self, txhash: str) -> dict[str, Any]:
        """Contract execution status: ``{"isError": "0"|"1", "errDescription": str}``."""
        validate_tx_hash(txhash)
        params = self.create_params("transaction", "getstatus", txhash=txhash)
        return await self._fetch_result(params)

    async def get_receipt_status(self, txhash: str) -> dict[str, Any]:
        """Receipt status (post-Byzantium): ``{"status": "0"|"1"}``."""
        validate_tx_hash(txhash)
        params = self.create_params("transaction", "gettxreceiptstatus", txhash=txhash)
        return await self._fetch_result(params)
