"""Accounts module: balances, transaction lists and transfer events."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import (
    validate_address,
    validate_addresses,
    validate_block_number,
    validate_block_range,
    validate_choice,
    validate_sort,
    validate_tx_hash,
)

MAX_BALANCE_MULTI_ADDRESSES = 20
MINED_BLOCK_TYPES = ("blocks", "uncles")


class AccountsModule(BaseModule):
    """Endpoints under ``module=account``."""

    async def get_balance(self, address: str, tag: str = "latest") -> str:
        """Ether balance of a single address, in wei."""
        validate_address(address)
        params = self.create_params("account", "balance", address=address, tag=tag or "latest")
        return await self._fetch_result(params)

    async def get_balance_multi(self, addresses: list[str], tag: str = "latest") -> list[dict[str, Any]]:
        """Ether balances for up to 20 addresses in one call."""
        validate_addresses(addresses, limit=MAX_BALANCE_MULTI_ADDRESSES)
        params = self.create_params(
            "account",
            "balancemulti",
            address=",".join(addresses),
            tag=tag or "latest",
        )
        return await self._fetch_result(params)

    async def _transfers(
        self,
        action: str,
        address: str,
        contract_address: str | None,
        start_block: int | None,
        end_block: int | None,
        page: int | None,
        offset: int | None,
        sort: str | None,
    ) -> list[dict[str, Any]]:
        validate_address(address)
        if contract_address:
            validate_address(contract_address)
        validate_block_range(start_block, end_block)
        if sort is not None:
            validate_sort(sort)

        params = self.create_params(
            "account",
            action,
            address=address,
            contractaddress=contract_address,
            startblock=start_block,
            endblock=end_block,
            page=page,
            offset=offset,
            sort=sort,
        )
        return await self._fetch_result(params)

    async def get_transactions(
        self,
        address: str,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        """'Normal' transactions sent from or to ``address``."""
        return await self._transfers("txlist", address, None, start_block, end_block, page, offset, sort)

    async def get_internal_transactions(
        self,
        address: str,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        """'Internal' (contract-initiated) transactions for ``address``."""
        return await self._transfers("txlistinternal", address, None, start_block, end_block, page, offset, sort)

    async def get_internal_transactions_by_hash(self, txhash: str) -> list[dict[str, Any]]:
        validate_tx_hash(txhash)
        params = self.create_params("account", "txlistinternal", txhash=txhash)
        return await self._fetch_result(params)

    async def get_internal_transactions_by_block_range(
        self,
        start_block: int,
        end_block: int,
        page: int = 1,
        offset: int = 10,
        sort: str = "asc",
    ) -> list[dict[str, Any]]:
        validate_block_number(start_block)
        validate_block_number(end_block)
        validate_block_range(start_block, end_block)
        validate_sort(sort)

        params = self.create_params(
            "account",
            "txlistinternal",
            startblock=start_block,
            endblock=end_block,
            page=page,
            offset=offset,
            sort=sort,
        )
        return await self._fetch_result(params)

    async def get_token_transfers(
        self,
        address: str,
        contract_address: str | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        """ERC-20 transfer events, optionally filtered to one token contract."""
        return await self._transfers(
            "tokentx", address, contract_address, start_block, end_block, page, offset, sort
        )

    async def get_nft_transfers(
        self,
        address: str,
        contract_address: str | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        """ERC-721 transfer events."""
        return await self._transfers(
            "tokennfttx", address, contract_address, start_block, end_block, page, offset, sort
        )

    async def get_erc1155_transfers(
        self,
        address: str,
        contract_address: str | None = None,
        start_block: int | None = None,
        end_block: int | None = None,
        page: int | None = None,
        offset: int | None = None,
        sort: str | None = None,
    ) -> list[dict[str, Any]]:
        """ERC-1155 transfer events."""
        return await self._transfers(
            "token1155tx", address, contract_address, start_block, end_block, page, offset, sort
        )

    async def get_mined_blocks(
        self,
        address: str,
        block_type: str = "blocks",
        page: int = 1,
        offset: int = 10,
    ) -> list[dict[str, Any]]:
        """Blocks (or uncles) validated by ``address``."""
        validate_address(address)
        validate_choice(block_type, MINED_BLOCK_TYPES, "Block type")
        params = self.create_params(
            "account",
            "getminedblocks",
            address=address,
            blocktype=block_type,
            page=page,
            offset=offset,
        )
        return await self._fetch_result(params)
