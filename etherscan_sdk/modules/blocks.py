"""Blocks module: rewards, countdowns and timestamp lookups."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import (
    validate_block_number,
    validate_choice,
    validate_positive_int,
)

CLOSEST_CHOICES = ("before", "after")


class BlocksModule(BaseModule):
    async def get_block_reward(self, block_number: int) -> dict[str, Any]:
        validate_block_number(block_number)
        params = self.create_params("block", "getblockreward", blockno=block_number)
        return await self._fetch_result(params)

    async def get_block_countdown(self, block_number: int) -> dict[str, Any]:
        """Estimated time remaining until ``block_number`` is mined."""
        validate_block_number(block_number)
        params = self.create_params("block", "getblockcountdown", blockno=block_number)
        return await self._fetch_result(params)

    async def get_block_number_by_timestamp(self, timestamp: int, closest: str = "before") -> str:
        validate_positive_int(timestamp, "Timestamp", allow_zero=True)
        validate_choice(closest, CLOSEST_CHOICES, "Closest parameter")
        params = self.create_params("block", "getblocknobytime", timestamp=timestamp, closest=closest)
        return await self._fetch_result(params)
