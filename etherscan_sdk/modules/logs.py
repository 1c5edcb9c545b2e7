"""Logs module: event log queries with topic filtering."""

from __future__ import annotations

from typing import Any

from etherscan_sdk.exceptions import ValidationError
from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.validators import (
    TOPIC_OPERATORS,
    validate_address,
    validate_block_range,
    validate_choice,
)

MAX_TOPICS = 3


class LogsModule(BaseModule):
    async def get_logs(
        self,
        address: str,
        start_block: int | None = None,
        end_block: int | None = None,
        topics: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Event logs emitted by ``address``; topics are AND-combined."""
        return await self.get_logs_with_topic_operators(address, start_block, end_block, topics)

    async def get_logs_with_topic_operators(
        self,
        address: str,
        start_block: int | None = None,
        end_block: int | None = None,
        topics: list[str] | None = None,
        topic0_1_opr: str = "and",
        topic0_2_opr: str = "and",
        topic1_2_opr: str = "and",
    ) -> list[dict[str, Any]]:
        validate_address(address)
        validate_block_range(start_block, end_block)

        topics = list(topics or [])
        if len(topics) > MAX_TOPICS:
            raise ValidationError(f"Maximum of {MAX_TOPICS} topics supported")
        for opr in (topic0_1_opr, topic0_2_opr, topic1_2_opr):
            validate_choice(opr, TOPIC_OPERATORS, "Topic operator")

        topics += [None] * (MAX_TOPICS - len(topics))
        params = self.create_params(
            "logs",
            "getLogs",
            address=address,
            fromBlock=start_block,
            toBlock=end_block,
            topic0=topics[0],
            topic1=topics[1],
            topic2=topics[2],
            topic0_1_opr=topic0_1_opr,
            topic0_2_opr=topic0_2_opr,
            topic1_2_opr=topic1_2_opr,
        )
        return await self._fetch_result(params)
