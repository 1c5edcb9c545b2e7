"""Endpoint modules, one per API domain."""

from etherscan_sdk.modules.accounts import AccountsModule
from etherscan_sdk.modules.base import BaseModule
from etherscan_sdk.modules.blocks import BlocksModule
from etherscan_sdk.modules.contracts import ContractsModule
from etherscan_sdk.modules.gas import GasModule
from etherscan_sdk.modules.logs import LogsModule
from etherscan_sdk.modules.proxy import ProxyModule
from etherscan_sdk.modules.stats import StatsModule
from etherscan_sdk.modules.tokens import TokensModule
from etherscan_sdk.modules.transactions import TransactionsModule

__all__ = [
    "AccountsModule",
    "BaseModule",
    "BlocksModule",
    "ContractsModule",
    "GasModule",
    "LogsModule",
    "ProxyModule",
    "StatsModule",
    "TokensModule",
    "TransactionsModule",
]
