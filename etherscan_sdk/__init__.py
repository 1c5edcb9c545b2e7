"""Async Python client for the Etherscan API family."""

from etherscan_sdk.client import EtherscanClient
from etherscan_sdk.core.logging import setup_logging
from etherscan_sdk.exceptions import (
    EtherscanError,
    RemoteAPIError,
    TransportError,
    TransportTimeoutError,
    ValidationError,
)
from etherscan_sdk.networks import ApiVersion, Network

__version__ = "0.1.0"

__all__ = [
    "ApiVersion",
    "EtherscanClient",
    "EtherscanError",
    "Network",
    "RemoteAPIError",
    "TransportError",
    "TransportTimeoutError",
    "ValidationError",
    "setup_logging",
]
