"""Request dispatch layer.

Turns every logical API call into exactly one outbound HTTP request:
  - Admission Queue (FIFO, max N calls per one-second window)
  - HTTP transport with timeout enforcement
  - Response classification (success / remote API error / transport error)
  - Explicit DispatchResult, unwrapped into typed exceptions on demand
"""

from etherscan_sdk.dispatch.dispatcher import Dispatcher, build_query
from etherscan_sdk.dispatch.types import (
    CallState,
    DispatcherConfig,
    DispatchResult,
    HttpMethod,
    OutboundRequest,
)

__all__ = [
    "CallState",
    "Dispatcher",
    "DispatcherConfig",
    "DispatchResult",
    "HttpMethod",
    "OutboundRequest",
    "build_query",
]
