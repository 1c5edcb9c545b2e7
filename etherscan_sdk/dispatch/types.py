"""Core types and DTOs for the request dispatch layer."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from etherscan_sdk.exceptions import (
    RemoteAPIError,
    TransportError,
    TransportTimeoutError,
)

DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_REQUESTS_PER_SECOND = 5


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class CallState(str, Enum):
    """Lifecycle of a single dispatched call."""

    QUEUED = "queued"
    ADMITTED = "admitted"
    IN_FLIGHT = "in_flight"
    SUCCESS = "success"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"
    REMOTE_API_ERROR = "remote_api_error"


TERMINAL_STATES = frozenset(
    {
        CallState.SUCCESS,
        CallState.TIMEOUT,
        CallState.TRANSPORT_ERROR,
        CallState.REMOTE_API_ERROR,
    }
)


# ---------------------------------------------------------------------------
# Dispatcher config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DispatcherConfig:
    """Connection and admission settings for one dispatcher.

    Frozen: reconfiguration swaps the whole object, so a call keeps the
    snapshot it captured when it was admitted.
    """

    base_url: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    rate_limit_enabled: bool = True
    max_requests_per_second: int = DEFAULT_MAX_REQUESTS_PER_SECOND
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


# ---------------------------------------------------------------------------
# Outbound request (transport input)
# ---------------------------------------------------------------------------


@dataclass
class OutboundRequest:
    """A single HTTP call, fully built and ready to send."""

    url: str
    method: HttpMethod = HttpMethod.GET
    json_body: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex[:16])
    state: CallState = CallState.QUEUED


# ---------------------------------------------------------------------------
# Dispatch result
# ---------------------------------------------------------------------------


@dataclass
class DispatchResult:
    """Terminal outcome of a dispatched call.

    Exactly one of the terminal states is set. ``unwrap()`` turns the
    failure states into their exception classes so callers that prefer
    exceptions never have to inspect the status themselves.
    """

    request_id: str = ""
    method: HttpMethod = HttpMethod.GET
    status: CallState = CallState.SUCCESS

    # Parsed body on success (envelope dict, JSON-RPC dict, or any JSON value)
    value: Any = None

    # Error details (if status != SUCCESS)
    error_code: str = ""  # envelope "result" for remote API errors
    error_message: str = ""
    http_status: int = 0
    http_reason: str = ""

    # Performance
    latency_ms: int = 0
    queued_ms: int = 0

    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: datetime | None = None

    timeout_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.status == CallState.SUCCESS

    def unwrap(self) -> Any:
        """Return the parsed body, or raise the error matching the status."""
        if self.status == CallState.SUCCESS:
            return self.value
        if self.status == CallState.REMOTE_API_ERROR:
            raise RemoteAPIError(self.error_code, self.error_message)
        if self.status == CallState.TIMEOUT:
            raise TransportTimeoutError(self.timeout_ms)
        raise TransportError(self.error_message, status_code=self.http_status, reason=self.http_reason)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict for logging."""
        return {
            "request_id": self.request_id,
            "method": self.method.value,
            "status": self.status.value,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "http_status": self.http_status,
            "latency_ms": self.latency_ms,
            "queued_ms": self.queued_ms,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
