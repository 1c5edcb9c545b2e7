"""Request Dispatcher — single entry point for outbound Etherscan calls.

  1. Builds the URL (query params with None values dropped) or JSON body
  2. Routes through the Admission Queue when rate limiting is enabled
  3. Executes via the HTTP transport under the configured timeout
  4. Classifies the response into a DispatchResult
  5. ``get``/``post`` unwrap the result into a value or a typed exception

Usage:
    dispatcher = Dispatcher(DispatcherConfig(base_url="https://api.etherscan.io/v2/api?chainid=1"))

    envelope = await dispatcher.get("", {"module": "account", "action": "balance", ...})

    # Or keep the outcome as data
    result = await dispatcher.send(OutboundRequest(url=...))
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import replace
from typing import Any
from urllib.parse import quote

import httpx

from etherscan_sdk.core.metrics import observe_request
from etherscan_sdk.dispatch.admission import AdmissionQueue
from etherscan_sdk.dispatch.transport import HttpTransport
from etherscan_sdk.dispatch.types import (
    DEFAULT_MAX_REQUESTS_PER_SECOND,
    CallState,
    DispatcherConfig,
    DispatchResult,
    HttpMethod,
    OutboundRequest,
)
from etherscan_sdk.exceptions import TransportError, ValidationError

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides the unreserved set
_QUERY_SAFE = "!~*'()"


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, Any]) -> str:
    """Percent-encode ``params``, skipping keys whose value is None.

    Other falsy values (``""``, ``0``, ``False``) are real values and are sent.
    """
    return "&".join(
        f"{quote(str(key), safe=_QUERY_SAFE)}={quote(_stringify(value), safe=_QUERY_SAFE)}"
        for key, value in params.items()
        if value is not None
    )


class Dispatcher:
    """Owns the outbound request lifecycle for one base endpoint.

    Integrates:
      - AdmissionQueue: FIFO admission, max N calls per one-second window
      - HttpTransport: timeout enforcement and response classification
    """

    def __init__(
        self,
        config: DispatcherConfig,
        http_client: httpx.AsyncClient | None = None,
        transport: HttpTransport | None = None,
        admission: AdmissionQueue | None = None,
    ):
        """
        Args:
            config: Base URL, timeout and rate-limit settings
            http_client: Optional pre-built httpx client (closed by its owner)
            transport: Optional transport to share with another dispatcher
            admission: Optional admission queue to share; it takes this
                config's rate limit
        """
        _check_limit(config.max_requests_per_second)
        if config.timeout_ms <= 0:
            raise ValidationError("Timeout must be a positive integer")

        self._config = config
        self.transport = transport or HttpTransport(http_client)
        if admission is None:
            admission = AdmissionQueue(
                enabled=config.rate_limit_enabled,
                max_per_second=config.max_requests_per_second,
            )
        else:
            admission.configure(config.rate_limit_enabled, config.max_requests_per_second)
        self.admission = admission
        self._closed = False

    @property
    def config(self) -> DispatcherConfig:
        return self._config

    def set_rate_limit(
        self,
        enabled: bool,
        max_requests_per_second: int = DEFAULT_MAX_REQUESTS_PER_SECOND,
    ) -> None:
        """Reconfigure admission control for calls admitted after this point."""
        _check_limit(max_requests_per_second)
        self._config = replace(
            self._config,
            rate_limit_enabled=enabled,
            max_requests_per_second=max_requests_per_second,
        )
        self.admission.configure(enabled, max_requests_per_second)

    def build_url(self, path: str = "", params: Mapping[str, Any] | None = None) -> str:
        url = f"{self._config.base_url}{path}"
        query = build_query(params or {})
        if not query:
            return url
        return f"{url}{'&' if '?' in url else '?'}{query}"

    async def get(self, path: str = "", params: Mapping[str, Any] | None = None) -> Any:
        """Issue a GET and return the parsed body, raising on any failure."""
        request = OutboundRequest(url=self.build_url(path, params), method=HttpMethod.GET)
        result = await self.send(request)
        return result.unwrap()

    async def post(self, path: str = "", body: Mapping[str, Any] | None = None) -> Any:
        """Issue a JSON POST and return the parsed body, raising on any failure."""
        request = OutboundRequest(
            url=f"{self._config.base_url}{path}",
            method=HttpMethod.POST,
            json_body=dict(body or {}),
        )
        result = await self.send(request)
        return result.unwrap()

    async def send(self, request: OutboundRequest) -> DispatchResult:
        """Run one request through admission and transport.

        I/O failures come back as a DispatchResult status, never as
        exceptions. A closed dispatcher raises ``TransportError``.
        """
        if self._closed or self.transport.closed:
            raise TransportError("Dispatcher is closed")

        queued_at = time.monotonic()
        if not self.admission.enabled:
            return await self._execute(request, queued_at)
        return await self.admission.submit(lambda: self._execute(request, queued_at))

    async def _execute(self, request: OutboundRequest, queued_at: float) -> DispatchResult:
        # Snapshot taken at admission; later reconfiguration does not reach it
        config = self._config
        request.state = CallState.ADMITTED
        queued_ms = int((time.monotonic() - queued_at) * 1000)

        result = await self.transport.execute(request, config)
        result.queued_ms = queued_ms
        observe_request(request.method.value, result.status.value, result.latency_ms / 1000)
        return result

    def get_stats(self) -> dict:
        return {
            "base_url": self._config.base_url,
            "timeout_ms": self._config.timeout_ms,
            "admission": self.admission.get_stats(),
        }

    @property
    def closed(self) -> bool:
        return self._closed

    async def aclose(self) -> None:
        self._closed = True
        await self.admission.close()
        await self.transport.aclose()
        logger.debug("Dispatcher for %s closed", self._config.base_url)

    async def __aenter__(self) -> Dispatcher:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def _check_limit(max_requests_per_second: int) -> None:
    if (
        isinstance(max_requests_per_second, bool)
        or not isinstance(max_requests_per_second, int)
        or max_requests_per_second <= 0
    ):
        raise ValidationError("max_requests_per_second must be a positive integer")
