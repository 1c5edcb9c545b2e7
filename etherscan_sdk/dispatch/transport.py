"""HTTP transport — executes one OutboundRequest and classifies the outcome.

Classification order:
  1. Timeout (wait_for expiry or httpx timeout)       -> TIMEOUT
  2. Non-2xx HTTP status                               -> TRANSPORT_ERROR
  3. Body is not valid JSON                            -> TRANSPORT_ERROR
  4. Envelope with status "0" and a NOTOK message      -> REMOTE_API_ERROR
  5. Anything else                                     -> SUCCESS (body as-is)
Connection failures and any other error are TRANSPORT_ERROR.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone

import httpx

from etherscan_sdk.core.logging import redact_url
from etherscan_sdk.dispatch.envelope import remote_error
from etherscan_sdk.dispatch.types import (
    CallState,
    DispatcherConfig,
    DispatchResult,
    HttpMethod,
    OutboundRequest,
)
from etherscan_sdk.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpTransport:
    """Sends requests over a shared ``httpx.AsyncClient``."""

    def __init__(self, client: httpx.AsyncClient | None = None):
        self._client = client
        self._owns_client = client is None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def client(self) -> httpx.AsyncClient:
        if self._closed:
            raise TransportError("Dispatcher is closed")
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def aclose(self) -> None:
        self._closed = True
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def execute(self, request: OutboundRequest, config: DispatcherConfig) -> DispatchResult:
        """Run the HTTP exchange under the configured timeout. Never raises."""
        result = DispatchResult(
            request_id=request.request_id,
            method=request.method,
            timeout_ms=config.timeout_ms,
        )
        start = time.monotonic()
        request.state = CallState.IN_FLIGHT

        try:
            resp = await asyncio.wait_for(
                self._send(request, config),
                timeout=config.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            result.status = CallState.TIMEOUT
            result.error_message = f"Request timed out after {config.timeout_ms}ms"
        except Exception as e:
            result.status = CallState.TRANSPORT_ERROR
            result.error_message = f"Request failed: {e}"
        else:
            self._classify(resp, result)

        result.latency_ms = int((time.monotonic() - start) * 1000)
        result.completed_at = datetime.now(timezone.utc)
        request.state = result.status

        if result.ok:
            logger.debug(
                "%s %s -> ok in %dms",
                request.method.value,
                redact_url(request.url),
                result.latency_ms,
            )
        else:
            logger.warning(
                "%s %s -> %s: %s",
                request.method.value,
                redact_url(request.url),
                result.status.value,
                result.error_message,
                extra={"request_id": request.request_id, "http_status": result.http_status or None},
            )
        return result

    async def _send(self, request: OutboundRequest, config: DispatcherConfig) -> httpx.Response:
        headers = {**config.headers, **request.headers}

        if request.method == HttpMethod.POST:
            return await self.client.post(
                request.url,
                json=request.json_body or {},
                headers={**headers, "Content-Type": "application/json"},
                timeout=config.timeout_seconds,
            )
        return await self.client.get(request.url, headers=headers, timeout=config.timeout_seconds)

    @staticmethod
    def _classify(resp: httpx.Response, result: DispatchResult) -> None:
        result.http_status = resp.status_code

        if not resp.is_success:
            result.status = CallState.TRANSPORT_ERROR
            result.http_reason = resp.reason_phrase
            result.error_message = f"Request failed with status {resp.status_code}: {resp.reason_phrase}"
            return

        try:
            body = resp.json()
        except ValueError as e:
            result.status = CallState.TRANSPORT_ERROR
            result.error_message = f"Request failed: invalid JSON response: {e}"
            return

        notok = remote_error(body)
        if notok is not None:
            result.status = CallState.REMOTE_API_ERROR
            result.error_code, result.error_message = notok
            return

        result.status = CallState.SUCCESS
        result.value = body
