"""Admission Queue — FIFO rate limiting over fixed one-second windows.

Every call submitted while rate limiting is enabled is appended to a single
pending queue and executed by one drain task, strictly in arrival order.
The drain task admits at most ``max_per_second`` calls per window; when the
window is full it sleeps for the rest of the window and starts a new one.

All state here is touched only by the drain task and by the window-reset
callback scheduled with ``loop.call_later``. Both run on the event loop
thread and never interleave mid-statement, so no lock is needed.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from etherscan_sdk.core.metrics import ADMISSION_WAIT
from etherscan_sdk.dispatch.types import DEFAULT_MAX_REQUESTS_PER_SECOND
from etherscan_sdk.exceptions import TransportError

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 1.0


@dataclass
class _PendingCall:
    """A deferred execution waiting for admission."""

    run: Callable[[], Awaitable[Any]]
    future: asyncio.Future
    enqueued_at: float  # loop.time()


class AdmissionQueue:
    """Single-owner admission queue shared by all callers of one dispatcher.

    Usage:
        queue = AdmissionQueue(max_per_second=5)

        # Runs `fetch()` once admitted, returns its result (or raises its error)
        result = await queue.submit(fetch)

        # Later calls pick up the new limit; in-flight ones are unaffected
        queue.configure(enabled=True, max_per_second=2)
    """

    def __init__(
        self,
        enabled: bool = True,
        max_per_second: int = DEFAULT_MAX_REQUESTS_PER_SECOND,
        window_seconds: float = WINDOW_SECONDS,
    ):
        self.enabled = enabled
        self.max_per_second = max_per_second
        self.window_seconds = window_seconds

        self._pending: deque[_PendingCall] = deque()
        self._requests_this_window = 0
        self._window_started_at: float | None = None
        self._reset_handle: asyncio.TimerHandle | None = None
        self._drain_task: asyncio.Task | None = None
        self._closed = False

    # -- configuration -----------------------------------------------------

    def configure(self, enabled: bool, max_per_second: int) -> None:
        """Apply new limits to every call admitted from now on."""
        self.enabled = enabled
        self.max_per_second = max_per_second
        logger.info(
            "Rate limit reconfigured: enabled=%s max_per_second=%d (pending=%d)",
            enabled,
            max_per_second,
            len(self._pending),
        )

    # -- public API ----------------------------------------------------------

    @property
    def requests_this_window(self) -> int:
        return self._requests_this_window

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def draining(self) -> bool:
        return self._drain_task is not None and not self._drain_task.done()

    @property
    def window_active(self) -> bool:
        return self._reset_handle is not None

    async def submit(self, run: Callable[[], Awaitable[Any]]) -> Any:
        """Queue ``run`` for admission and wait for its outcome."""
        if self._closed:
            raise TransportError("Dispatcher is closed")

        loop = asyncio.get_running_loop()
        future = loop.create_future()
        self._pending.append(_PendingCall(run=run, future=future, enqueued_at=loop.time()))

        if not self.draining:
            self._drain_task = loop.create_task(self._drain())

        return await future

    def get_stats(self) -> dict:
        """Snapshot of admission counters."""
        return {
            "enabled": self.enabled,
            "max_per_second": self.max_per_second,
            "requests_this_window": self._requests_this_window,
            "window_active": self.window_active,
            "pending": len(self._pending),
            "draining": self.draining,
        }

    async def close(self) -> None:
        """Stop draining and fail every call that has not settled yet.

        Queued calls and the call currently in flight all fail with
        ``TransportError("Dispatcher is closed")``.
        """
        self._closed = True
        self._cancel_reset()

        while self._pending:
            call = self._pending.popleft()
            if not call.future.done():
                call.future.set_exception(TransportError("Dispatcher is closed"))

        if self._drain_task is not None and not self._drain_task.done():
            self._drain_task.cancel()
            try:
                await self._drain_task
            except asyncio.CancelledError:
                pass
        self._drain_task = None

    # -- drain loop ----------------------------------------------------------

    async def _drain(self) -> None:
        loop = asyncio.get_running_loop()

        while self._pending:
            if self._pending[0].future.done():
                # Caller stopped waiting before admission
                self._pending.popleft()
                continue

            if self._requests_this_window >= self.max_per_second:
                wait = self._window_remaining(loop.time())
                logger.debug(
                    "Window full (%d/%d), waiting %.3fs",
                    self._requests_this_window,
                    self.max_per_second,
                    wait,
                )
                if wait > 0:
                    await asyncio.sleep(wait)
                self._start_new_window()
                # The head may have been cancelled while we slept
                continue

            call = self._pending.popleft()
            self._requests_this_window += 1
            if self._reset_handle is None:
                self._window_started_at = loop.time()
                self._reset_handle = loop.call_later(self.window_seconds, self._on_window_elapsed)

            ADMISSION_WAIT.observe(max(loop.time() - call.enqueued_at, 0.0))

            try:
                result = await call.run()
            except asyncio.CancelledError:
                # Drain cancelled by close() while this call was in flight
                if not call.future.done():
                    call.future.set_exception(TransportError("Dispatcher is closed"))
                raise
            except Exception as exc:
                if not call.future.done():
                    call.future.set_exception(exc)
            else:
                if not call.future.done():
                    call.future.set_result(result)

    def _window_remaining(self, now: float) -> float:
        if self._window_started_at is None:
            return 0.0
        remaining = (self._window_started_at + self.window_seconds) - now
        return min(max(remaining, 0.0), self.window_seconds)

    def _start_new_window(self) -> None:
        self._cancel_reset()
        self._requests_this_window = 0

    def _on_window_elapsed(self) -> None:
        self._requests_this_window = 0
        self._reset_handle = None
        self._window_started_at = None

    def _cancel_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
        self._reset_handle = None
        self._window_started_at = None
