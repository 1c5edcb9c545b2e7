"""Base class for the per-domain endpoint modules."""

from __future__ import annotations

import logging
from typing import Any

from etherscan_sdk.dispatch.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class BaseModule:
    """Shared plumbing: parameter merging and envelope unwrapping.

    Subclasses validate their inputs, build a parameter map with
    :meth:`create_params` and hand it to :meth:`_fetch_result`. Dispatcher
    failures are never caught here.
    """

    def __init__(self, dispatcher: Dispatcher, api_key: str):
        self.dispatcher = dispatcher
        self.api_key = api_key

    def create_params(self, module: str, action: str, **params: Any) -> dict[str, Any]:
        """Merge ``module``, ``action`` and the API key into the call's params."""
        return {"module": module, "action": action, "apikey": self.api_key, **params}

    async def _fetch(self, params: dict[str, Any]) -> Any:
        logger.debug("Fetching %s/%s", params.get("module"), params.get("action"))
        return await self.dispatcher.get("", params)

    async def _fetch_result(self, params: dict[str, Any]) -> Any:
        """Dispatch and return the ``result`` field of the response body."""
        body = await self._fetch(params)
        if isinstance(body, dict):
            return body.get("result")
        return body
