"""Response body classification.

The service answers classic calls with an envelope
``{"status": "0"|"1", "message": str, "result": ...}`` and proxy calls with
a raw JSON-RPC object. A body is treated as an envelope only if it validates
as one; anything else passes through untouched.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

STATUS_OK = "1"
STATUS_ERROR = "0"
NOTOK_PREFIX = "NOTOK"


class Envelope(BaseModel):
    """Standard response wrapper used by non-proxy endpoints."""

    model_config = ConfigDict(extra="allow")

    status: str
    message: str
    result: Any

    @property
    def is_notok(self) -> bool:
        return self.status == STATUS_ERROR and self.message.startswith(NOTOK_PREFIX)


def parse_envelope(body: Any) -> Envelope | None:
    """Return the body as an :class:`Envelope`, or None for any other shape."""
    if not isinstance(body, dict):
        return None
    try:
        return Envelope.model_validate(body)
    except PydanticValidationError:
        return None


def remote_error(body: Any) -> tuple[str, str] | None:
    """Return ``(code, message)`` when the body reports a NOTOK failure."""
    envelope = parse_envelope(body)
    if envelope is None or not envelope.is_notok:
        return None
    code = envelope.result if isinstance(envelope.result, str) else str(envelope.result)
    logger.debug("NOTOK envelope: %s (%s)", envelope.message, code)
    return code, envelope.message
