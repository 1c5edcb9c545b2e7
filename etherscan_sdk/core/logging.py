"""Logging helpers for the client.

The library only creates module loggers under ``etherscan_sdk``; nothing is
printed unless the embedding application configures logging, either on its
own or through :func:`setup_logging`.
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import IO

from etherscan_sdk.core.config import settings

PACKAGE_LOGGER = "etherscan_sdk"

_APIKEY_PATTERN = re.compile(r"(apikey=)[^&\s]+", re.IGNORECASE)

# LogRecord extras copied into JSON output when present
_EXTRA_FIELDS = ("request_id", "network", "http_status")


def redact_url(url: str) -> str:
    """Mask the API key in a request URL before it reaches a log line."""
    return _APIKEY_PATTERN.sub(r"\1***", url)


class JSONFormatter(logging.Formatter):
    """One JSON object per record, API keys masked."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_url(record.getMessage()),
        }
        for name in _EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = value
        if record.exc_info and record.exc_info[1]:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``etherscan_sdk`` logger.

    Defaults come from ``ETHERSCAN_LOG_LEVEL`` / ``ETHERSCAN_LOG_JSON``.
    Calling it again replaces the handler instead of stacking another one.
    """
    level_name = level or settings.log_level
    use_json = settings.log_json if json_output is None else json_output
    resolved = getattr(logging, level_name.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolved)
    for existing in package_logger.handlers[:]:
        package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    if use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    package_logger.addHandler(handler)

    # Request lines are logged here already, with the key redacted
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return package_logger
