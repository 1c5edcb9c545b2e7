"""Exception hierarchy surfaced to callers of the client.

Three kinds are distinguishable by class, never by message text:

  - ValidationError: caller-side contract violation, raised before any I/O
  - RemoteAPIError: the service answered with a NOTOK envelope
  - TransportError: the HTTP exchange itself failed (TransportTimeoutError
    for the timeout case)
"""

from __future__ import annotations


class EtherscanError(Exception):
    """Base class for every error raised by the client."""


class ValidationError(EtherscanError):
    """Raised when call arguments fail client-side validation."""


class RemoteAPIError(EtherscanError):
    """Raised when the service reports a semantic failure (status "0", NOTOK)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class TransportError(EtherscanError):
    """Raised when the HTTP exchange could not be completed as intended."""

    def __init__(self, message: str, status_code: int = 0, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class TransportTimeoutError(TransportError):
    """Raised when a call did not settle within the configured timeout."""

    def __init__(self, timeout_ms: int):
        super().__init__(f"Request timed out after {timeout_ms}ms")
        self.timeout_ms = timeout_ms


# Aliases matching the names exposed on the client class
APIError = RemoteAPIError
NetworkError = TransportError
