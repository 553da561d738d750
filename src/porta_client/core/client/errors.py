"""
Structured error system for the Porta Client.

Every failure raised by the client is a ThreeScaleError tagged with an
ErrorKind, so callers can branch on ``error.kind`` instead of inspecting
concrete exception types.
"""

from enum import Enum
from typing import Any, Dict, Optional
import json


class ErrorKind(Enum):
    """Categories of client failures."""
    API = "api"                      # Non-2xx response from the admin portal
    TRANSPORT = "transport"          # Connection, DNS, TLS or request construction failure
    DECODE = "decode"                # 2xx response whose body does not match the schema
    CONFIGURATION = "configuration"  # Invalid client configuration


class ThreeScaleError(Exception):
    """Base exception for all Porta Client errors."""

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__
        }

    def __str__(self) -> str:
        return self.message


class ApiError(ThreeScaleError):
    """
    Error returned by the admin portal with a non-2xx status.

    The message format is fixed and kept byte-compatible with other 3scale
    clients:  ``error calling 3scale system - reason: <body> - code: <status>``
    """

    kind = ErrorKind.API

    def __init__(self, code: int, body: str):
        self._code = code
        self._body = body
        super().__init__(
            f"error calling 3scale system - reason: {body} - code: {code}",
            details={"code": code, "reason": _extract_reason(body)}
        )

    @property
    def code(self) -> int:
        """HTTP status code of the failed call."""
        return self._code

    @property
    def body(self) -> str:
        """Raw error body as returned by the server."""
        return self._body

    @property
    def reason(self) -> str:
        """Message of the ``{"error": ...}`` envelope, or the raw body."""
        return self.details["reason"]


# The name used by the other 3scale client libraries.
ApiErr = ApiError


class TransportError(ThreeScaleError):
    """Error raised when the request could not be sent or answered."""

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str = "Transport error",
        url: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if url:
            self.details["url"] = url


class DecodeError(ThreeScaleError):
    """Error raised when a successful response body cannot be decoded."""

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str = "Could not decode response body",
        body: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.body = body
        if body is not None:
            self.details["body"] = body[:500]


class ConfigurationError(ThreeScaleError):
    """Error related to client configuration."""

    kind = ErrorKind.CONFIGURATION

    def __init__(
        self,
        message: str = "Configuration error",
        config_field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if config_field:
            self.details["config_field"] = config_field


def _extract_reason(body: str) -> str:
    """Pull the message out of a ``{"error": "..."}`` envelope."""
    try:
        envelope = json.loads(body)
    except ValueError:
        return body

    if isinstance(envelope, dict) and isinstance(envelope.get("error"), str):
        return envelope["error"]
    return body
