"""Custom exceptions for kaiascan_sdk package."""

from typing import Any, Dict, Optional


class KaiascanError(Exception):
    """Base exception for kaiascan_sdk package."""

    pass


class ConfigurationError(KaiascanError):
    """Exception raised for configuration-related errors."""

    pass


class ValidationError(KaiascanError):
    """Raised when a caller-supplied argument fails a precondition.

    Always raised before any request is sent.
    """

    def __init__(self, field: str, value: Any, reason: str = "invalid value"):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid '{field}' ({value!r}): {reason}")


class TransportError(KaiascanError):
    """Raised when the HTTP status is outside 2xx."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class TransportConnectionError(TransportError):
    """Raised on connection, DNS or timeout failures (no status code)."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message, status_code=None, url=url)


class DecodingError(KaiascanError):
    """Exception raised when a response body is not a valid envelope."""

    pass


class APIError(KaiascanError):
    """Raised when the envelope was parsed but its code is not success."""

    def __init__(self, code: int, msg: str, raw_envelope: Optional[Dict[str, Any]] = None):
        self.code = code
        self.msg = msg
        self.raw_envelope = raw_envelope
        super().__init__(f"API error [{code}]: {msg}")
