"""Core request/response infrastructure for kaiascan_sdk package."""

from .exceptions import (
    APIError,
    ConfigurationError,
    DecodingError,
    KaiascanError,
    TransportConnectionError,
    TransportError,
    ValidationError,
)
from .endpoint import EndpointSpec, QueryParam, endpoint, optional, required
from .envelope import ApiEnvelope, EnvelopeDecoder
from .query import QueryBuilder
from .transport import RateLimitedSession, RequestsTransport, Transport, TransportResponse
from .base import ApiClient

__all__ = [
    "ApiClient",
    "ApiEnvelope",
    "EnvelopeDecoder",
    "EndpointSpec",
    "QueryParam",
    "QueryBuilder",
    "RateLimitedSession",
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "endpoint",
    "optional",
    "required",
    "APIError",
    "ConfigurationError",
    "DecodingError",
    "KaiascanError",
    "TransportConnectionError",
    "TransportError",
    "ValidationError",
]
