"""Kaiascan SDK - client for the Kaiascan explorer API."""

from .core import (
    APIError,
    ApiClient,
    ConfigurationError,
    DecodingError,
    EndpointSpec,
    KaiascanError,
    TransportConnectionError,
    TransportError,
    ValidationError,
)
from .config import APISettings, ClientConfig, Network
from .sdk import KaiascanSDK
from .source import KaiascanSource

__version__ = "0.1.0"

__all__ = [
    # Client
    "KaiascanSDK",
    "ApiClient",
    "EndpointSpec",
    # Configuration
    "APISettings",
    "ClientConfig",
    "Network",
    # dlt
    "KaiascanSource",
    # Errors
    "KaiascanError",
    "ValidationError",
    "TransportError",
    "TransportConnectionError",
    "DecodingError",
    "APIError",
    "ConfigurationError",
]
