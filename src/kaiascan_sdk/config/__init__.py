"""Configuration management for kaiascan_sdk package."""

from .settings import (
    APISettings,
    APIUrls,
    ChainIds,
    ClientConfig,
    DEFAULT_HEADERS,
    Network,
    build_headers,
)

__all__ = [
    "APISettings",
    "APIUrls",
    "ChainIds",
    "ClientConfig",
    "DEFAULT_HEADERS",
    "Network",
    "build_headers",
]
