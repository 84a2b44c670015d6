"""dlt sources for Kaiascan data."""

from .kaiascan import KaiascanSource

__all__ = [
    "KaiascanSource",
]
