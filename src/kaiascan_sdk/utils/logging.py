"""Logging setup for scripts using kaiascan_sdk."""

import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, fmt: Optional[str] = None) -> None:
    """Configure root logging; quiets urllib3 below WARNING."""
    logging.basicConfig(level=level, format=fmt or DEFAULT_FORMAT)
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
