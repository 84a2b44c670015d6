"""Centralized configuration management for kaiascan_sdk."""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from dotenv import load_dotenv

from ..core.exceptions import ConfigurationError

load_dotenv()


class APIUrls:
    """Kaiascan OAPI base URLs."""

    MAINNET = "https://mainnet-oapi.kaiascan.io/"
    TESTNET = "https://kairos-oapi.kaiascan.io/"


class ChainIds:
    MAINNET = "8217"
    TESTNET = "1001"


DEFAULT_HEADERS = {"Content-Type": "application/json"}


class Network(Enum):
    """Built-in network presets."""

    MAINNET = "mainnet"
    TESTNET = "testnet"

    @property
    def base_url(self) -> str:
        return APIUrls.MAINNET if self is Network.MAINNET else APIUrls.TESTNET

    @property
    def chain_id(self) -> str:
        return ChainIds.MAINNET if self is Network.MAINNET else ChainIds.TESTNET

    @classmethod
    def resolve(cls, value: Union["Network", str, int, bool]) -> "Network":
        """Resolve a network from a member, a name, a chain id or a testnet flag."""
        if isinstance(value, Network):
            return value
        if isinstance(value, bool):
            return cls.TESTNET if value else cls.MAINNET

        aliases = {
            "mainnet": cls.MAINNET,
            ChainIds.MAINNET: cls.MAINNET,
            "testnet": cls.TESTNET,
            "kairos": cls.TESTNET,
            ChainIds.TESTNET: cls.TESTNET,
        }
        key = str(value).strip().lower()
        if key not in aliases:
            available = ", ".join(sorted(aliases))
            raise ConfigurationError(f"Unknown network '{value}'. Available: {available}")
        return aliases[key]


NetworkLike = Union[Network, str, int, bool]


def build_headers(
    api_key: Optional[str] = None, headers: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Build the request header set.

    ``headers`` replaces the default set; ``Content-Type`` is always present and
    ``Authorization`` is added for ``api_key`` unless ``headers`` sets it.
    """
    result = dict(headers) if headers is not None else dict(DEFAULT_HEADERS)
    result.setdefault("Content-Type", DEFAULT_HEADERS["Content-Type"])
    if api_key:
        result.setdefault("Authorization", f"Bearer {api_key}")
    return result


@dataclass(frozen=True)
class ClientConfig:
    """Immutable per-client configuration snapshot."""

    base_url: str
    headers: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))
    chain_id: str = ChainIds.MAINNET
    network: Optional[Network] = Network.MAINNET

    def __post_init__(self):
        if not isinstance(self.base_url, str) or not self.base_url.strip():
            raise ConfigurationError(f"base_url must be a non-empty string, got {self.base_url!r}")

        base_url = self.base_url.strip()
        if not base_url.endswith("/"):
            base_url += "/"
        object.__setattr__(self, "base_url", base_url)
        headers = dict(self.headers)
        headers.setdefault("Content-Type", DEFAULT_HEADERS["Content-Type"])
        object.__setattr__(self, "headers", MappingProxyType(headers))
        object.__setattr__(self, "chain_id", str(self.chain_id))

    @classmethod
    def for_network(
        cls,
        network: NetworkLike = Network.MAINNET,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        network = Network.resolve(network)
        return cls(
            base_url=base_url or network.base_url,
            headers=build_headers(api_key, headers),
            chain_id=network.chain_id,
            network=network,
        )

    def with_base_url(self, base_url: str) -> "ClientConfig":
        return replace(self, base_url=base_url)

    def with_headers(self, headers: Mapping[str, str]) -> "ClientConfig":
        return replace(self, headers=build_headers(headers=headers))

    def with_header(self, key: str, value: str) -> "ClientConfig":
        return replace(self, headers={**self.headers, key: value})

    def with_network(self, network: NetworkLike) -> "ClientConfig":
        """Switch to a preset network, keeping the current headers."""
        network = Network.resolve(network)
        return replace(
            self, base_url=network.base_url, chain_id=network.chain_id, network=network
        )


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"Environment variable {name} must be a number, got {raw!r}")


@dataclass
class APISettings:
    """Environment-derived defaults for new clients."""

    api_key: Optional[str] = None
    network: Optional[str] = None
    timeout: Optional[float] = None
    rate_limit: Optional[float] = None  # requests per second, None = unthrottled

    def __post_init__(self):
        # Load from environment if not provided
        if self.api_key is None:
            self.api_key = os.getenv("KAIASCAN_API_KEY")
        if self.network is None:
            self.network = os.getenv("KAIASCAN_NETWORK", Network.MAINNET.value)
        if self.timeout is None:
            self.timeout = _env_float("KAIASCAN_TIMEOUT") or 30.0
        if self.rate_limit is None:
            self.rate_limit = _env_float("KAIASCAN_RATE_LIMIT")
