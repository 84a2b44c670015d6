import json
from typing import Any, List, Mapping, Optional, Tuple

import pytest

from kaiascan_sdk import KaiascanSDK
from kaiascan_sdk.core.transport import TransportResponse

MAINNET_URL = "https://mainnet-oapi.kaiascan.io/"
TESTNET_URL = "https://kairos-oapi.kaiascan.io/"


def envelope(data: Any = None, code: int = 0, msg: str = "success") -> bytes:
    return json.dumps({"code": code, "data": data, "msg": msg}).encode()


def page(results: List[Any], current: int, total: int) -> dict:
    return {
        "results": results,
        "paging": {
            "totalCount": None,
            "currentPage": current,
            "last": current >= total,
            "totalPage": total,
        },
    }


class StubTransport:
    """Records every request; replies from a queue, then a default reply."""

    def __init__(self, status_code: int = 200, body: Optional[bytes] = None):
        self.calls: List[Tuple[str, dict]] = []
        self.queue: List[TransportResponse] = []
        self.default = TransportResponse(status_code, body if body is not None else envelope({}))

    def reply(self, status_code: int = 200, body: Optional[bytes] = None) -> "StubTransport":
        self.default = TransportResponse(status_code, body if body is not None else envelope({}))
        return self

    def enqueue(self, status_code: int, body: bytes) -> "StubTransport":
        self.queue.append(TransportResponse(status_code, body))
        return self

    def send(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        self.calls.append((url, dict(headers)))
        if self.queue:
            return self.queue.pop(0)
        return self.default

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("KAIASCAN_API_KEY", "KAIASCAN_NETWORK", "KAIASCAN_TIMEOUT", "KAIASCAN_RATE_LIMIT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def transport():
    return StubTransport()


@pytest.fixture
def sdk(transport):
    return KaiascanSDK(network="mainnet", transport=transport)
