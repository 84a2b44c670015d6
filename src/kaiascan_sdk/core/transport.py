"""HTTP transport used by the API client."""

import time
import logging
from typing import Mapping, NamedTuple, Optional, Protocol

import requests

from .exceptions import TransportConnectionError

logger = logging.getLogger(__name__)


class TransportResponse(NamedTuple):
    status_code: int
    body: bytes


class Transport(Protocol):
    """Anything that can GET a URL and hand back status and raw body."""

    def send(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        ...


class RateLimitedSession(requests.Session):
    """Session that logs every call and optionally spaces them out."""

    def __init__(self, calls_per_second: Optional[float] = None):
        super().__init__()
        self.calls_per_second = calls_per_second
        self.min_interval = 1.0 / calls_per_second if calls_per_second else 0.0
        self.last_request_time = 0.0
        self.request_count = 0

    def request(self, method, url, **kwargs):
        if self.min_interval:
            time_since_last = time.time() - self.last_request_time
            if time_since_last < self.min_interval:
                sleep_time = self.min_interval - time_since_last
                logger.debug(f"Rate limiting: sleeping for {sleep_time:.3f}s")
                time.sleep(sleep_time)

        self.last_request_time = time.time()
        self.request_count += 1
        call_number = self.request_count

        logger.info(f"API Call #{call_number}: {method} {url}")
        response = super().request(method, url, **kwargs)
        logger.info(f"Response #{call_number}: {response.status_code} - {response.reason}")

        return response


class RequestsTransport:
    """Transport backed by a ``requests`` session.

    Only connection-level failures are raised here; status handling is left
    to the caller.
    """

    def __init__(
        self,
        timeout: float = 30,
        calls_per_second: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self._session = session or RateLimitedSession(calls_per_second=calls_per_second)

    def send(self, url: str, headers: Mapping[str, str]) -> TransportResponse:
        try:
            response = self._session.get(url, headers=dict(headers), timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportConnectionError(f"Request to {url} failed: {e}", url=url) from e
        return TransportResponse(response.status_code, response.content)

    def close(self) -> None:
        self._session.close()
