"""Request/response core shared by every endpoint method."""

import logging
from typing import TYPE_CHECKING, Any, Iterator, List, Mapping, Optional

from .endpoint import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, EndpointSpec
from .envelope import EnvelopeDecoder
from .exceptions import APIError, TransportError
from .query import QueryBuilder
from .transport import RequestsTransport, Transport

if TYPE_CHECKING:
    from ..config.settings import ClientConfig


class ApiClient:
    """Runs endpoint calls: build the URL, send it, unwrap the envelope.

    The client holds no per-call state. Each call reads ``self.config`` once
    and uses that snapshot throughout, so replacing the config only affects
    calls started afterwards.
    """

    def __init__(
        self,
        config: "ClientConfig",
        transport: Optional[Transport] = None,
        query_builder: Optional[QueryBuilder] = None,
        decoder: Optional[EnvelopeDecoder] = None,
    ):
        self.config = config
        self.transport = transport or RequestsTransport()
        self.query_builder = query_builder or QueryBuilder()
        self.decoder = decoder or EnvelopeDecoder()
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_url(
        self,
        spec: EndpointSpec,
        params: Optional[Mapping[str, Any]] = None,
        config: Optional["ClientConfig"] = None,
    ) -> str:
        config = config or self.config
        return f"{config.base_url}{self.query_builder.build(spec, params)}"

    def invoke(
        self,
        spec: EndpointSpec,
        params: Optional[Mapping[str, Any]] = None,
        config: Optional["ClientConfig"] = None,
    ) -> Any:
        """Call one endpoint and return the envelope's ``data``.

        Args:
            spec: The endpoint to call.
            params: Path and query parameter values by name.
            config: Config snapshot to use instead of the client's current one.

        Raises:
            ValidationError: Invalid params; nothing was sent.
            TransportError: Non-2xx status or connection failure.
            DecodingError: Body is not a valid envelope.
            APIError: Envelope code is not success.
        """
        config = config or self.config
        url = self.build_url(spec, params, config)
        self.logger.debug(f"{spec.name}: GET {url}")

        status_code, body = self.transport.send(url, config.headers)
        if not 200 <= status_code < 300:
            self.logger.warning(f"{spec.name}: HTTP {status_code} from {url}")
            raise TransportError(
                f"HTTP error {status_code} for {url}", status_code=status_code, url=url
            )

        try:
            return self.decoder.decode(body)
        except APIError as e:
            self.logger.error(f"{spec.name}: API error [{e.code}] {e.msg}")
            raise

    def paginate(
        self,
        spec: EndpointSpec,
        params: Optional[Mapping[str, Any]] = None,
        max_pages: Optional[int] = None,
        config: Optional["ClientConfig"] = None,
    ) -> Iterator[Any]:
        """Yield every item of a paginated endpoint, page by page.

        Starts at ``params["page"]`` (default 1) and stops on the last page, an
        empty or short page, or after ``max_pages`` pages.
        """
        if not spec.paginated:
            raise ValueError(f"Endpoint '{spec.name}' is not paginated")

        config = config or self.config
        params = dict(params or {})
        page = params.pop("page", None)
        size = params.pop("size", None)
        page = DEFAULT_PAGE if page is None else page
        size = DEFAULT_PAGE_SIZE if size is None else size

        pages_fetched = 0
        while True:
            data = self.invoke(spec, {"page": page, "size": size, **params}, config)
            results = self._page_results(data)
            yield from results

            pages_fetched += 1
            if max_pages is not None and pages_fetched >= max_pages:
                return
            if self._is_last_page(data, results, size):
                return
            page += 1

    @staticmethod
    def _page_results(data: Any) -> List[Any]:
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return data.get("results") or []
        return []

    @staticmethod
    def _is_last_page(data: Any, results: List[Any], size: int) -> bool:
        if len(results) < size:
            return True
        paging = data.get("paging") if isinstance(data, dict) else None
        if not isinstance(paging, dict):
            return False
        if paging.get("last"):
            return True
        current_page = paging.get("currentPage")
        total_page = paging.get("totalPage")
        if isinstance(current_page, int) and isinstance(total_page, int):
            return current_page >= total_page
        return False
