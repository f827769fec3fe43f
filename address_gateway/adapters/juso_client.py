import time
from typing import Optional

import httpx

from address_gateway.core.exceptions import UpstreamTransportError
from address_gateway.core.logging import get_logger
from address_gateway.domain.models.address import SearchQuery, UpstreamResult

logger = get_logger(__name__)


class JusoClient:
    """
    Client for the road-name address search API (business.juso.go.kr).

    Performs exactly one GET per search. Business errors are reported by the
    API inside the JSON body, so the HTTP status code is not inspected here.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the client.

        Args:
            api_url: Address search endpoint
            api_key: Credential sent as ``confmKey``
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests to stub the API
        """
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    async def search(self, query: SearchQuery) -> UpstreamResult:
        """
        Run one address search.

        Args:
            query: Keyword and page size to search with

        Returns:
            UpstreamResult: Parsed status block and address items

        Raises:
            UpstreamTransportError: If the API is unreachable or the body is not JSON
        """
        params = query.to_params(self.api_key)

        try:
            start_time = time.time()

            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.api_url, params=params)

            duration = time.time() - start_time
            logger.debug(
                f"Address API request completed in {duration:.2f}s",
                extra={
                    "status_code": response.status_code,
                    "count_per_page": query.count_per_page,
                },
            )

            payload = response.json()

        except httpx.HTTPError as e:
            logger.error(f"Address API request failed: {e!r}", exc_info=True)
            raise UpstreamTransportError(original_exception=e)
        except ValueError as e:
            logger.error(f"Address API returned a non-JSON body: {e!r}", exc_info=True)
            raise UpstreamTransportError(original_exception=e)

        return UpstreamResult.from_payload(payload)
