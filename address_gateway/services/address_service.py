from typing import Callable, List, Optional, Union

from address_gateway.adapters.juso_client import JusoClient
from address_gateway.core.config import Settings
from address_gateway.core.exceptions import (
    ConfigurationError,
    GatewayException,
    MissingKeywordError,
    UpstreamBusinessError,
    UpstreamTransportError,
)
from address_gateway.core.logging import get_logger
from address_gateway.domain.models.address import (
    MULTI_RESULT_PAGE_SIZE,
    SINGLE_RESULT_PAGE_SIZE,
    AddressRecord,
    SearchQuery,
)
from address_gateway.domain.schemas.responses import (
    AddressItem,
    NoResultsResponse,
    SearchResultsResponse,
    SingleAddressResponse,
)

logger = get_logger(__name__)

ClientFactory = Callable[[Settings], JusoClient]


def default_client_factory(settings: Settings) -> JusoClient:
    return JusoClient(
        api_url=settings.JUSO_API_URL,
        api_key=settings.JUSO_API_KEY or "",
        timeout=settings.JUSO_TIMEOUT,
    )


class AddressService:
    """Address search logic shared by the list and single-result endpoints."""

    def __init__(self, settings: Settings, client_factory: Optional[ClientFactory] = None):
        """Initialize with settings and a factory building the upstream client."""
        self.settings = settings
        self.client_factory = client_factory or default_client_factory

    async def search_multiple(
        self, keyword: Optional[str]
    ) -> Union[SearchResultsResponse, NoResultsResponse]:
        """Searches up to ten addresses for the keyword."""
        records = await self._lookup(keyword, MULTI_RESULT_PAGE_SIZE)
        if not records:
            return NoResultsResponse()

        return SearchResultsResponse(
            results=[AddressItem.from_record(record) for record in records]
        )

    async def search_single(
        self, keyword: Optional[str]
    ) -> Union[SingleAddressResponse, NoResultsResponse]:
        """Searches the best match for the keyword and describes its postal code."""
        records = await self._lookup(keyword, SINGLE_RESULT_PAGE_SIZE)
        if not records:
            return NoResultsResponse()

        return SingleAddressResponse.from_record(records[0])

    async def _lookup(self, keyword: Optional[str], count_per_page: int) -> List[AddressRecord]:
        """
        Validate input, call the upstream API once and return its records.

        Raises:
            MissingKeywordError: If keyword is missing or empty
            ConfigurationError: If the API key is not configured
            UpstreamBusinessError: If the API reports a non-success error code
            UpstreamTransportError: On any network or parsing fault
        """
        if not keyword:
            logger.info("Address search rejected: missing keyword")
            raise MissingKeywordError()

        if not self.settings.JUSO_API_KEY:
            logger.error("Address search rejected: JUSO_API_KEY is not configured")
            raise ConfigurationError()

        query = SearchQuery(keyword=keyword, count_per_page=count_per_page)
        logger.info(
            f"Searching addresses for '{keyword}'",
            extra={"count_per_page": count_per_page},
        )

        try:
            client = self.client_factory(self.settings)
            result = await client.search(query)

            if not result.common.is_success:
                logger.warning(
                    f"Address API error {result.common.error_code}: {result.common.error_message}"
                )
                raise UpstreamBusinessError(
                    message=result.common.error_message,
                    error_code=result.common.error_code,
                )

            if result.dropped_items and not result.juso:
                logger.error("Address API returned a juso list with no address objects")
                raise UpstreamTransportError(
                    original_exception=ValueError("juso list holds no address objects")
                )

            records = result.records()
            logger.debug(f"Found {len(records)} addresses matching '{keyword}'")
            return records

        except GatewayException:
            raise
        except Exception as e:
            logger.error(f"Error searching addresses: {e!r}", exc_info=True)
            raise UpstreamTransportError(original_exception=e)
