from address_gateway.domain.models.address import (
    AddressRecord,
    SearchQuery,
    UpstreamCommon,
    UpstreamResult,
)

__all__ = ["AddressRecord", "SearchQuery", "UpstreamCommon", "UpstreamResult"]
