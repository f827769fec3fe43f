from typing import Optional, Union

from fastapi import APIRouter, Body, Depends, Query

from address_gateway.api.dependencies import get_address_service
from address_gateway.core.logging import get_logger
from address_gateway.domain.schemas.responses import (
    ErrorResponse,
    NoResultsResponse,
    SearchAddressRequest,
    SearchResultsResponse,
    SingleAddressResponse,
)
from address_gateway.services.address_service import AddressService

search_router = APIRouter()
logger = get_logger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing keyword or upstream error"},
    500: {"model": ErrorResponse, "description": "Misconfiguration or upstream unreachable"},
}


@search_router.get(
    "/search",
    response_model=Union[SearchResultsResponse, NoResultsResponse],
    responses=ERROR_RESPONSES,
    summary="Search addresses",
    description="Returns up to ten addresses matching the keyword.",
)
async def search_addresses(
    keyword: Optional[str] = Query(None, description="Address search keyword"),
    address_service: AddressService = Depends(get_address_service),
):
    """List-style address search."""
    return await address_service.search_multiple(keyword)


@search_router.post(
    "/api/search-address",
    response_model=Union[SingleAddressResponse, NoResultsResponse],
    responses=ERROR_RESPONSES,
    summary="Look up a postal code",
    description="Returns the best match for the keyword with a postal-code sentence.",
)
async def search_address(
    payload: Optional[SearchAddressRequest] = Body(None),
    address_service: AddressService = Depends(get_address_service),
):
    """Single-result address search."""
    keyword = payload.keyword if payload else None
    return await address_service.search_single(keyword)
