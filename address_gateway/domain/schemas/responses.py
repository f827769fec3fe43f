from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from address_gateway.domain.models.address import AddressRecord


NO_RESULTS_MESSAGE = "검색 결과가 없습니다. 다른 키워드로 다시 검색해주세요."


class SearchAddressRequest(BaseModel):
    """Body of the single-result search endpoint."""
    keyword: Optional[str] = None


class AddressItem(BaseModel):
    """One address in the list-style response."""
    roadAddr: Optional[str] = None
    jibunAddr: Optional[str] = None
    zipNo: Optional[str] = None
    bdNm: str = ""

    @classmethod
    def from_record(cls, record: AddressRecord) -> "AddressItem":
        return cls(
            roadAddr=record.road_addr,
            jibunAddr=record.jibun_addr,
            zipNo=record.zip_no,
            bdNm=record.bd_nm,
        )


class SearchResultsResponse(BaseModel):
    """Successful list-style search."""
    success: Literal[True] = True
    results: List[AddressItem] = Field(default_factory=list)


class SingleAddressResponse(BaseModel):
    """Successful single-result search."""
    success: Literal[True] = True
    roadAddr: Optional[str] = None
    zipNo: Optional[str] = None
    bdNm: str = ""
    message: str

    @classmethod
    def from_record(cls, record: AddressRecord) -> "SingleAddressResponse":
        return cls(
            roadAddr=record.road_addr,
            zipNo=record.zip_no,
            bdNm=record.bd_nm,
            message=record.describe(),
        )


class NoResultsResponse(BaseModel):
    """The upstream answered successfully but matched nothing."""
    success: Literal[False] = False
    message: str = NO_RESULTS_MESSAGE


class ErrorResponse(BaseModel):
    """Error envelope, documented for OpenAPI; rendered by the exception handlers."""
    success: Literal[False] = False
    message: str


class HealthStatus(BaseModel):
    """Basic health status response model."""
    status: str
