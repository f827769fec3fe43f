from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from address_gateway.core.logging import get_logger

logger = get_logger(__name__)


SUCCESS_ERROR_CODE = "0"
MULTI_RESULT_PAGE_SIZE = 10
SINGLE_RESULT_PAGE_SIZE = 1


def _text(value: Any) -> Optional[str]:
    """Upstream fields are strings, but numbers occasionally come through unquoted."""
    return None if value is None else str(value)


@dataclass(frozen=True)
class SearchQuery:
    """A single upstream search, discarded once the call returns."""

    keyword: str
    count_per_page: int = MULTI_RESULT_PAGE_SIZE
    current_page: int = 1

    def to_params(self, api_key: str) -> Dict[str, str]:
        """Build the upstream query string; the API expects every value as a string."""
        return {
            "confmKey": api_key,
            "currentPage": str(self.current_page),
            "countPerPage": str(self.count_per_page),
            "keyword": self.keyword,
            "resultType": "json",
        }


@dataclass(frozen=True)
class AddressRecord:
    """Domain model for one address match."""

    road_addr: Optional[str]
    jibun_addr: Optional[str]
    zip_no: Optional[str]
    bd_nm: str = ""

    @classmethod
    def from_juso(cls, item: Dict[str, Any]) -> "AddressRecord":
        """Maps a raw upstream ``juso`` item; a missing building name becomes ''."""
        return cls(
            road_addr=_text(item.get("roadAddr")),
            jibun_addr=_text(item.get("jibunAddr")),
            zip_no=_text(item.get("zipNo")),
            bd_nm=_text(item.get("bdNm") or ""),
        )

    def describe(self) -> str:
        """Human readable postal-code sentence, naming the building when there is one."""
        message = f"{self.road_addr}의 우편번호는 {self.zip_no}입니다."
        if self.bd_nm:
            message += f" 건물명은 {self.bd_nm}입니다"
        return message


@dataclass(frozen=True)
class UpstreamCommon:
    """The status block every upstream reply carries."""

    error_code: Optional[str] = None
    error_message: Optional[str] = None
    total_count: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.error_code == SUCCESS_ERROR_CODE


@dataclass(frozen=True)
class UpstreamResult:
    """Parsed upstream envelope: ``{"results": {"common": {...}, "juso": [...]}}``."""

    common: UpstreamCommon = field(default_factory=UpstreamCommon)
    juso: List[Dict[str, Any]] = field(default_factory=list)
    dropped_items: int = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "UpstreamResult":
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, dict):
            results = {}

        common = results.get("common")
        if not isinstance(common, dict):
            common = {}

        items = results.get("juso")
        if not isinstance(items, list):
            items = []

        juso = [item for item in items if isinstance(item, dict)]
        dropped = len(items) - len(juso)
        if dropped:
            logger.warning(f"Dropped {dropped} non-object juso item(s) from the address API reply")

        return cls(
            common=UpstreamCommon(
                error_code=common.get("errorCode"),
                error_message=_text(common.get("errorMessage")),
                total_count=_text(common.get("totalCount")),
            ),
            juso=juso,
            dropped_items=dropped,
        )

    def records(self) -> List[AddressRecord]:
        """Address records in upstream order."""
        return [AddressRecord.from_juso(item) for item in self.juso]
