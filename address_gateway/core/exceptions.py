from fastapi import status
from typing import Any, Dict, Optional


MISSING_KEYWORD_MESSAGE = "검색할 주소 키워드를 입력해주세요."
MISSING_API_KEY_MESSAGE = "환경변수 JUSO_API_KEY가 설정되지 않았습니다. .env 파일을 확인해주세요."
UPSTREAM_FAILURE_MESSAGE = "주소 검색에 실패했습니다."
SERVER_ERROR_MESSAGE = "서버 오류가 발생했습니다. 잠시 후 다시 시도해주세요."
INVALID_REQUEST_MESSAGE = "요청 형식이 올바르지 않습니다."


class GatewayException(Exception):
    """
    Base exception for gateway errors.

    Every subclass is rendered to the client as the same envelope,
    ``{"success": false, "message": ...}``, with its own status code.
    """

    def __init__(
        self,
        message: str = SERVER_ERROR_MESSAGE,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: str = "internal_error",
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.context = context or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the client-facing response body."""
        return {
            "success": False,
            "message": self.message,
        }


class MissingKeywordError(GatewayException):
    """Raised when a search request carries no keyword."""

    def __init__(self, message: str = MISSING_KEYWORD_MESSAGE):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            code="missing_keyword",
        )


class RequestFormatError(GatewayException):
    """Raised when the request body or query cannot be parsed."""

    def __init__(
        self,
        message: str = INVALID_REQUEST_MESSAGE,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            code="invalid_request",
            context=context,
        )


class ConfigurationError(GatewayException):
    """Raised when the upstream credential is not configured."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE, setting: str = "JUSO_API_KEY"):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="configuration_error",
            context={"setting": setting},
        )


class UpstreamBusinessError(GatewayException):
    """Raised when the upstream API answers with a non-success error code."""

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message or UPSTREAM_FAILURE_MESSAGE,
            status_code=status.HTTP_400_BAD_REQUEST,
            code="upstream_error",
            context={"error_code": error_code},
        )
        self.error_code = error_code


class UpstreamTransportError(GatewayException):
    """Raised when the upstream API cannot be reached or its reply cannot be parsed."""

    def __init__(
        self,
        message: str = SERVER_ERROR_MESSAGE,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="upstream_transport_error",
        )
        self.original_exception = original_exception

        # Keep the cause for the logs; to_dict never exposes it
        if original_exception is not None:
            self.context["original_error"] = repr(original_exception)
