from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from address_gateway.core.exceptions import (
    GatewayException,
    RequestFormatError,
    SERVER_ERROR_MESSAGE,
    UpstreamTransportError,
)
from address_gateway.core.logging import get_logger

# Initialize logger
logger = get_logger(__name__)


async def handle_gateway_exception(request: Request, exc: GatewayException) -> JSONResponse:
    """
    Handle GatewayException instances.

    Args:
        request: FastAPI request object
        exc: GatewayException instance

    Returns:
        JSONResponse: Formatted error response
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Gateway exception: {exc.message}",
        extra={
            "request_path": request.url.path,
            "status_code": exc.status_code,
            "error_code": exc.code,
            "context": exc.context,
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def handle_transport_exception(request: Request, exc: UpstreamTransportError) -> JSONResponse:
    """
    Handle upstream transport failures.

    The fault and its traceback are logged where it is raised; the
    original error is never returned to the client.
    """
    logger.info(
        f"Responding 500 for upstream transport error on {request.url.path}",
        extra={
            "original_error": exc.context.get("original_error"),
            "error_code": exc.code,
        }
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def handle_validation_exception(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle malformed request bodies and query strings."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning(
        "Request validation error",
        extra={"request_path": request.url.path, "errors": errors}
    )

    error = RequestFormatError(context={"errors": errors})
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_dict()
    )


async def handle_unexpected_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled exception: {exc!r}", exc_info=exc)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": SERVER_ERROR_MESSAGE,
        }
    )
