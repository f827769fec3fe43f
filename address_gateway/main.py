from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
import os
import time
from typing import Callable

from address_gateway.core.config import get_settings, load_env_file
from address_gateway.core.exceptions import GatewayException, UpstreamTransportError
from address_gateway.core.logging import configure_logging, get_logger, set_correlation_id


# Load environment variables and configure logging early
load_env_file()
configure_logging()
logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "Starting up Address Gateway",
        extra={
            "juso_api_key_configured": settings.has_api_key,
            "juso_api_key_length": len(settings.JUSO_API_KEY or ""),
        }
    )
    if not settings.has_api_key:
        logger.warning("JUSO_API_KEY is not set; address searches will fail until it is configured")
    yield
    logger.info("Shutting down Address Gateway")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    configure_middleware(app)
    handle_exceptions(app)
    register_routers(app)
    mount_static_files(app)

    return app


def configure_middleware(app: FastAPI) -> None:
    """
    Configure middleware components for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request tracking middleware
    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next: Callable):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {e!r}",
                extra={
                    "request_path": request.url.path,
                    "method": request.method,
                    "process_time_ms": round(process_time * 1000, 2),
                },
            )
            raise

        response.headers[CORRELATION_ID_HEADER] = correlation_id

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            extra={
                "request_path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2),
            }
        )
        return response


def handle_exceptions(app: FastAPI) -> None:
    """
    Configure global exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    from address_gateway.api.error_handlers import (
        handle_gateway_exception,
        handle_transport_exception,
        handle_unexpected_exception,
        handle_validation_exception,
    )

    app.add_exception_handler(GatewayException, handle_gateway_exception)
    app.add_exception_handler(UpstreamTransportError, handle_transport_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)


def register_routers(app: FastAPI) -> None:
    """
    Register API routers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    # Import routers here to avoid circular imports
    from address_gateway.api.routes.health import health_router
    from address_gateway.api.routes.search import search_router

    app.include_router(health_router, tags=["Health"])
    app.include_router(search_router, tags=["Search"])

    @app.get("/", include_in_schema=False)
    async def index() -> RedirectResponse:
        return RedirectResponse(url="/test/index.html", status_code=status.HTTP_302_FOUND)


def mount_static_files(app: FastAPI) -> None:
    """Serve the browser test page under /test."""
    static_dir = get_settings().STATIC_DIR
    if os.path.isdir(static_dir):
        app.mount("/test", StaticFiles(directory=static_dir), name="test")
    else:
        logger.warning(f"Static directory {static_dir} not found; /test is not served")


app = create_application()


def run() -> None:
    import uvicorn

    settings = get_settings()
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run("address_gateway.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
