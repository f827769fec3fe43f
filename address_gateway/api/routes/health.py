from fastapi import APIRouter, status

from address_gateway.core.logging import get_logger
from address_gateway.domain.schemas.responses import HealthStatus

# Initialize router and logger
health_router = APIRouter()
logger = get_logger(__name__)


@health_router.get(
    "/health",
    response_model=HealthStatus,
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
    description="Returns basic health status of the service."
)
async def get_health() -> HealthStatus:
    """
    Basic health check endpoint.

    Does not touch the upstream API or the credential.
    """
    logger.debug("Health check requested")
    return HealthStatus(status="ok")
