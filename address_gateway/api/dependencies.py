from fastapi import Depends

from address_gateway.core.config import Settings, get_settings
from address_gateway.services.address_service import (
    AddressService,
    ClientFactory,
    default_client_factory,
)


def get_settings_dependency() -> Settings:
    """Settings for the current request; overridden in tests."""
    return get_settings()


def get_client_factory() -> ClientFactory:
    """Factory building the upstream address API client."""
    return default_client_factory


async def get_address_service(
    settings: Settings = Depends(get_settings_dependency),
    client_factory: ClientFactory = Depends(get_client_factory),
) -> AddressService:
    """
    Dependency for providing the address service.

    Returns:
        AddressService: Service bound to the current settings
    """
    return AddressService(settings=settings, client_factory=client_factory)
