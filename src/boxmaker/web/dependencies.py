"""FastAPI dependency injection for box services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from boxmaker.application.commands import GenerateBoxCommand
from boxmaker.application.factory import ServiceFactory, get_factory


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateBoxCommand:
    """Dependency for GenerateBoxCommand."""
    return factory.create_generate_command()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateBoxCommand, Depends(get_generate_command)]
