"""API routers for the REST API."""

from boxmaker.web.routers.export import router as export_router
from boxmaker.web.routers.generate import router as generate_router
from boxmaker.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "generate_router",
    "validate_router",
]
