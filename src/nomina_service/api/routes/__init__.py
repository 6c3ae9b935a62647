"""API routes."""

from nomina_service.api.routes.employees import router as employees_router
from nomina_service.api.routes.health import router as health_router
from nomina_service.api.routes.nominas import router as nominas_router
from nomina_service.api.routes.root import router as root_router

__all__ = ["employees_router", "health_router", "nominas_router", "root_router"]
