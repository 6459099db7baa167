"""API route modules."""

from fastapi import APIRouter

from routes import access_routes, organization_routes, training_routes
from routes.change_log_routes import router as change_log_router
from routes.health_routes import router as health_router

entity_routers: list[APIRouter] = [
    *access_routes.routers,
    *organization_routes.routers,
    *training_routes.routers,
    change_log_router,
]

__all__ = [
    "change_log_router",
    "entity_routers",
    "health_router",
]
