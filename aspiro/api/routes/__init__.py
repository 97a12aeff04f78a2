"""
API Routes package.
"""
from fastapi import APIRouter

from aspiro.api.routes.assistant import router as assistant_router
from aspiro.api.routes.auth import router as auth_router
from aspiro.api.routes.catalog import router as catalog_router
from aspiro.api.routes.health import router as health_router
from aspiro.api.routes.recommendations import router as recommendations_router
from aspiro.api.routes.trends import router as trends_router
from aspiro.api.routes.users import router as users_router

# Main API router
api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(catalog_router)
api_router.include_router(recommendations_router)
api_router.include_router(assistant_router)
api_router.include_router(trends_router)

__all__ = [
    "api_router",
    "assistant_router",
    "auth_router",
    "catalog_router",
    "health_router",
    "recommendations_router",
    "trends_router",
    "users_router",
]
