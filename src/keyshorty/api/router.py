"""Master API router mounted at /api."""

from fastapi import APIRouter

from keyshorty.api.routes import applications, health, shortcuts

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(applications.router)
api_router.include_router(shortcuts.router)
