"""Unversioned liveness endpoints, mounted at the application root."""

from fastapi import APIRouter

from bank_accounts.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Service name, status and version."""
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
