"""
Health Check API Routes.
"""

from typing import Optional

from fastapi import APIRouter

from core.config import Settings, get_settings
from core.database import DatabaseManager
from internal.api.schemas import HealthResponse


def create_health_routes(
    database: Optional[DatabaseManager] = None,
    settings: Optional[Settings] = None,
) -> APIRouter:
    """
    Factory function to create health routes.

    Args:
        database: Database manager when the SQL backend is active, else None
        settings: Settings reported by the endpoints (defaults to the cached settings)

    Returns:
        APIRouter: Configured router with health endpoints
    """
    settings = settings or get_settings()
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
    )
    async def root():
        """
        Root endpoint.

        Returns the service name, version and current status.
        """
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        }

    @router.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check service health",
        operation_id="health_check",
    )
    async def health_check():
        """
        Health check endpoint.

        **Returns:**
        - Overall health status (healthy / degraded)
        - Service name and version
        - Active storage backend and database connectivity
        """
        if database is None:
            database_status = "not_configured"
        elif await database.health_check():
            database_status = "connected"
        else:
            database_status = "disconnected"

        return HealthResponse(
            status="degraded" if database_status == "disconnected" else "healthy",
            service=settings.app_name,
            version=settings.app_version,
            storage_backend=settings.storage_backend,
            database=database_status,
        )

    return router
