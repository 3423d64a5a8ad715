"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Uniform error payload returned by every failing request."""

    message: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"message": "Invalid ID"},
                {"message": "Task not found"},
            ]
        }
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str
    version: str
    storage_backend: str
    database: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "Tasks & Users API",
                    "version": "1.0.0",
                    "storage_backend": "database",
                    "database": "connected",
                }
            ]
        }
    )
