"""
API Schemas (Request/Response Models).
"""

from services.schemas import (
    TaskCreateRequest,
    TaskUpdateRequest,
    UserCreateRequest,
    UserUpdateRequest,
)

from .common_schemas import ErrorResponse, HealthResponse
from .task_schemas import TaskResponse
from .user_schemas import UserResponse

__all__ = [
    # Common schemas
    "ErrorResponse",
    "HealthResponse",
    # Task schemas
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskResponse",
    # User schemas
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
]
