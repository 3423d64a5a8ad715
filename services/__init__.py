"""
Service layer implementing request handling.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .resource_service import ResourceService, parse_id
from .task_service import TaskService
from .user_service import UserService

__all__ = [
    "ResourceService",
    "TaskService",
    "UserService",
    "parse_id",
]
