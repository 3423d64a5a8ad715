"""
Service Interfaces.
"""

from .resource_service_interface import IResourceService
from .task_service_interface import ITaskService
from .user_service_interface import IUserService

__all__ = [
    "IResourceService",
    "ITaskService",
    "IUserService",
]
