"""
Interface for Task Service.
"""

from domain.entities import Task

from .resource_service_interface import IResourceService


class ITaskService(IResourceService[Task]):
    """Interface for task service operations."""
