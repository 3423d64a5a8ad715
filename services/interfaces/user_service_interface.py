"""
Interface for User Service.
"""

from domain.entities import User

from .resource_service_interface import IResourceService


class IUserService(IResourceService[User]):
    """Interface for user service operations."""
