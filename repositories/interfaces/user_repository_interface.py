"""
Interface for User Repository.
"""

from domain.entities import User, UserCreate, UserUpdate

from .repository_interface import IRepository


class IUserRepository(IRepository[User, UserCreate, UserUpdate]):
    """Interface for user repository operations."""
