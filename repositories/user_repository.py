"""
User repositories: in-memory and SQL implementations of IUserRepository.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities import User
from repositories.base_repository import BaseRepository
from repositories.interfaces import IUserRepository
from repositories.memory_repository import InMemoryRepository
from repositories.models import UserModel


class InMemoryUserRepository(InMemoryRepository[User], IUserRepository):
    """Process-local user store."""

    def __init__(self):
        super().__init__("user")


class SqlUserRepository(BaseRepository[User], IUserRepository):
    """User store backed by the ``users`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(session_factory, UserModel)
