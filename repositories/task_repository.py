"""
Task repositories: in-memory and SQL implementations of ITaskRepository.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from domain.entities import Task
from repositories.base_repository import BaseRepository
from repositories.interfaces import ITaskRepository
from repositories.memory_repository import InMemoryRepository
from repositories.models import TaskModel


class InMemoryTaskRepository(InMemoryRepository[Task], ITaskRepository):
    """Process-local task store."""

    def __init__(self):
        super().__init__("task")


class SqlTaskRepository(BaseRepository[Task], ITaskRepository):
    """Task store backed by the ``tasks`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(session_factory, TaskModel)
