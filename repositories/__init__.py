"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .base_repository import BaseRepository
from .memory_repository import InMemoryRepository
from .task_repository import InMemoryTaskRepository, SqlTaskRepository
from .user_repository import InMemoryUserRepository, SqlUserRepository

__all__ = [
    "BaseRepository",
    "InMemoryRepository",
    "InMemoryTaskRepository",
    "SqlTaskRepository",
    "InMemoryUserRepository",
    "SqlUserRepository",
]
