"""
Repository Interfaces.
"""

from .repository_interface import IRepository
from .task_repository_interface import ITaskRepository
from .user_repository_interface import IUserRepository

__all__ = [
    "IRepository",
    "ITaskRepository",
    "IUserRepository",
]
