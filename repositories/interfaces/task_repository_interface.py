"""
Interface for Task Repository.
"""

from domain.entities import Task, TaskCreate, TaskUpdate

from .repository_interface import IRepository


class ITaskRepository(IRepository[Task, TaskCreate, TaskUpdate]):
    """Interface for task repository operations."""
