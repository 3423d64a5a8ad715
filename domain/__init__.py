"""
Domain layer: records, partial-update shapes and the error taxonomy.
"""

from .entities import Task, TaskCreate, TaskUpdate, User, UserCreate, UserUpdate
from .errors import ErrorKind, ServiceError, ServiceResult
from .value_objects import UNSET, OptionalField, from_nullable, is_set

__all__ = [
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "User",
    "UserCreate",
    "UserUpdate",
    "ErrorKind",
    "ServiceError",
    "ServiceResult",
    "UNSET",
    "OptionalField",
    "from_nullable",
    "is_set",
]
