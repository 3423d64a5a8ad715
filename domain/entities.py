"""
Domain entities for the Tasks & Users API.

Records are immutable; partial updates produce a new record through
``apply`` and never touch ``id``.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from domain.value_objects import UNSET, OptionalField, is_set


@dataclass(frozen=True)
class Task:
    """Task record."""

    id: int
    title: str
    description: str = ""
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }


@dataclass(frozen=True)
class User:
    """User record."""

    id: int
    name: str
    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class TaskCreate:
    """Fields accepted when creating a task."""

    title: str
    description: str = ""

    def to_record(self, record_id: int) -> Task:
        return Task(id=record_id, title=self.title, description=self.description)


@dataclass(frozen=True)
class UserCreate:
    """Fields accepted when creating a user."""

    name: str
    email: str

    def to_record(self, record_id: int) -> User:
        return User(id=record_id, name=self.name, email=self.email)


class _PartialUpdate:
    """Shared behaviour of the partial-update shapes."""

    def changes(self) -> Dict[str, Any]:
        """Attributes that carry a value, keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if is_set(getattr(self, f.name))
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def apply(self, record):
        """Return ``record`` with every supplied attribute overwritten."""
        changes = self.changes()
        if not changes:
            return record
        return replace(record, **changes)


@dataclass(frozen=True)
class TaskUpdate(_PartialUpdate):
    """Partial update for a task; UNSET attributes keep their current value."""

    title: OptionalField[str] = UNSET
    description: OptionalField[str] = UNSET
    completed: OptionalField[bool] = UNSET


@dataclass(frozen=True)
class UserUpdate(_PartialUpdate):
    """Partial update for a user; UNSET attributes keep their current value."""

    name: OptionalField[str] = UNSET
    email: OptionalField[str] = UNSET
