"""
Request models parsed by the services.

Parsing is strict: a value of the wrong JSON type (``"yes"`` or ``0`` for a
boolean, a number for a string) fails instead of being coerced.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.entities import TaskCreate, TaskUpdate, UserCreate, UserUpdate
from domain.value_objects import from_nullable


class TaskCreateRequest(BaseModel):
    """Request body for POST /tasks."""

    title: str = Field(..., description="Task title (must not be blank)")
    description: str = Field(default="", description="Free-form description")

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [{"title": "Write report", "description": "Q3 numbers"}]
        },
    )

    def to_domain(self) -> TaskCreate:
        return TaskCreate(title=self.title, description=self.description)


class TaskUpdateRequest(BaseModel):
    """Request body for PUT /tasks/{id}; every field is optional."""

    title: Optional[str] = Field(default=None, description="New title")
    description: Optional[str] = Field(default=None, description="New description")
    completed: Optional[bool] = Field(default=None, description="New completion flag")

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"title": "Updated", "completed": True}]},
    )

    def to_domain(self) -> TaskUpdate:
        return TaskUpdate(
            title=from_nullable(self.title),
            description=from_nullable(self.description),
            completed=from_nullable(self.completed),
        )


class UserCreateRequest(BaseModel):
    """Request body for POST /users."""

    name: str = Field(..., description="Display name (must not be blank)")
    email: str = Field(..., description="Email address (must not be blank)")

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"examples": [{"name": "Alice", "email": "alice@example.com"}]},
    )

    def to_domain(self) -> UserCreate:
        return UserCreate(name=self.name, email=self.email)


class UserUpdateRequest(BaseModel):
    """Request body for PUT /users/{id}; every field is optional."""

    name: Optional[str] = Field(default=None, description="New name")
    email: Optional[str] = Field(default=None, description="New email")

    model_config = ConfigDict(strict=True)

    def to_domain(self) -> UserUpdate:
        return UserUpdate(
            name=from_nullable(self.name),
            email=from_nullable(self.email),
        )
