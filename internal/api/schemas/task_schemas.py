"""
Pydantic schemas for the Task API.
"""

from pydantic import BaseModel, ConfigDict

from domain.entities import Task


class TaskResponse(BaseModel):
    """Task as returned by the API."""

    id: int
    title: str
    description: str = ""
    completed: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"id": 1, "title": "Write report", "description": "", "completed": False}
            ]
        }
    )

    @classmethod
    def from_entity(cls, task: Task) -> "TaskResponse":
        return cls(**task.to_dict())
