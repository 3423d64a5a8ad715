"""
Task service: request handling for /tasks.
"""

from domain.entities import Task
from repositories.interfaces import ITaskRepository
from services.interfaces import ITaskService
from services.resource_service import ResourceService
from services.schemas import TaskCreateRequest, TaskUpdateRequest


class TaskService(ResourceService[Task], ITaskService):
    """Validates task requests and delegates storage to an ITaskRepository."""

    resource_label = "Task"
    create_schema = TaskCreateRequest
    update_schema = TaskUpdateRequest
    required_fields = (("title", "Title is required"),)

    def __init__(self, repository: ITaskRepository):
        super().__init__(repository)
