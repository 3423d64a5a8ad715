"""
Task API Routes.
"""

from typing import Any, List

from fastapi import APIRouter, Body, status

from core.logger import logger
from internal.api.schemas import ErrorResponse, TaskResponse
from internal.api.utils import result_response
from services.interfaces import ITaskService


def _serialize(value: Any) -> Any:
    if isinstance(value, list):
        return [task.to_dict() for task in value]
    return value.to_dict()


def create_task_routes(task_service: ITaskService) -> APIRouter:
    """
    Factory function to create task routes with dependency injection.

    Args:
        task_service: Implementation of ITaskService

    Returns:
        APIRouter: Configured router with all task endpoints
    """
    router = APIRouter(prefix="/tasks", tags=["Tasks"])

    @router.get(
        "",
        response_model=List[TaskResponse],
        summary="List Tasks",
        description="Return every task",
    )
    async def list_tasks():
        """Return the full task collection."""
        result = await task_service.list_all()
        return result_response(result, serialize=_serialize)

    @router.get(
        "/{task_id}",
        response_model=TaskResponse,
        summary="Get Task",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid ID"},
            404: {"model": ErrorResponse, "description": "Task not found"},
        },
    )
    async def get_task(task_id: str):
        """
        Get a task by ID.

        **Parameters:**
        - **task_id**: Integer task identifier
        """
        result = await task_service.get(task_id)
        return result_response(result, serialize=_serialize)

    @router.post(
        "",
        response_model=TaskResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create Task",
        responses={
            400: {"model": ErrorResponse, "description": "Title is required"},
            500: {"model": ErrorResponse, "description": "Malformed request body"},
        },
    )
    async def create_task(payload: Any = Body(default=None)):
        """
        Create a task.

        **Body:**
        - **title**: Required, must not be blank
        - **description**: Optional, defaults to empty
        """
        result = await task_service.create(payload)
        return result_response(
            result, success_status=status.HTTP_201_CREATED, serialize=_serialize
        )

    @router.put(
        "/{task_id}",
        response_model=TaskResponse,
        summary="Update Task",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid ID"},
            404: {"model": ErrorResponse, "description": "Task not found"},
        },
    )
    async def update_task(task_id: str, payload: Any = Body(default=None)):
        """
        Partially update a task.

        Only the fields present in the body are changed; absent or null
        fields keep their current value.
        """
        result = await task_service.update(task_id, payload)
        return result_response(result, serialize=_serialize)

    @router.delete(
        "/{task_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete Task",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid ID"},
            404: {"model": ErrorResponse, "description": "Task not found"},
        },
    )
    async def delete_task(task_id: str):
        """Delete a task. Responds 204 with no body."""
        result = await task_service.delete(task_id)
        return result_response(result, success_status=status.HTTP_204_NO_CONTENT)

    logger.debug("Task routes created")
    return router
