"""
User API Routes.
"""

from typing import Any, List

from fastapi import APIRouter, Body, status

from core.logger import logger
from internal.api.schemas import ErrorResponse, UserResponse
from internal.api.utils import result_response
from services.interfaces import IUserService


def _serialize(value: Any) -> Any:
    if isinstance(value, list):
        return [user.to_dict() for user in value]
    return value.to_dict()


def create_user_routes(user_service: IUserService) -> APIRouter:
    """
    Factory function to create user routes with dependency injection.

    Args:
        user_service: Implementation of IUserService

    Returns:
        APIRouter: Configured router with all user endpoints
    """
    router = APIRouter(prefix="/users", tags=["Users"])

    @router.get("", response_model=List[UserResponse], summary="List Users")
    async def list_users():
        result = await user_service.list_all()
        return result_response(result, serialize=_serialize)

    @router.get(
        "/{user_id}",
        response_model=UserResponse,
        summary="Get User",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid ID"},
            404: {"model": ErrorResponse, "description": "User not found"},
        },
    )
    async def get_user(user_id: str):
        result = await user_service.get(user_id)
        return result_response(result, serialize=_serialize)

    @router.post(
        "",
        response_model=UserResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Create User",
        responses={
            400: {"model": ErrorResponse, "description": "Name or email is blank"},
            500: {"model": ErrorResponse, "description": "Malformed request body"},
        },
    )
    async def create_user(payload: Any = Body(default=None)):
        """
        Create a user.

        **Body:**
        - **name**: Required, must not be blank
        - **email**: Required, must not be blank
        """
        result = await user_service.create(payload)
        return result_response(
            result, success_status=status.HTTP_201_CREATED, serialize=_serialize
        )

    @router.put(
        "/{user_id}",
        response_model=UserResponse,
        summary="Update User",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid ID"},
            404: {"model": ErrorResponse, "description": "User not found"},
        },
    )
    async def update_user(user_id: str, payload: Any = Body(default=None)):
        result = await user_service.update(user_id, payload)
        return result_response(result, serialize=_serialize)

    @router.delete(
        "/{user_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete User",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid ID"},
            404: {"model": ErrorResponse, "description": "User not found"},
        },
    )
    async def delete_user(user_id: str):
        result = await user_service.delete(user_id)
        return result_response(result, success_status=status.HTTP_204_NO_CONTENT)

    logger.debug("User routes created")
    return router
