"""
User service: request handling for /users.
"""

from domain.entities import User
from repositories.interfaces import IUserRepository
from services.interfaces import IUserService
from services.resource_service import ResourceService
from services.schemas import UserCreateRequest, UserUpdateRequest


class UserService(ResourceService[User], IUserService):
    """Validates user requests and delegates storage to an IUserRepository."""

    resource_label = "User"
    create_schema = UserCreateRequest
    update_schema = UserUpdateRequest
    # Name is checked before email
    required_fields = (
        ("name", "Name is required"),
        ("email", "Email is required"),
    )

    def __init__(self, repository: IUserRepository):
        super().__init__(repository)
