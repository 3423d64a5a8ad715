"""
Pydantic schemas for the User API.
"""

from pydantic import BaseModel

from domain.entities import User


class UserResponse(BaseModel):
    """User as returned by the API."""

    id: int
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(**user.to_dict())
