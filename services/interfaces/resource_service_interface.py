"""
Interface for resource services.
Defines the contract the API routes call for every CRUD resource.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, TypeVar

from domain.errors import ServiceResult

RecordT = TypeVar("RecordT")


class IResourceService(ABC, Generic[RecordT]):
    """Interface for request handling of one resource type."""

    @abstractmethod
    async def list_all(self) -> ServiceResult[List[RecordT]]:
        """
        List every record.

        Returns:
            ServiceResult[List[RecordT]]: Always successful
        """
        pass

    @abstractmethod
    async def get(self, raw_id: str) -> ServiceResult[RecordT]:
        """
        Get a record by its path ID.

        Args:
            raw_id: ID exactly as it appeared in the request path

        Returns:
            ServiceResult[RecordT]: The record, or a validation / not-found error
        """
        pass

    @abstractmethod
    async def create(self, payload: Any) -> ServiceResult[RecordT]:
        """
        Create a record from a decoded request body.

        Args:
            payload: Decoded JSON body

        Returns:
            ServiceResult[RecordT]: The created record, or a malformed-input /
            validation error
        """
        pass

    @abstractmethod
    async def update(self, raw_id: str, payload: Any) -> ServiceResult[RecordT]:
        """
        Apply a partial update.

        Args:
            raw_id: ID exactly as it appeared in the request path
            payload: Decoded JSON body; absent or null fields are left untouched

        Returns:
            ServiceResult[RecordT]: The updated record, or an error
        """
        pass

    @abstractmethod
    async def delete(self, raw_id: str) -> ServiceResult[None]:
        """
        Delete a record.

        Args:
            raw_id: ID exactly as it appeared in the request path

        Returns:
            ServiceResult[None]: Success, or a validation / not-found error
        """
        pass
