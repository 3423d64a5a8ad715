"""
Interface shared by every resource repository.
Defines the contract that both the in-memory and the SQL stores implement.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")
CreateT = TypeVar("CreateT")
UpdateT = TypeVar("UpdateT")


class IRepository(ABC, Generic[RecordT, CreateT, UpdateT]):
    """Interface for list/get/create/update/delete over one resource type."""

    @abstractmethod
    async def list(self) -> List[RecordT]:
        """
        List every current record.

        Returns:
            List[RecordT]: Records in insertion (in-memory) or primary-key (SQL) order
        """
        pass

    @abstractmethod
    async def get(self, record_id: int) -> Optional[RecordT]:
        """
        Find a record by ID.

        Args:
            record_id: ID of the record

        Returns:
            Optional[RecordT]: The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, data: CreateT) -> RecordT:
        """
        Store a new record under a freshly assigned ID.

        Args:
            data: Validated creation fields

        Returns:
            RecordT: The stored record
        """
        pass

    @abstractmethod
    async def update(self, record_id: int, changes: UpdateT) -> Optional[RecordT]:
        """
        Merge the supplied fields into an existing record.

        Args:
            record_id: ID of the record
            changes: Partial update; unset fields keep their value

        Returns:
            Optional[RecordT]: The updated record, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, record_id: int) -> bool:
        """
        Delete a record.

        Args:
            record_id: ID of the record

        Returns:
            bool: True if a record was removed, False if it was already absent
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every record and restart ID allocation."""
        pass
