"""
In-memory repository shared by every resource type.
Records live in an ordered list; IDs come from a counter that never goes back.
"""

import asyncio
from typing import Generic, List, Optional, TypeVar

from core.logger import logger

RecordT = TypeVar("RecordT")


class InMemoryRepository(Generic[RecordT]):
    """
    Ordered list of records plus a next-id counter starting at 1.

    Every operation holds an asyncio.Lock owned by the instance, so a
    partially merged record is never observable. Lookups are linear scans.
    """

    def __init__(self, resource_name: str):
        """
        Initialize an empty store.

        Args:
            resource_name: Name used in log messages (e.g. "task")
        """
        self.resource_name = resource_name
        self._records: List[RecordT] = []
        self._next_id = 1
        self._lock = asyncio.Lock()
        logger.debug(f"InMemoryRepository initialized for {resource_name}s")

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return -1

    async def list(self) -> List[RecordT]:
        async with self._lock:
            return list(self._records)

    async def get(self, record_id: int) -> Optional[RecordT]:
        async with self._lock:
            index = self._index_of(record_id)
            return self._records[index] if index >= 0 else None

    async def create(self, data) -> RecordT:
        async with self._lock:
            record = data.to_record(self._next_id)
            self._next_id += 1
            self._records.append(record)
        logger.debug(f"Created {self.resource_name} in memory: id={record.id}")
        return record

    async def update(self, record_id: int, changes) -> Optional[RecordT]:
        async with self._lock:
            index = self._index_of(record_id)
            if index < 0:
                return None
            updated = changes.apply(self._records[index])
            self._records[index] = updated
        logger.debug(f"Updated {self.resource_name} in memory: id={record_id}")
        return updated

    async def delete(self, record_id: int) -> bool:
        async with self._lock:
            index = self._index_of(record_id)
            if index < 0:
                return False
            del self._records[index]
        logger.debug(f"Deleted {self.resource_name} in memory: id={record_id}")
        return True

    async def clear(self) -> None:
        async with self._lock:
            self._records.clear()
            self._next_id = 1
        logger.debug(f"Cleared in-memory {self.resource_name}s")
