"""
Base SQL repository with common CRUD operations.
Follows Single Responsibility Principle - only handles data access.
"""

from dataclasses import asdict
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.logger import logger
from repositories.models import Base

RecordT = TypeVar("RecordT")


class BaseRepository(Generic[RecordT]):
    """
    Base repository providing CRUD operations over one table.

    Each public method is a single transaction: a session is checked out of
    the pool, the work is committed (or rolled back on error) and the
    connection is returned before the method exits.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model_class: Type[Base],
    ):
        """
        Initialize repository with a session factory and a table model.

        Args:
            session_factory: Factory producing AsyncSession objects
            model_class: SQLAlchemy model mapped to the table
        """
        self.session_factory = session_factory
        self.model_class = model_class
        self.table_name = model_class.__tablename__

    async def list(self) -> List[RecordT]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(self.model_class).order_by(self.model_class.id)
                )
                return [row.to_entity() for row in result.scalars().all()]
        except Exception as e:
            logger.error(f"Error listing rows in {self.table_name}: {e}")
            raise

    async def get(self, record_id: int) -> Optional[RecordT]:
        try:
            async with self.session_factory() as session:
                row = await session.get(self.model_class, record_id)
                return row.to_entity() if row is not None else None
        except Exception as e:
            logger.error(f"Error finding row by ID in {self.table_name}: {e}")
            raise

    async def create(self, data) -> RecordT:
        try:
            async with self.session_factory() as session, session.begin():
                row = self.model_class(**self._create_values(data))
                session.add(row)
                await session.flush()
                await session.refresh(row)
                record = row.to_entity()
            logger.debug(f"Created row in {self.table_name}: id={record.id}")
            return record
        except Exception as e:
            logger.error(f"Error creating row in {self.table_name}: {e}")
            raise

    async def update(self, record_id: int, changes) -> Optional[RecordT]:
        """
        Read, merge and re-read inside one transaction.

        The row is selected FOR UPDATE where the dialect supports it, so a
        concurrent writer waits until this merge commits.
        """
        try:
            async with self.session_factory() as session, session.begin():
                result = await session.execute(
                    select(self.model_class)
                    .where(self.model_class.id == record_id)
                    .with_for_update()
                )
                row = result.scalar_one_or_none()
                if row is None:
                    return None

                if changes.is_empty():
                    return row.to_entity()

                for field_name, value in changes.changes().items():
                    setattr(row, field_name, value)
                await session.flush()
                await session.refresh(row)
                record = row.to_entity()
            logger.debug(f"Updated row in {self.table_name}: id={record_id}")
            return record
        except Exception as e:
            logger.error(f"Error updating row in {self.table_name}: {e}")
            raise

    async def delete(self, record_id: int) -> bool:
        try:
            async with self.session_factory() as session, session.begin():
                result = await session.execute(
                    delete(self.model_class).where(self.model_class.id == record_id)
                )
                deleted = result.rowcount > 0
            logger.debug(
                f"Deleted row in {self.table_name}: id={record_id}, deleted={deleted}"
            )
            return deleted
        except Exception as e:
            logger.error(f"Error deleting row in {self.table_name}: {e}")
            raise

    async def clear(self) -> None:
        """Drop and recreate the table so the id sequence restarts at 1."""
        table = self.model_class.__table__
        try:
            async with self.session_factory() as session, session.begin():
                connection = await session.connection()
                await connection.run_sync(
                    lambda sync_conn: table.drop(sync_conn, checkfirst=True)
                )
                await connection.run_sync(
                    lambda sync_conn: table.create(sync_conn, checkfirst=True)
                )
            logger.debug(f"Recreated table {self.table_name}")
        except Exception as e:
            logger.error(f"Error clearing table {self.table_name}: {e}")
            raise

    def _create_values(self, data) -> dict:
        """Column values for a new row, taken from the creation shape."""
        return asdict(data)
