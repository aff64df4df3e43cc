"""Record Store — generic CRUD statements over a single table.

Invariants:
    - list_all orders by id ascending (the only ordering contract)
    - Writes commit immediately; one statement per operation
    - replace/update/delete matching zero rows raise RecordNotFoundError
    - SQLAlchemy and connection (OSError) failures roll back and surface as
      DatabaseError (driver text only in logs)
    - Returned records are Pydantic models, detached from the session

Design Decisions:
    - Core statements with RETURNING over ORM unit-of-work: the written row comes
      back in the same round trip and the identity map never goes stale
    - Partial update uses COALESCE(:value, column) so omitted fields keep the
      stored value without a read-before-write
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shelf_api.core.errors import DatabaseError, RecordNotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """CRUD operations for one table; subclasses bind table, schema and name."""

    table: ClassVar[Table]
    record_schema: ClassVar[type[BaseModel]]
    resource_type: ClassVar[str]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[RecordT]:
        """All rows, ascending id. Empty list when the table is empty."""
        async with self._guard("list"):
            result = await self.db.execute(
                select(self.table).order_by(self.table.c.id),
            )
            return [self._to_record(row) for row in result.mappings().all()]

    async def insert(self, payload: BaseModel) -> RecordT:
        """Insert a row and return it with its assigned id."""
        async with self._guard("insert"):
            result = await self.db.execute(
                insert(self.table)
                .values(**payload.model_dump())
                .returning(*self.table.c),
            )
            record = self._to_record(result.mappings().one())
            await self.db.commit()
        self._log_write("created", record)
        return record

    async def replace(self, record_id: int, payload: BaseModel) -> RecordT:
        """Overwrite every mutable column of the row with ``record_id``."""
        async with self._guard("replace"):
            result = await self.db.execute(
                update(self.table)
                .where(self.table.c.id == record_id)
                .values(**payload.model_dump())
                .returning(*self.table.c),
            )
            record = self._one_or_not_found(result, record_id)
            await self.db.commit()
        self._log_write("replaced", record)
        return record

    async def update(self, record_id: int, payload: BaseModel) -> RecordT:
        """Overwrite only the non-null payload fields."""
        values = {
            column: func.coalesce(value, self.table.c[column])
            for column, value in payload.model_dump().items()
        }
        async with self._guard("update"):
            result = await self.db.execute(
                update(self.table)
                .where(self.table.c.id == record_id)
                .values(values)
                .returning(*self.table.c),
            )
            record = self._one_or_not_found(result, record_id)
            await self.db.commit()
        self._log_write("updated", record)
        return record

    async def delete(self, record_id: int) -> RecordT:
        """Delete the row and return its values as they were before deletion."""
        async with self._guard("delete"):
            result = await self.db.execute(
                delete(self.table)
                .where(self.table.c.id == record_id)
                .returning(*self.table.c),
            )
            record = self._one_or_not_found(result, record_id)
            await self.db.commit()
        self._log_write("deleted", record)
        return record

    async def delete_all(self) -> None:
        """Remove every row of the table."""
        async with self._guard("delete_all"):
            await self.db.execute(delete(self.table))
            await self.db.commit()
        logger.info(
            f"All {self.table.name} deleted",
            extra={"resource": self.resource_type},
        )

    # ─── helpers ────────────────────────────────────────────────

    def _to_record(self, row) -> RecordT:
        return self.record_schema.model_validate(dict(row))

    def _one_or_not_found(self, result, record_id: int) -> RecordT:
        row = result.mappings().one_or_none()
        if row is None:
            raise RecordNotFoundError(self.resource_type, record_id)
        return self._to_record(row)

    def _log_write(self, action: str, record: BaseModel) -> None:
        logger.info(
            f"{self.resource_type} {record.id} {action}",
            extra={"resource": self.resource_type, "resource_id": record.id},
        )

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Roll back and translate storage failures into DatabaseError.

        OSError covers connections refused before SQLAlchemy wraps anything
        (asyncpg raises ConnectionRefusedError directly).
        """
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            await self.db.rollback()
            logger.error(
                f"{self.resource_type} {operation} failed: {e}",
                extra={"resource": self.resource_type, "operation": operation},
            )
            raise DatabaseError(
                f"{self.resource_type} {operation} could not be completed",
                operation,
            ) from e
