"""Record-store contract shared by every entity.

Every call is scoped by the owning user's id; a repository never returns
or touches another user's rows.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from app.core.errors import RecordNotFoundError, RecordStoreError
from app.utils.dates import utcnow
from app.utils.ids import new_record_id

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

OrderBy = dict[str, str]  # {"created_at": "desc"}


class RecordRepository(ABC, Generic[T]):
    """list / get / create / update / delete over one entity type."""

    entity: str

    @abstractmethod
    async def list(
        self,
        user_id: str,
        where: Optional[dict[str, Any]] = None,
        order_by: Optional[OrderBy] = None,
    ) -> list[T]:
        ...

    @abstractmethod
    async def get(self, user_id: str, record_id: str) -> T:
        ...

    @abstractmethod
    async def create(self, user_id: str, fields: dict[str, Any]) -> T:
        ...

    @abstractmethod
    async def update(self, user_id: str, record_id: str, fields: dict[str, Any]) -> T:
        ...

    @abstractmethod
    async def delete(self, user_id: str, record_id: str) -> None:
        ...


class SqlAlchemyRepository(RecordRepository[T]):
    """Repository backed by an async SQLAlchemy model.

    Each call opens its own session so several list() calls can run
    concurrently for one view.
    """

    model: type
    schema: type[T]

    def __init__(self, session_factory: async_sessionmaker):
        self._sessions = session_factory

    def _column(self, field: str):
        column = getattr(self.model, field, None)
        if column is None:
            raise ValueError(f"{self.model.__name__} has no field '{field}'")
        return column

    async def list(self, user_id, where=None, order_by=None):
        query = select(self.model).where(self.model.user_id == user_id)
        for field, value in (where or {}).items():
            query = query.where(self._column(field) == value)
        for field, direction in (order_by or {}).items():
            column = self._column(field)
            query = query.order_by(column.desc() if direction == "desc" else column.asc())

        try:
            async with self._sessions() as db:
                result = await db.execute(query)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Failed to list %s records for user %s: %s", self.entity, user_id, e)
            raise RecordStoreError(f"Could not load {self.entity} records") from e

        return [self.schema.model_validate(row) for row in rows]

    async def _fetch(self, db, user_id: str, record_id: str):
        result = await db.execute(
            select(self.model).where(self.model.id == record_id, self.model.user_id == user_id)
        )
        row = result.scalar_one_or_none()
        if row is None:
            raise RecordNotFoundError(self.entity, record_id)
        return row

    async def get(self, user_id, record_id):
        try:
            async with self._sessions() as db:
                row = await self._fetch(db, user_id, record_id)
        except SQLAlchemyError as e:
            logger.error("Failed to read %s %s: %s", self.entity, record_id, e)
            raise RecordStoreError(f"Could not load {self.entity}") from e
        return self.schema.model_validate(row)

    async def create(self, user_id, fields):
        now = utcnow()
        values = dict(fields)
        values.update(id=new_record_id(self.entity), user_id=user_id, created_at=now)
        if hasattr(self.model, "updated_at"):
            values["updated_at"] = now

        try:
            async with self._sessions() as db:
                row = self.model(**values)
                db.add(row)
                await db.commit()
                await db.refresh(row)
        except SQLAlchemyError as e:
            logger.error("Failed to create %s for user %s: %s", self.entity, user_id, e)
            raise RecordStoreError(f"Could not create {self.entity}") from e

        logger.info("Created %s %s for user %s", self.entity, row.id, user_id)
        return self.schema.model_validate(row)

    async def update(self, user_id, record_id, fields):
        try:
            async with self._sessions() as db:
                row = await self._fetch(db, user_id, record_id)
                for key, value in fields.items():
                    self._column(key)
                    setattr(row, key, value)
                if hasattr(self.model, "updated_at"):
                    row.updated_at = utcnow()
                await db.commit()
                await db.refresh(row)
        except SQLAlchemyError as e:
            logger.error("Failed to update %s %s: %s", self.entity, record_id, e)
            raise RecordStoreError(f"Could not update {self.entity}") from e

        logger.info("Updated %s %s fields=%s", self.entity, record_id, sorted(fields))
        return self.schema.model_validate(row)

    async def delete(self, user_id, record_id):
        try:
            async with self._sessions() as db:
                row = await self._fetch(db, user_id, record_id)
                await db.delete(row)
                await db.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to delete %s %s: %s", self.entity, record_id, e)
            raise RecordStoreError(f"Could not delete {self.entity}") from e

        logger.info("Deleted %s %s for user %s", self.entity, record_id, user_id)
