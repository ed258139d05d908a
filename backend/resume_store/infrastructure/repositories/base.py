"""SQLAlchemy Repository Base: CRUD, pagination and error wrapping shared by every entity.

Invariants:
    - Every operation opens its own AsyncSession and closes it before returning
    - Every failure leaves as RepositoryError(operation, entity, cause) and is
      logged with entity, operation and error_code
    - asyncio.CancelledError is never caught, so cancellation aborts the query
    - create/update return a fresh record; the caller's record is not mutated
    - update and delete never insert; a missing row is NotFoundError
    - Result ordering always ends with the primary key

Design Decisions:
    - Subclasses supply model, record type, filter type, predicates and ordering
    - Rows are converted to records while the session is still open
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, ClassVar, Generic, Iterator, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from resume_store.core.domain_types import EntityName
from resume_store.core.errors import (
    EntityValidationError, ErrorKind, NotFoundError, RepositoryError,
    ResumeStoreError,
)
from resume_store.db.base import Base, utcnow
from resume_store.schemas.base import EntityRecord

RecordT = TypeVar("RecordT", bound=EntityRecord)
FiltersT = TypeVar("FiltersT", bound=BaseModel)

logger = logging.getLogger(__name__)

# Driver connection failures surface as OSError subclasses
WRAPPED_ERRORS = (SQLAlchemyError, OSError, ResumeStoreError)


class SqlAlchemyRepository(Generic[RecordT, FiltersT]):
    """Generic async repository over one ORM model."""

    entity: ClassVar[EntityName]
    model: ClassVar[type[Base]]
    record_type: ClassVar[type[EntityRecord]]
    filters_type: ClassVar[type[BaseModel]]
    required_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._sessions = session_factory

    # ---------- Hooks ----------
    def _conditions(self, filters: FiltersT) -> list[ColumnElement[bool]]:
        return []

    def _ordering(self) -> tuple:
        return (self.model.id,)

    # ---------- Queries ----------
    async def get_all(self, filters: FiltersT | None = None) -> list[RecordT]:
        if filters is None:
            filters = self.filters_type()
        stmt = self._paginate(self._select(filters), filters)
        with self._wrap("get_all"):
            async with self._sessions() as session:
                rows = (await session.scalars(stmt)).all()
                return [self._to_record(row) for row in rows]

    async def get_by_id(self, entity_id: int) -> RecordT:
        with self._wrap("get_by_id"):
            self._check_id(entity_id)
            async with self._sessions() as session:
                row = await session.get(self.model, entity_id)
                if row is None:
                    raise NotFoundError(self.entity.value, entity_id)
                return self._to_record(row)

    # ---------- CRUD ----------
    async def create(self, entity: RecordT) -> RecordT:
        with self._wrap("create"):
            self._check_required(entity)
            row = self.model()
            self._apply(row, entity)
            async with self._sessions() as session:
                session.add(row)
                await session.commit()
                return self._to_record(row)

    async def update(self, entity: RecordT) -> RecordT:
        with self._wrap("update"):
            if entity.id is None:
                raise EntityValidationError(
                    self.entity.value, "id", "is required for update",
                )
            self._check_id(entity.id)
            self._check_required(entity)
            async with self._sessions() as session:
                row = await session.get(self.model, entity.id)
                if row is None:
                    raise NotFoundError(self.entity.value, entity.id)
                self._apply(row, entity)
                row.updated_at = utcnow()
                await session.commit()
                return self._to_record(row)

    async def delete(self, entity_id: int) -> None:
        with self._wrap("delete"):
            self._check_id(entity_id)
            async with self._sessions() as session:
                row = await session.get(self.model, entity_id)
                if row is None:
                    raise NotFoundError(self.entity.value, entity_id)
                await session.delete(row)
                await session.commit()

    # ---------- Helpers ----------
    @contextmanager
    def _wrap(self, operation: str) -> Iterator[None]:
        try:
            yield
        except WRAPPED_ERRORS as exc:
            err = RepositoryError(operation, self.entity.value, exc)
            # Storage failures at ERROR, caller mistakes at INFO
            level = (
                logging.ERROR if err.kind is ErrorKind.STORAGE_UNAVAILABLE
                else logging.INFO
            )
            logger.log(
                level, f"{self.entity.value} {operation} failed: {exc}",
                extra={
                    "entity": self.entity.value,
                    "operation": operation,
                    "error_code": err.code,
                },
            )
            raise err from exc

    def _select(self, filters: FiltersT) -> Select:
        stmt = select(self.model)
        conditions = self._conditions(filters)
        if conditions:
            stmt = stmt.where(*conditions)
        return stmt.order_by(*self._ordering())

    @staticmethod
    def _paginate(stmt: Select, filters: Any) -> Select:
        if filters.limit:
            stmt = stmt.limit(filters.limit)
        if filters.offset:
            stmt = stmt.offset(filters.offset)
        return stmt

    def _check_id(self, entity_id: Any) -> None:
        if isinstance(entity_id, bool) or not isinstance(entity_id, int) or entity_id <= 0:
            raise EntityValidationError(
                self.entity.value, "id", f"must be a positive integer, got {entity_id!r}",
            )

    def _check_required(self, entity: EntityRecord) -> None:
        for name in self.required_fields:
            value = getattr(entity, name, None)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise EntityValidationError(self.entity.value, name, "is required")

    def _apply(self, row: Base, entity: EntityRecord) -> None:
        for name in self.record_type.writable_fields():
            value = getattr(entity, name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, list):
                value = list(value)
            setattr(row, name, value)

    def _to_record(self, row: Base) -> RecordT:
        return self.record_type.model_validate(row)
