"""RecordStore over SQLAlchemy Core and an AsyncSession.

Collections are table names in the shared ``Base.metadata``. The session's
transaction is owned by the caller (see ``parley.store.dependencies``).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import (
    ColumnElement,
    String,
    Table,
    Uuid,
    and_,
    cast,
    func,
    insert,
    or_,
    select,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession

from parley.store.base import (
    AmbiguousMatchError,
    Record,
    RecordNotFoundError,
    UnknownCollectionError,
)
from parley.store.predicates import And, Eq, IEq, Or, OrderBy, Predicate
from shared.database.postgres import Base

# Registers the tables on Base.metadata.
import parley.models  # noqa: E402, F401


def _table(collection: str) -> Table:
    try:
        return Base.metadata.tables[collection]
    except KeyError:
        raise UnknownCollectionError(collection) from None


def _as_text(column: Any) -> ColumnElement:
    if isinstance(column.type, Uuid):
        return cast(column, String)
    return column


def build_clause(table: Table, predicate: Predicate) -> ColumnElement[bool]:
    """Translate a predicate into a SQL boolean expression on ``table``."""
    if isinstance(predicate, Eq):
        column = table.c[predicate.field]
        # Strings against UUID columns compare as text: no cast error, no match.
        if isinstance(column.type, Uuid) and not isinstance(predicate.value, UUID):
            return _as_text(column) == predicate.value
        return column == predicate.value
    if isinstance(predicate, IEq):
        column = table.c[predicate.field]
        return func.lower(_as_text(column)) == predicate.value.lower()
    if isinstance(predicate, Or):
        return or_(*(build_clause(table, p) for p in predicate.predicates))
    if isinstance(predicate, And):
        return and_(*(build_clause(table, p) for p in predicate.predicates))
    raise TypeError(f"Unsupported predicate: {predicate!r}")


class SqlRecordStore:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_one(self, collection: str, predicate: Predicate) -> Record | None:
        table = _table(collection)
        stmt = select(table).where(build_clause(table, predicate)).limit(2)
        rows = (await self._session.execute(stmt)).mappings().all()
        if len(rows) > 1:
            raise AmbiguousMatchError(collection)
        return dict(rows[0]) if rows else None

    async def find_many(
        self,
        collection: str,
        predicate: Predicate,
        order_by: OrderBy | None = None,
    ) -> list[Record]:
        table = _table(collection)
        stmt = select(table).where(build_clause(table, predicate))
        if order_by is not None:
            column = table.c[order_by.field]
            stmt = stmt.order_by(column.desc() if order_by.descending else column.asc())
        rows = (await self._session.execute(stmt)).mappings().all()
        return [dict(row) for row in rows]

    async def insert(self, collection: str, record: Record) -> Record:
        table = _table(collection)
        stmt = insert(table).values(**record).returning(*table.c)
        row = (await self._session.execute(stmt)).mappings().one()
        return dict(row)

    async def update(self, collection: str, record_id: UUID, fields: Record) -> Record:
        table = _table(collection)
        stmt = (
            update(table)
            .where(table.c.id == record_id)
            .values(**fields)
            .returning(*table.c)
        )
        row = (await self._session.execute(stmt)).mappings().one_or_none()
        if row is None:
            raise RecordNotFoundError(collection, record_id)
        return dict(row)
