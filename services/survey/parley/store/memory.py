"""Dict-backed RecordStore with the same predicate semantics as SqlRecordStore."""

from __future__ import annotations

import copy
import itertools
from collections import defaultdict
from typing import Any
from uuid import UUID, uuid4

from parley.store.base import AmbiguousMatchError, Record, RecordNotFoundError
from parley.store.predicates import And, Eq, IEq, Or, OrderBy, Predicate

_SEQ = "_seq"


def _equals(stored: Any, value: Any) -> bool:
    if isinstance(stored, UUID) and isinstance(value, str):
        return str(stored) == value
    return stored == value


def _iequals(stored: Any, value: str) -> bool:
    if stored is None:
        return False
    return str(stored).lower() == value.lower()


def matches(record: Record, predicate: Predicate) -> bool:
    if isinstance(predicate, Eq):
        return _equals(record.get(predicate.field), predicate.value)
    if isinstance(predicate, IEq):
        return _iequals(record.get(predicate.field), predicate.value)
    if isinstance(predicate, Or):
        return any(matches(record, p) for p in predicate.predicates)
    if isinstance(predicate, And):
        return all(matches(record, p) for p in predicate.predicates)
    raise TypeError(f"Unsupported predicate: {predicate!r}")


class MemoryRecordStore:
    def __init__(self) -> None:
        self._collections: dict[str, dict[UUID, Record]] = defaultdict(dict)
        self._sequence = itertools.count()

    @staticmethod
    def _public(row: Record) -> Record:
        return {k: copy.deepcopy(v) for k, v in row.items() if k != _SEQ}

    async def find_one(self, collection: str, predicate: Predicate) -> Record | None:
        found = [row for row in self._collections[collection].values() if matches(row, predicate)]
        if len(found) > 1:
            raise AmbiguousMatchError(collection)
        return self._public(found[0]) if found else None

    async def find_many(
        self,
        collection: str,
        predicate: Predicate,
        order_by: OrderBy | None = None,
    ) -> list[Record]:
        rows = [row for row in self._collections[collection].values() if matches(row, predicate)]
        if order_by is not None:
            rows.sort(
                key=lambda row: (row.get(order_by.field), row[_SEQ]),
                reverse=order_by.descending,
            )
        return [self._public(row) for row in rows]

    async def insert(self, collection: str, record: Record) -> Record:
        row = copy.deepcopy(record)
        row.setdefault("id", uuid4())
        if row["id"] in self._collections[collection]:
            raise ValueError(f"Duplicate id {row['id']} in {collection}")
        row[_SEQ] = next(self._sequence)
        self._collections[collection][row["id"]] = row
        return self._public(row)

    async def update(self, collection: str, record_id: UUID, fields: Record) -> Record:
        rows = self._collections[collection]
        if record_id not in rows:
            raise RecordNotFoundError(collection, record_id)
        updated = {**rows[record_id], **copy.deepcopy(fields)}
        rows[record_id] = updated
        return self._public(updated)
