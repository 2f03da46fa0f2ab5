"""The record-store boundary.

The survey core talks to persistence only through these four operations.
Records are plain dicts keyed by column name; each collection has an ``id``
primary key.
"""

from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from parley.store.predicates import OrderBy, Predicate

Record = dict[str, Any]


class RecordNotFoundError(Exception):
    def __init__(self, collection: str, record_id: Any):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"No record {record_id} in {collection}")


class AmbiguousMatchError(Exception):
    """Raised by find_one when the predicate matches more than one record."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"More than one record in {collection} matched a single-record lookup")


class UnknownCollectionError(Exception):
    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Unknown collection: {collection}")


class RecordStore(Protocol):
    async def find_one(self, collection: str, predicate: Predicate) -> Record | None:
        ...

    async def find_many(
        self,
        collection: str,
        predicate: Predicate,
        order_by: OrderBy | None = None,
    ) -> list[Record]:
        ...

    async def insert(self, collection: str, record: Record) -> Record:
        """Insert and return the stored record, including its server-assigned id."""
        ...

    async def update(self, collection: str, record_id: UUID, fields: Record) -> Record:
        """Apply every field in one atomic write and return the updated record."""
        ...
