from parley.store.base import (
    AmbiguousMatchError,
    Record,
    RecordNotFoundError,
    RecordStore,
    UnknownCollectionError,
)
from parley.store.memory import MemoryRecordStore
from parley.store.predicates import And, Eq, IEq, Or, OrderBy, Predicate

__all__ = [
    "AmbiguousMatchError",
    "And",
    "Eq",
    "IEq",
    "MemoryRecordStore",
    "Or",
    "OrderBy",
    "Predicate",
    "Record",
    "RecordNotFoundError",
    "RecordStore",
    "UnknownCollectionError",
]
