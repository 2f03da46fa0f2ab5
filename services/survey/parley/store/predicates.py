"""Query predicates understood by every RecordStore implementation.

Only the shapes the survey core needs exist here: equality,
case-insensitive equality, and OR / AND over those.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Eq:
    """Exact equality. A string compared with a UUID field matches its canonical text."""

    field: str
    value: Any


@dataclass(frozen=True)
class IEq:
    """Case-insensitive equality on a text field. No wildcard semantics."""

    field: str
    value: str


@dataclass(frozen=True)
class Or:
    predicates: tuple[Predicate, ...]

    def __init__(self, *predicates: Predicate) -> None:
        object.__setattr__(self, "predicates", tuple(predicates))


@dataclass(frozen=True)
class And:
    predicates: tuple[Predicate, ...]

    def __init__(self, *predicates: Predicate) -> None:
        object.__setattr__(self, "predicates", tuple(predicates))


@dataclass(frozen=True)
class OrderBy:
    field: str
    descending: bool = True


Predicate = Union[Eq, IEq, Or, And]
