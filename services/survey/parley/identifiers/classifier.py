"""Classify raw survey identifiers.

A survey is reachable by two disjoint identifier shapes: its canonical UUID
(8-4-4-4-12 hex, hyphens mandatory) and its short code (4-8 characters from
an alphabet without 0, O, 1, I and L). Both checks are case-insensitive.
Anything else is ambiguous.
"""

from __future__ import annotations

import enum
import re

# Digits 2-9 and upper-case letters minus the visually confusable O, I and L.
SHORT_CODE_ALPHABET = "23456789ABCDEFGHJKMNPQRSTUVWXYZ"
SHORT_CODE_MIN_LENGTH = 4
SHORT_CODE_MAX_LENGTH = 8

# \Z rather than $ so a trailing newline never sneaks through.
_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\Z",
    re.IGNORECASE | re.ASCII,
)
_SHORT_CODE_RE = re.compile(
    rf"[{SHORT_CODE_ALPHABET}]{{{SHORT_CODE_MIN_LENGTH},{SHORT_CODE_MAX_LENGTH}}}\Z",
    re.IGNORECASE | re.ASCII,
)


class IdentifierKind(str, enum.Enum):
    UUID = "uuid"
    SHORT_CODE = "short_code"
    AMBIGUOUS = "ambiguous"


def is_uuid(raw: str) -> bool:
    return _UUID_RE.match(raw) is not None


def is_short_code(raw: str) -> bool:
    return _SHORT_CODE_RE.match(raw) is not None


def classify(raw: str) -> IdentifierKind:
    uuid_shaped = is_uuid(raw)
    code_shaped = is_short_code(raw)
    if uuid_shaped and code_shaped:
        # The two shapes cannot overlap: a UUID is 36 characters with hyphens.
        raise RuntimeError(f"identifier {raw!r} matched both UUID and short-code shapes")
    if uuid_shaped:
        return IdentifierKind.UUID
    if code_shaped:
        return IdentifierKind.SHORT_CODE
    return IdentifierKind.AMBIGUOUS
