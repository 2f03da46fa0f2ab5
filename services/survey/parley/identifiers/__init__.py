from parley.identifiers.classifier import (
    SHORT_CODE_ALPHABET,
    IdentifierKind,
    classify,
    is_short_code,
    is_uuid,
)
from parley.identifiers.generator import generate_creator_alias, generate_short_code

__all__ = [
    "SHORT_CODE_ALPHABET",
    "IdentifierKind",
    "classify",
    "generate_creator_alias",
    "generate_short_code",
    "is_short_code",
    "is_uuid",
]
