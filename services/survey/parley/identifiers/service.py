"""Entry points used at survey-creation time, wired to configuration."""

from __future__ import annotations

from parley.config import Settings
from parley.identifiers.generator import generate_creator_alias, generate_short_code
from parley.store import RecordStore


async def issue_short_code(store: RecordStore, settings: Settings) -> str:
    return await generate_short_code(
        store,
        min_length=settings.short_code_min_length,
        max_length=settings.short_code_max_length,
        attempts_per_length=settings.short_code_attempts_per_length,
    )


async def issue_creator_alias(store: RecordStore, language: str, settings: Settings) -> str:
    return await generate_creator_alias(
        store,
        language,
        attempts=settings.creator_alias_attempts,
    )
