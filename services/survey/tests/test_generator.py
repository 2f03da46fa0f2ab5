import random

import pytest

from parley.exceptions import IdentifierSpaceExhaustedError
from parley.identifiers.classifier import SHORT_CODE_ALPHABET, is_short_code
from parley.identifiers.generator import (
    generate_creator_alias,
    generate_short_code,
    random_short_code,
)
from parley.identifiers.pet_names import CHINESE_PET_NAMES, ENGLISH_PET_NAMES, pool_for
from parley.store import Eq, MemoryRecordStore


class AlwaysTakenStore:
    """Every lookup finds an existing survey."""

    def __init__(self) -> None:
        self.lookups = 0

    async def find_one(self, collection, predicate):
        self.lookups += 1
        return {"id": "taken"}


class TakenUntilStore:
    """Reports a collision for the first ``taken`` lookups."""

    def __init__(self, taken: int) -> None:
        self.taken = taken
        self.lookups: list = []

    async def find_one(self, collection, predicate):
        self.lookups.append(predicate)
        if len(self.lookups) <= self.taken:
            return {"id": "taken"}
        return None


def test_random_short_code_uses_alphabet() -> None:
    code = random_short_code(6, random.Random(1))
    assert len(code) == 6
    assert set(code) <= set(SHORT_CODE_ALPHABET)
    assert is_short_code(code)


@pytest.mark.asyncio
async def test_short_code_starts_at_min_length() -> None:
    code = await generate_short_code(MemoryRecordStore(), rng=random.Random(7))
    assert len(code) == 4
    assert is_short_code(code)


@pytest.mark.asyncio
async def test_short_code_grows_after_collisions() -> None:
    store = TakenUntilStore(taken=10)
    code = await generate_short_code(store, rng=random.Random(7))
    assert len(code) == 5
    assert len(store.lookups) == 11
    assert all(p.field == "short_code" for p in store.lookups)


@pytest.mark.asyncio
async def test_short_code_unique_case_insensitively(store, make_survey) -> None:
    survey = await make_survey()
    rng = random.Random(3)
    first = random_short_code(4, random.Random(3))
    await store.update("surveys", survey.id, {"short_code": first.lower()})
    code = await generate_short_code(store, rng=rng)
    assert code.upper() != first


@pytest.mark.asyncio
async def test_short_code_space_exhausted() -> None:
    store = AlwaysTakenStore()
    with pytest.raises(IdentifierSpaceExhaustedError):
        await generate_short_code(store, min_length=4, max_length=5, attempts_per_length=3)
    assert store.lookups == 6


@pytest.mark.asyncio
async def test_creator_alias_has_three_digit_suffix() -> None:
    alias = await generate_creator_alias(MemoryRecordStore(), "en", rng=random.Random(5))
    name, suffix = alias[:-3], alias[-3:]
    assert name in ENGLISH_PET_NAMES
    assert suffix.isdigit()


@pytest.mark.asyncio
async def test_creator_alias_chinese_pool() -> None:
    alias = await generate_creator_alias(MemoryRecordStore(), "zh-CN", rng=random.Random(5))
    assert alias[:-3] in CHINESE_PET_NAMES


@pytest.mark.asyncio
async def test_creator_alias_skips_existing_creator_name(store, make_survey) -> None:
    rng = random.Random(5)
    taken_alias = f"{rng.choice(ENGLISH_PET_NAMES)}{rng.randrange(1000):03d}"
    await make_survey(creator_name=taken_alias)

    alias = await generate_creator_alias(store, "en", rng=random.Random(5))
    assert alias != taken_alias
    assert alias[-3:].isdigit()


@pytest.mark.asyncio
async def test_creator_alias_lookups_use_exact_creator_name() -> None:
    store = TakenUntilStore(taken=1)
    alias = await generate_creator_alias(store, "en", rng=random.Random(5))
    assert len(store.lookups) == 2
    assert all(p == Eq("creator_name", p.value) for p in store.lookups)
    assert alias == store.lookups[1].value


@pytest.mark.asyncio
async def test_creator_alias_falls_back_after_attempts() -> None:
    store = AlwaysTakenStore()
    alias = await generate_creator_alias(store, "en", attempts=4, rng=random.Random(5))
    assert store.lookups == 4
    assert any(alias.startswith(name) for name in ENGLISH_PET_NAMES)


@pytest.mark.parametrize(
    ("language", "expected"),
    [
        ("zh", CHINESE_PET_NAMES),
        ("zh-TW", CHINESE_PET_NAMES),
        ("ZH_cn", CHINESE_PET_NAMES),
        ("en", ENGLISH_PET_NAMES),
        ("fr", ENGLISH_PET_NAMES),
        ("", ENGLISH_PET_NAMES),
    ],
)
def test_pool_for(language: str, expected: tuple[str, ...]) -> None:
    assert pool_for(language) is expected
