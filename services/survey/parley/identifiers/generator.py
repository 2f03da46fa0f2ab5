"""Issue new short codes and creator aliases at survey-creation time.

Both generators make one store round trip per candidate. Collisions are rare
in steady state because both spaces are large compared to survey volume.
"""

from __future__ import annotations

import logging
import random
import secrets
import time

from parley.exceptions import IdentifierSpaceExhaustedError
from parley.identifiers.classifier import (
    SHORT_CODE_ALPHABET,
    SHORT_CODE_MAX_LENGTH,
    SHORT_CODE_MIN_LENGTH,
)
from parley.identifiers.pet_names import pool_for
from parley.store import Eq, IEq, RecordStore

logger = logging.getLogger(__name__)

SURVEYS = "surveys"
SHORT_CODE_ATTEMPTS_PER_LENGTH = 10
CREATOR_ALIAS_ATTEMPTS = 10

_system_random = secrets.SystemRandom()


def random_short_code(length: int, rng: random.Random | None = None) -> str:
    rng = rng or _system_random
    return "".join(rng.choice(SHORT_CODE_ALPHABET) for _ in range(length))


async def generate_short_code(
    store: RecordStore,
    *,
    min_length: int = SHORT_CODE_MIN_LENGTH,
    max_length: int = SHORT_CODE_MAX_LENGTH,
    attempts_per_length: int = SHORT_CODE_ATTEMPTS_PER_LENGTH,
    rng: random.Random | None = None,
) -> str:
    """Return a short code no existing survey uses (case-insensitively).

    Starts at ``min_length``; after ``attempts_per_length`` collisions the
    length grows by one, up to ``max_length``.

    Raises:
        IdentifierSpaceExhaustedError: every attempt at ``max_length`` collided.
    """
    for length in range(min_length, max_length + 1):
        for _ in range(attempts_per_length):
            candidate = random_short_code(length, rng)
            if await store.find_one(SURVEYS, IEq("short_code", candidate)) is None:
                return candidate
        logger.warning(
            "Short code space crowded at length %d after %d attempts; growing",
            length, attempts_per_length,
        )
    logger.critical(
        "Short code space exhausted: no free code up to length %d. "
        "Widen the alphabet or raise the length ceiling.",
        max_length,
    )
    raise IdentifierSpaceExhaustedError(
        f"No unused short code found up to length {max_length}"
    )


async def generate_creator_alias(
    store: RecordStore,
    language: str = "en",
    *,
    attempts: int = CREATOR_ALIAS_ATTEMPTS,
    rng: random.Random | None = None,
) -> str:
    """Return a pet name plus 3-digit suffix that no survey's creator uses.

    After ``attempts`` collisions falls back to a time-derived suffix so the
    call always terminates; that fallback is not checked for uniqueness.
    """
    rng = rng or _system_random
    pool = pool_for(language)
    for _ in range(attempts):
        candidate = f"{rng.choice(pool)}{rng.randrange(1000):03d}"
        if await store.find_one(SURVEYS, Eq("creator_name", candidate)) is None:
            return candidate
    logger.warning("Creator alias pool crowded after %d attempts; using time suffix", attempts)
    return f"{rng.choice(pool)}{int(time.time() * 1000) % 10000}"
