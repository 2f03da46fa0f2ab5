import pytest
from pydantic import ValidationError

from parley.config import Settings
from parley.identifiers.classifier import IdentifierKind, classify
from parley.identifiers.service import issue_short_code
from parley.main import create_app
from parley.rate_limit import limiter


@pytest.mark.parametrize(
    "overrides",
    [
        {"short_code_max_length": 9},
        {"short_code_min_length": 3},
        {"short_code_min_length": 9},
        {"short_code_min_length": 6, "short_code_max_length": 5},
        {"short_code_attempts_per_length": 0},
        {"creator_alias_attempts": 0},
    ],
)
def test_generator_bounds_are_validated(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(store_backend="memory", **overrides)


class TakenUpToStore:
    """Reports every short code up to ``length`` characters as taken."""

    def __init__(self, length: int) -> None:
        self.length = length

    async def find_one(self, collection, predicate):
        return {"id": "taken"} if len(predicate.value) <= self.length else None


@pytest.mark.asyncio
async def test_issued_short_code_stays_classifiable() -> None:
    settings = Settings(store_backend="memory", short_code_min_length=7)
    code = await issue_short_code(TakenUpToStore(7), settings)
    assert len(code) == 8
    assert classify(code) is IdentifierKind.SHORT_CODE


@pytest.mark.parametrize(("env_name", "enabled"), [("development", False), ("production", True)])
def test_rate_limiter_follows_env_name(monkeypatch, env_name: str, enabled: bool) -> None:
    monkeypatch.setattr(limiter, "enabled", limiter.enabled)
    create_app(Settings(store_backend="memory", env_name=env_name))
    assert limiter.enabled is enabled
