from collections.abc import Generator
from typing import Any

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from parley.config import Settings
from parley.main import create_app
from parley.models.enums import QuestionType, SurveyStatus
from parley.store import MemoryRecordStore
from parley.surveys.schemas import QuestionSchema, SurveyRecord
from parley.surveys.service import create_survey


@pytest.fixture
def settings() -> Settings:
    return Settings(store_backend="memory", env_name="development")


@pytest_asyncio.fixture
async def store() -> MemoryRecordStore:
    return MemoryRecordStore()


def make_questions(*rows: tuple[str, QuestionType, bool]) -> list[QuestionSchema]:
    return [
        QuestionSchema(id=qid, type=qtype, text=f"Question {qid}", required=required)
        for qid, qtype, required in rows
    ]


DEFAULT_QUESTIONS = (
    ("q1", QuestionType.TEXT, True),
    ("q2", QuestionType.RATING, False),
    ("q3", QuestionType.MULTIPLE_CHOICE, False),
)


@pytest_asyncio.fixture
async def make_survey(store: MemoryRecordStore, settings: Settings):
    async def _make(
        *,
        status: SurveyStatus = SurveyStatus.ACTIVE,
        questions: tuple = DEFAULT_QUESTIONS,
        **kwargs: Any,
    ) -> SurveyRecord:
        return await create_survey(
            store,
            settings,
            title=kwargs.pop("title", "Customer feedback"),
            questions=make_questions(*questions),
            status=status,
            **kwargs,
        )

    return _make


@pytest_asyncio.fixture
async def active_survey(make_survey) -> SurveyRecord:
    return await make_survey()


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    with TestClient(create_app(settings)) as c:
        yield c
