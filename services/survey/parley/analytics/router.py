"""Analytics router: read-only aggregates over a survey's responses."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from parley.analytics import controller
from parley.analytics.schemas import QuestionStats, SurveyOverview
from parley.config import Settings
from parley.dependencies import get_app_settings
from parley.store import RecordStore
from parley.store.dependencies import get_store

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/surveys/{identifier}/overview",
    response_model=SurveyOverview,
    summary="Response counts and completion rate",
)
async def get_overview(
    identifier: str,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SurveyOverview:
    return await controller.get_overview(store, settings, identifier)


@router.get(
    "/surveys/{identifier}/questions/{question_id}",
    response_model=QuestionStats,
    summary="Aggregated answers for one question",
    description="Distribution for choice questions, average/min/max for numeric ones, "
    "sample answers for free text.",
)
async def get_question_stats(
    identifier: str,
    question_id: str,
    completed_only: bool = Query(default=True),
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> QuestionStats:
    return await controller.get_question_stats(
        store, settings, identifier, question_id, completed_only,
    )
