"""Analytics controller: resolves the survey, then maps service results to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from parley.analytics import service
from parley.analytics.schemas import QuestionStats, SurveyOverview
from parley.config import Settings
from parley.exceptions import (
    MalformedIdentifierError,
    SurveyNotFoundError,
    UnknownQuestionError,
)
from parley.store import RecordStore
from parley.surveys.resolver import resolve_survey

logger = logging.getLogger(__name__)


def _handle_domain_error(exc: Exception) -> HTTPException:
    if isinstance(exc, SurveyNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Survey not found.")
    if isinstance(exc, UnknownQuestionError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, MalformedIdentifierError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    logger.exception("Unexpected error in analytics controller")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error.")


async def get_overview(
    store: RecordStore,
    settings: Settings,
    identifier: str,
) -> SurveyOverview:
    try:
        survey = await resolve_survey(
            store, identifier, reject_ambiguous=settings.reject_ambiguous_identifiers,
        )
        return await service.survey_overview(store, survey)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def get_question_stats(
    store: RecordStore,
    settings: Settings,
    identifier: str,
    question_id: str,
    completed_only: bool,
) -> QuestionStats:
    try:
        survey = await resolve_survey(
            store, identifier, reject_ambiguous=settings.reject_ambiguous_identifiers,
        )
        return await service.question_stats(
            store, survey, question_id, completed_only=completed_only,
        )
    except Exception as exc:
        raise _handle_domain_error(exc) from exc
