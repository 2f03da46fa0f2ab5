"""Responses controller: maps service results to HTTP responses."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status

from parley.config import Settings
from parley.exceptions import (
    InvalidStatusTransitionError,
    MalformedIdentifierError,
    RequiredAnswersMissingError,
    ResponseAlreadyTerminalError,
    ResponseNotFoundError,
    SurveyNotActiveError,
    SurveyNotFoundError,
    UnknownQuestionError,
)
from parley.responses import service
from parley.responses.lifecycle import DIRECT_SUBMIT_STATUSES
from parley.responses.schemas import (
    CreateResponseRequest,
    RecordAnswerRequest,
    ResponseRecord,
)
from parley.store import RecordStore
from parley.surveys.resolver import resolve_survey

logger = logging.getLogger(__name__)


def _handle_domain_error(exc: Exception) -> HTTPException:
    if isinstance(exc, SurveyNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Survey not found.")
    if isinstance(exc, ResponseNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Response not found.")
    if isinstance(exc, SurveyNotActiveError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Survey is not accepting responses.",
        )
    if isinstance(exc, ResponseAlreadyTerminalError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(
        exc,
        (
            InvalidStatusTransitionError,
            RequiredAnswersMissingError,
            UnknownQuestionError,
            MalformedIdentifierError,
        ),
    ):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    logger.exception("Unexpected error in responses controller")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error.")


async def create_response(
    store: RecordStore,
    settings: Settings,
    body: CreateResponseRequest,
) -> ResponseRecord:
    try:
        survey = await resolve_survey(
            store, body.survey_id, reject_ambiguous=settings.reject_ambiguous_identifiers,
        )
        # From here on only survey.id is used; body.survey_id is never written.
        if body.answers is not None and body.status in DIRECT_SUBMIT_STATUSES:
            return await service.submit_direct_response(
                store, survey, body.answers, body.status, respondent_id=body.respondent_id,
            )
        return await service.start_response(store, survey, respondent_id=body.respondent_id)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def get_response(store: RecordStore, response_id: UUID) -> ResponseRecord:
    try:
        return await service.get_response(store, response_id)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def record_answer(
    store: RecordStore,
    response_id: UUID,
    body: RecordAnswerRequest,
) -> ResponseRecord:
    try:
        return await service.record_answer(store, response_id, body.question_id, body.value)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def go_back(store: RecordStore, response_id: UUID) -> ResponseRecord:
    try:
        return await service.go_back(store, response_id)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def complete_response(store: RecordStore, response_id: UUID) -> ResponseRecord:
    try:
        return await service.complete_response(store, response_id)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def mark_partial(store: RecordStore, response_id: UUID) -> ResponseRecord:
    try:
        return await service.mark_partial(store, response_id)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc
