"""Surveys controller: maps service results to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from parley.config import Settings
from parley.exceptions import (
    IdentifierSpaceExhaustedError,
    MalformedIdentifierError,
    SurveyNotFoundError,
)
from parley.responses import service as response_service
from parley.responses.schemas import ResponseRecord
from parley.store import RecordStore
from parley.surveys import service
from parley.surveys.resolver import resolve_survey
from parley.surveys.schemas import (
    CreateSurveyRequest,
    LinkageReport,
    SurveyRecord,
    UpdateSurveyRequest,
)

logger = logging.getLogger(__name__)


def _handle_domain_error(exc: Exception) -> HTTPException:
    if isinstance(exc, SurveyNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Survey not found.")
    if isinstance(exc, MalformedIdentifierError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    # Already logged at CRITICAL by the generator.
    if not isinstance(exc, IdentifierSpaceExhaustedError):
        logger.exception("Unexpected error in surveys controller")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error.")


async def create_survey(
    store: RecordStore,
    settings: Settings,
    body: CreateSurveyRequest,
) -> SurveyRecord:
    try:
        return await service.create_survey(
            store,
            settings,
            title=body.title,
            description=body.description,
            questions=body.questions,
            survey_settings=body.settings,
            status=body.status,
            creator_name=body.creator_name,
        )
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def get_survey(
    store: RecordStore,
    settings: Settings,
    identifier: str,
) -> SurveyRecord:
    try:
        return await resolve_survey(
            store, identifier, reject_ambiguous=settings.reject_ambiguous_identifiers,
        )
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def list_surveys(
    store: RecordStore,
    creator_name: str,
) -> list[SurveyRecord]:
    try:
        return await service.list_surveys_for_creator(store, creator_name)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def update_survey(
    store: RecordStore,
    settings: Settings,
    identifier: str,
    body: UpdateSurveyRequest,
) -> SurveyRecord:
    try:
        return await service.update_survey(
            store,
            identifier,
            reject_ambiguous=settings.reject_ambiguous_identifiers,
            **dict(body),
        )
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def list_survey_responses(
    store: RecordStore,
    settings: Settings,
    identifier: str,
) -> list[ResponseRecord]:
    try:
        survey = await resolve_survey(
            store, identifier, reject_ambiguous=settings.reject_ambiguous_identifiers,
        )
        return await response_service.list_responses_for_survey(store, survey.id)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc


async def audit_linkage(
    store: RecordStore,
    settings: Settings,
    identifier: str,
) -> LinkageReport:
    try:
        survey = await resolve_survey(
            store, identifier, reject_ambiguous=settings.reject_ambiguous_identifiers,
        )
        return await service.audit_linkage(store, survey)
    except Exception as exc:
        raise _handle_domain_error(exc) from exc
