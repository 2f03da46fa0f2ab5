"""Surveys router: HTTP layer for survey creation, lookup and updates.

Every ``{identifier}`` path segment may be a UUID or a short code; it is
resolved to the canonical survey before anything else happens.
"""

from fastapi import APIRouter, Depends, Query, Request, status

from parley.config import Settings
from parley.dependencies import get_app_settings
from parley.rate_limit import limiter
from parley.responses.schemas import ResponseRecord
from parley.store import RecordStore
from parley.store.dependencies import get_store
from parley.surveys import controller
from parley.surveys.schemas import (
    CreateSurveyRequest,
    LinkageReport,
    SurveyRecord,
    UpdateSurveyRequest,
)

router = APIRouter(prefix="/surveys", tags=["Surveys"])


@router.post(
    "",
    response_model=SurveyRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Create a survey",
    description="Issues a short code, and a creator alias when none is supplied.",
)
@limiter.limit("10/minute")
async def create_survey(
    request: Request,
    body: CreateSurveyRequest,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SurveyRecord:
    return await controller.create_survey(store, settings, body)


@router.get(
    "",
    response_model=list[SurveyRecord],
    summary="List a creator's surveys, newest first",
)
async def list_surveys(
    creator_name: str = Query(min_length=1, max_length=100),
    store: RecordStore = Depends(get_store),
) -> list[SurveyRecord]:
    return await controller.list_surveys(store, creator_name)


@router.get(
    "/{identifier}",
    response_model=SurveyRecord,
    summary="Get a survey by UUID or short code",
)
async def get_survey(
    identifier: str,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SurveyRecord:
    return await controller.get_survey(store, settings, identifier)


@router.patch(
    "/{identifier}",
    response_model=SurveyRecord,
    summary="Update a survey",
    description="Title, description, questions (including their order), settings and status.",
)
async def update_survey(
    identifier: str,
    body: UpdateSurveyRequest,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> SurveyRecord:
    return await controller.update_survey(store, settings, identifier, body)


@router.get(
    "/{identifier}/responses",
    response_model=list[ResponseRecord],
    summary="List a survey's responses, most recently started first",
)
async def list_survey_responses(
    identifier: str,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> list[ResponseRecord]:
    return await controller.list_survey_responses(store, settings, identifier)


@router.get(
    "/{identifier}/linkage",
    response_model=LinkageReport,
    summary="Count responses keyed by survey id versus by short code",
)
async def audit_linkage(
    identifier: str,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> LinkageReport:
    return await controller.audit_linkage(store, settings, identifier)
