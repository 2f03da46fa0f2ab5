"""Responses router: HTTP layer for the respondent session lifecycle.

Delegates to controller for business logic orchestration.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from parley.config import Settings
from parley.dependencies import get_app_settings
from parley.rate_limit import limiter
from parley.responses import controller
from parley.responses.schemas import (
    CreateResponseRequest,
    RecordAnswerRequest,
    ResponseRecord,
)
from parley.store import RecordStore
from parley.store.dependencies import get_store

router = APIRouter(prefix="/responses", tags=["Responses"])


@router.post(
    "",
    response_model=ResponseRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Start a response session or submit a form",
    description="`survey_id` may be the survey UUID or its short code. "
    "With `answers` and a `completed`/`partial` status the response is created final; "
    "otherwise an in-progress session starts at question 0.",
)
@limiter.limit("30/minute")
async def create_response(
    request: Request,
    body: CreateResponseRequest,
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ResponseRecord:
    return await controller.create_response(store, settings, body)


@router.get(
    "/{response_id}",
    response_model=ResponseRecord,
    summary="Get a response",
)
async def get_response(
    response_id: UUID,
    store: RecordStore = Depends(get_store),
) -> ResponseRecord:
    return await controller.get_response(store, response_id)


@router.post(
    "/{response_id}/answers",
    response_model=ResponseRecord,
    summary="Save an answer and move to the next question",
)
async def record_answer(
    response_id: UUID,
    body: RecordAnswerRequest,
    store: RecordStore = Depends(get_store),
) -> ResponseRecord:
    return await controller.record_answer(store, response_id, body)


@router.post(
    "/{response_id}/back",
    response_model=ResponseRecord,
    summary="Go back one question",
)
async def go_back(
    response_id: UUID,
    store: RecordStore = Depends(get_store),
) -> ResponseRecord:
    return await controller.go_back(store, response_id)


@router.post(
    "/{response_id}/complete",
    response_model=ResponseRecord,
    summary="Complete the response",
    description="Rejected when a required question has no answer.",
)
async def complete_response(
    response_id: UUID,
    store: RecordStore = Depends(get_store),
) -> ResponseRecord:
    return await controller.complete_response(store, response_id)


@router.post(
    "/{response_id}/partial",
    response_model=ResponseRecord,
    summary="Close the response as partial",
)
async def mark_partial(
    response_id: UUID,
    store: RecordStore = Depends(get_store),
) -> ResponseRecord:
    return await controller.mark_partial(store, response_id)
