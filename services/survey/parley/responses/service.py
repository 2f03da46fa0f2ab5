"""Response lifecycle service: the only writer of response records.

Every function that creates a response takes a resolved ``SurveyRecord``
and uses its ``id``; none accepts a raw survey identifier.

Pure business logic, no FastAPI imports.
"""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from parley.exceptions import (
    InvalidStatusTransitionError,
    RequiredAnswersMissingError,
    ResponseNotFoundError,
    SurveyNotActiveError,
    UnknownQuestionError,
)
from parley.models.enums import ResponseStatus, SurveyStatus
from parley.responses.lifecycle import (
    DIRECT_SUBMIT_STATUSES,
    missing_required_answers,
    next_index,
    previous_index,
    transition,
)
from parley.responses.schemas import ResponseRecord
from parley.store import And, Eq, OrderBy, RecordStore
from parley.surveys.schemas import SurveyRecord
from parley.surveys.service import get_survey_by_id

logger = logging.getLogger(__name__)

RESPONSES = "responses"


def _new_respondent_id() -> str:
    return secrets.token_urlsafe(9)  # 12 characters


def _ensure_accepting(survey: SurveyRecord) -> None:
    if survey.status != SurveyStatus.ACTIVE:
        raise SurveyNotActiveError(str(survey.id), survey.status.value)


def _ensure_known_questions(survey: SurveyRecord, question_ids: Any) -> None:
    known = set(survey.question_ids)
    for question_id in question_ids:
        if question_id not in known:
            raise UnknownQuestionError(question_id)


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


async def start_response(
    store: RecordStore,
    survey: SurveyRecord,
    respondent_id: str | None = None,
) -> ResponseRecord:
    """Open an in-progress session on an active survey.

    Callers holding an in-progress response id should keep using it rather
    than starting another one.
    """
    _ensure_accepting(survey)
    row = await store.insert(
        RESPONSES,
        {
            "survey_id": survey.id,
            "respondent_id": respondent_id or _new_respondent_id(),
            "answers": {},
            "status": ResponseStatus.IN_PROGRESS,
            "current_question_index": 0,
            "started_at": datetime.now(timezone.utc),
            "completed_at": None,
        },
    )
    response = ResponseRecord.model_validate(row)
    logger.info("Started response %s for survey %s", response.id, survey.id)
    return response


async def submit_direct_response(
    store: RecordStore,
    survey: SurveyRecord,
    answers: dict[str, Any],
    status: ResponseStatus,
    respondent_id: str | None = None,
) -> ResponseRecord:
    """Create an already-final response in one write (form mode)."""
    _ensure_accepting(survey)
    if status not in DIRECT_SUBMIT_STATUSES:
        raise InvalidStatusTransitionError("not_started", status.value)
    _ensure_known_questions(survey, answers)
    if status == ResponseStatus.COMPLETED:
        missing = missing_required_answers(survey, answers)
        if missing:
            raise RequiredAnswersMissingError(missing)

    now = datetime.now(timezone.utc)
    row = await store.insert(
        RESPONSES,
        {
            "survey_id": survey.id,
            "respondent_id": respondent_id or _new_respondent_id(),
            "answers": dict(answers),
            "status": status,
            "current_question_index": 0,
            "started_at": now,
            "completed_at": now if status == ResponseStatus.COMPLETED else None,
        },
    )
    response = ResponseRecord.model_validate(row)
    logger.info("Recorded %s form response %s for survey %s", status.value, response.id, survey.id)
    return response


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


async def get_response(store: RecordStore, response_id: UUID) -> ResponseRecord:
    row = await store.find_one(RESPONSES, Eq("id", response_id))
    if row is None:
        raise ResponseNotFoundError(str(response_id))
    return ResponseRecord.model_validate(row)


async def list_responses_for_survey(
    store: RecordStore,
    survey_id: UUID | str,
    status: ResponseStatus | None = None,
) -> list[ResponseRecord]:
    """Responses whose ``survey_id`` equals ``survey_id``, newest start first.

    Strict equality on the canonical id: passing a short code finds nothing.
    Resolve aliases before calling.
    """
    predicate = Eq("survey_id", survey_id)
    if status is not None:
        predicate = And(predicate, Eq("status", status))
    rows = await store.find_many(RESPONSES, predicate, OrderBy("started_at", descending=True))
    return [ResponseRecord.model_validate(row) for row in rows]


# ---------------------------------------------------------------------------
# Step-by-step mutations
# ---------------------------------------------------------------------------


async def record_answer(
    store: RecordStore,
    response_id: UUID,
    question_id: str,
    value: Any,
) -> ResponseRecord:
    """Store one answer and advance the question pointer in a single write.

    Re-sending the same answer overwrites it, but advances the pointer again.
    """
    response = await get_response(store, response_id)
    transition(response, ResponseStatus.IN_PROGRESS)
    survey = await get_survey_by_id(store, response.survey_id)
    _ensure_known_questions(survey, [question_id])

    answers = {**response.answers, question_id: value}
    index = next_index(response.current_question_index, len(survey.questions))
    row = await store.update(
        RESPONSES,
        response.id,
        {"answers": answers, "current_question_index": index},
    )
    return ResponseRecord.model_validate(row)


async def go_back(store: RecordStore, response_id: UUID) -> ResponseRecord:
    response = await get_response(store, response_id)
    transition(response, ResponseStatus.IN_PROGRESS)
    index = previous_index(response.current_question_index)
    if index == response.current_question_index:
        return response
    row = await store.update(RESPONSES, response.id, {"current_question_index": index})
    return ResponseRecord.model_validate(row)


async def complete_response(store: RecordStore, response_id: UUID) -> ResponseRecord:
    """Finish the session. The question pointer is left where it was."""
    response = await get_response(store, response_id)
    target = transition(response, ResponseStatus.COMPLETED)
    survey = await get_survey_by_id(store, response.survey_id)
    missing = missing_required_answers(survey, response.answers)
    if missing:
        raise RequiredAnswersMissingError(missing)

    row = await store.update(
        RESPONSES,
        response.id,
        {"status": target, "completed_at": datetime.now(timezone.utc)},
    )
    logger.info("Completed response %s for survey %s", response.id, response.survey_id)
    return ResponseRecord.model_validate(row)


async def mark_partial(store: RecordStore, response_id: UUID) -> ResponseRecord:
    """Close a session the respondent walked away from; keeps its answers."""
    response = await get_response(store, response_id)
    target = transition(response, ResponseStatus.PARTIAL)
    row = await store.update(RESPONSES, response.id, {"status": target})
    logger.info("Marked response %s partial", response.id)
    return ResponseRecord.model_validate(row)
