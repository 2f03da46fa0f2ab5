"""Survey service: creation, lookup, updates and linkage audit.

Pure business logic, no FastAPI imports.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from parley.config import Settings
from parley.exceptions import SurveyNotFoundError
from parley.identifiers.service import issue_creator_alias, issue_short_code
from parley.models.enums import SurveyStatus
from parley.store import Eq, OrderBy, RecordStore
from parley.surveys.resolver import SURVEYS, resolve_survey
from parley.surveys.schemas import (
    LinkageReport,
    QuestionSchema,
    SurveyRecord,
    SurveySettingsSchema,
)

logger = logging.getLogger(__name__)

RESPONSES = "responses"

_UPDATABLE_FIELDS = frozenset({"title", "description", "questions", "settings", "status"})


def _dump_questions(questions: list[QuestionSchema]) -> list[dict]:
    return [q.model_dump(mode="json", exclude_none=True) for q in questions]


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


async def create_survey(
    store: RecordStore,
    settings: Settings,
    *,
    title: str,
    questions: list[QuestionSchema],
    description: str | None = None,
    survey_settings: SurveySettingsSchema | None = None,
    status: SurveyStatus = SurveyStatus.DRAFT,
    creator_name: str | None = None,
) -> SurveyRecord:
    survey_settings = survey_settings or SurveySettingsSchema()
    short_code = await issue_short_code(store, settings)
    if not creator_name:
        creator_name = await issue_creator_alias(store, survey_settings.language or "en", settings)

    now = datetime.now(timezone.utc)
    row = await store.insert(
        SURVEYS,
        {
            "short_code": short_code,
            "creator_name": creator_name,
            "title": title,
            "description": description,
            "questions": _dump_questions(questions),
            "settings": survey_settings.model_dump(mode="json", exclude_none=True),
            "status": status,
            "created_at": now,
            "updated_at": now,
        },
    )
    survey = SurveyRecord.model_validate(row)
    logger.info("Created survey %s (short code %s)", survey.id, survey.short_code)
    return survey


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


async def get_survey_by_id(store: RecordStore, survey_id: UUID) -> SurveyRecord:
    """Fetch by canonical id only; no alias handling."""
    row = await store.find_one(SURVEYS, Eq("id", survey_id))
    if row is None:
        raise SurveyNotFoundError(str(survey_id))
    return SurveyRecord.model_validate(row)


async def list_surveys_for_creator(
    store: RecordStore,
    creator_name: str,
) -> list[SurveyRecord]:
    rows = await store.find_many(
        SURVEYS,
        Eq("creator_name", creator_name),
        OrderBy("created_at", descending=True),
    )
    return [SurveyRecord.model_validate(row) for row in rows]


# ---------------------------------------------------------------------------
# Updates
# ---------------------------------------------------------------------------


async def update_survey(
    store: RecordStore,
    raw_identifier: str,
    *,
    reject_ambiguous: bool = False,
    **fields: Any,
) -> SurveyRecord:
    """Resolve, then update by canonical id. ``id`` and ``short_code`` never change."""
    survey = await resolve_survey(store, raw_identifier, reject_ambiguous=reject_ambiguous)

    changes: dict[str, Any] = {}
    for key, value in fields.items():
        if key not in _UPDATABLE_FIELDS or value is None:
            continue
        if key == "questions":
            value = _dump_questions(value)
        elif key == "settings":
            value = value.model_dump(mode="json", exclude_none=True)
        changes[key] = value
    if not changes:
        return survey

    changes["updated_at"] = datetime.now(timezone.utc)
    row = await store.update(SURVEYS, survey.id, changes)
    return SurveyRecord.model_validate(row)


# ---------------------------------------------------------------------------
# Linkage audit
# ---------------------------------------------------------------------------


async def audit_linkage(store: RecordStore, survey: SurveyRecord) -> LinkageReport:
    """Count responses keyed by id versus responses keyed by the short code.

    A non-zero alias count means responses were written with the short code
    in ``survey_id`` and are invisible to every id-based query.
    """
    linked = await store.find_many(RESPONSES, Eq("survey_id", survey.id))
    alias_keyed = await store.find_many(RESPONSES, Eq("survey_id", survey.short_code))
    if alias_keyed:
        logger.error(
            "Survey %s has %d responses keyed by short code %s",
            survey.id, len(alias_keyed), survey.short_code,
        )
    return LinkageReport(
        survey_id=survey.id,
        short_code=survey.short_code,
        linked_responses=len(linked),
        alias_keyed_responses=len(alias_keyed),
    )
