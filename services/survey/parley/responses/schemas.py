"""Response domain Pydantic V2 schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from parley.models.enums import ResponseStatus


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreateResponseRequest(BaseModel):
    """Start a session, or submit a whole form when answers and a final status are given."""

    model_config = ConfigDict(str_strip_whitespace=True)

    survey_id: str = Field(
        min_length=1,
        max_length=64,
        description="Survey UUID or short code, as found in the shared link.",
    )
    respondent_id: str | None = Field(default=None, max_length=64)
    answers: dict[str, Any] | None = None
    status: ResponseStatus | None = None


class RecordAnswerRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    question_id: str = Field(min_length=1, max_length=64)
    value: Any = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class ResponseRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    # Typed as UUID so a short code can never round-trip through here.
    survey_id: UUID
    respondent_id: str | None = None
    answers: dict[str, Any] = Field(default_factory=dict)
    status: ResponseStatus
    current_question_index: int = 0
    started_at: datetime
    completed_at: datetime | None = None
