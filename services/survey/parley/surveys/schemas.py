"""Survey domain Pydantic V2 schemas.

``SurveyRecord`` is also what the resolver returns: the only carrier of a
canonical survey id inside the service.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from parley.models.enums import QuestionType, SurveyStatus


# ---------------------------------------------------------------------------
# Question / settings schemas
# ---------------------------------------------------------------------------


class QuestionValidation(BaseModel):
    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=1)
    min: float | None = None
    max: float | None = None


class QuestionSchema(BaseModel):
    """A single question within a survey. Position in the list is its order."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: str = Field(min_length=1, max_length=64, description="Unique within the survey.")
    type: QuestionType
    text: str = Field(min_length=1)
    required: bool = False
    options: list[str] | None = Field(
        default=None,
        description="Choices for multiple_choice, multi_select and dropdown.",
    )
    validation: QuestionValidation | None = None


class SurveySettingsSchema(BaseModel):
    allow_anonymous: bool | None = None
    show_progress: bool | None = None
    language: str | None = Field(
        default=None,
        max_length=16,
        description="Language tag such as 'en' or 'zh'; picks the creator alias pool.",
    )


def _ensure_unique_question_ids(questions: list[QuestionSchema] | None) -> None:
    if not questions:
        return
    seen: set[str] = set()
    for question in questions:
        if question.id in seen:
            raise ValueError(f"Duplicate question id: {question.id}")
        seen.add(question.id)


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class CreateSurveyRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=300)
    description: str | None = None
    questions: list[QuestionSchema] = Field(default_factory=list)
    settings: SurveySettingsSchema = Field(default_factory=SurveySettingsSchema)
    status: SurveyStatus = SurveyStatus.DRAFT
    creator_name: str | None = Field(
        default=None,
        max_length=100,
        description="Reuse an existing creator alias; one is issued when omitted.",
    )

    @model_validator(mode="after")
    def _unique_question_ids(self) -> CreateSurveyRequest:
        _ensure_unique_question_ids(self.questions)
        return self


class UpdateSurveyRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = None
    questions: list[QuestionSchema] | None = None
    settings: SurveySettingsSchema | None = None
    status: SurveyStatus | None = None

    @model_validator(mode="after")
    def _unique_question_ids(self) -> UpdateSurveyRequest:
        _ensure_unique_question_ids(self.questions)
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class SurveyRecord(BaseModel):
    """Survey detail."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    short_code: str
    creator_name: str
    title: str
    description: str | None = None
    questions: list[QuestionSchema] = Field(default_factory=list)
    settings: SurveySettingsSchema = Field(default_factory=SurveySettingsSchema)
    status: SurveyStatus
    created_at: datetime
    updated_at: datetime

    @property
    def question_ids(self) -> list[str]:
        return [q.id for q in self.questions]

    def question(self, question_id: str) -> QuestionSchema | None:
        return next((q for q in self.questions if q.id == question_id), None)


class LinkageReport(BaseModel):
    """How many responses point at the survey by id, and how many by its alias."""

    survey_id: UUID
    short_code: str
    linked_responses: int
    alias_keyed_responses: int
