"""Analytics response schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from parley.models.enums import QuestionType, SurveyStatus


class ResponseCounts(BaseModel):
    total: int
    completed: int
    partial: int
    in_progress: int
    completion_rate: int = Field(description="Completed share of all responses, percent.")


class SurveyOverview(BaseModel):
    survey_id: UUID
    title: str
    status: SurveyStatus
    question_count: int
    responses: ResponseCounts


class QuestionStats(BaseModel):
    question_id: str
    question_text: str
    question_type: QuestionType
    total_answers: int
    distribution: dict[str, int] | None = None
    average: float | None = None
    min: float | None = None
    max: float | None = None
    sample_answers: list[str] | None = None
