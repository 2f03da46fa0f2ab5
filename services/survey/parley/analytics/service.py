"""Analytics service: response counts and per-question aggregation.

Every query is keyed by the resolved survey's canonical id.
Pure business logic, no FastAPI imports.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from parley.exceptions import UnknownQuestionError
from parley.models.enums import QuestionType, ResponseStatus
from parley.responses.lifecycle import is_answered
from parley.responses.service import list_responses_for_survey
from parley.surveys.schemas import SurveyRecord

from .schemas import QuestionStats, ResponseCounts, SurveyOverview

CHOICE_TYPES = frozenset({QuestionType.MULTIPLE_CHOICE, QuestionType.DROPDOWN, QuestionType.YES_NO})
NUMERIC_TYPES = frozenset({QuestionType.RATING, QuestionType.NUMBER, QuestionType.SLIDER})

SAMPLE_SIZE = 5
SAMPLE_MAX_CHARS = 200


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _key(value: Any) -> str:
    # 4.0 and "4" land in the same bucket as 4.
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


async def survey_overview(store, survey: SurveyRecord) -> SurveyOverview:
    responses = await list_responses_for_survey(store, survey.id)
    counts = Counter(r.status for r in responses)
    total = len(responses)
    completed = counts[ResponseStatus.COMPLETED]
    return SurveyOverview(
        survey_id=survey.id,
        title=survey.title,
        status=survey.status,
        question_count=len(survey.questions),
        responses=ResponseCounts(
            total=total,
            completed=completed,
            partial=counts[ResponseStatus.PARTIAL],
            in_progress=counts[ResponseStatus.IN_PROGRESS],
            completion_rate=round(completed * 100 / total) if total else 0,
        ),
    )


async def question_stats(
    store,
    survey: SurveyRecord,
    question_id: str,
    *,
    completed_only: bool = True,
) -> QuestionStats:
    question = survey.question(question_id)
    if question is None:
        raise UnknownQuestionError(question_id)

    status = ResponseStatus.COMPLETED if completed_only else None
    responses = await list_responses_for_survey(store, survey.id, status=status)
    values = [
        r.answers[question_id] for r in responses
        if is_answered(r.answers.get(question_id))
    ]
    stats = QuestionStats(
        question_id=question.id,
        question_text=question.text,
        question_type=question.type,
        total_answers=len(values),
    )

    if question.type in CHOICE_TYPES:
        stats.distribution = dict(Counter(str(v) for v in values))
    elif question.type in NUMERIC_TYPES:
        numbers = [n for n in (_as_number(v) for v in values) if n is not None]
        stats.total_answers = len(numbers)
        if numbers:
            stats.average = round(sum(numbers) / len(numbers), 2)
            stats.min = min(numbers)
            stats.max = max(numbers)
            stats.distribution = dict(Counter(_key(n) for n in numbers))
    elif question.type == QuestionType.MULTI_SELECT:
        selections = Counter()
        for value in values:
            for choice in value if isinstance(value, list) else [value]:
                selections[str(choice)] += 1
        stats.distribution = dict(selections)
    else:
        stats.sample_answers = [str(v)[:SAMPLE_MAX_CHARS] for v in values[:SAMPLE_SIZE]]
    return stats
