"""Response status state machine.

    (not started) --start--> IN_PROGRESS --+--> PARTIAL    (terminal)
                                           +--> COMPLETED  (terminal)

Answer and go-back steps are IN_PROGRESS -> IN_PROGRESS transitions, so a
single table covers every mutation.
"""

from __future__ import annotations

from typing import Any

from parley.exceptions import (
    InvalidStatusTransitionError,
    ResponseAlreadyTerminalError,
)
from parley.models.enums import ResponseStatus
from parley.responses.schemas import ResponseRecord
from parley.surveys.schemas import SurveyRecord

TRANSITIONS: dict[ResponseStatus, frozenset[ResponseStatus]] = {
    ResponseStatus.IN_PROGRESS: frozenset({
        ResponseStatus.IN_PROGRESS,
        ResponseStatus.PARTIAL,
        ResponseStatus.COMPLETED,
    }),
    ResponseStatus.PARTIAL: frozenset(),
    ResponseStatus.COMPLETED: frozenset(),
}

TERMINAL_STATUSES = frozenset(s for s, targets in TRANSITIONS.items() if not targets)

# Statuses a one-shot form submission may be created in.
DIRECT_SUBMIT_STATUSES = frozenset({ResponseStatus.PARTIAL, ResponseStatus.COMPLETED})


def is_terminal(status: ResponseStatus) -> bool:
    return status in TERMINAL_STATUSES


def transition(response: ResponseRecord, target: ResponseStatus) -> ResponseStatus:
    """Validate ``response.status -> target`` and return ``target``."""
    if is_terminal(response.status):
        raise ResponseAlreadyTerminalError(str(response.id), response.status.value)
    if target not in TRANSITIONS[response.status]:
        raise InvalidStatusTransitionError(response.status.value, target.value)
    return target


def is_answered(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


def missing_required_answers(survey: SurveyRecord, answers: dict[str, Any]) -> list[str]:
    """Ids of required questions without a non-empty answer, in survey order."""
    return [
        q.id for q in survey.questions
        if q.required and not is_answered(answers.get(q.id))
    ]


def next_index(current: int, question_count: int) -> int:
    """Advance by one unless already on the last question."""
    if current < question_count - 1:
        return current + 1
    return current


def previous_index(current: int) -> int:
    return max(current - 1, 0)
