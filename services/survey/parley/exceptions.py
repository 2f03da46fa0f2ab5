"""Domain exception classes for the survey service.

These are raised by service-layer code and caught by controllers
to map to appropriate HTTP responses.
"""


class SurveyNotFoundError(Exception):
    """Raised when no survey matches a raw identifier or canonical id."""

    def __init__(self, identifier: str = ""):
        self.identifier = identifier
        super().__init__(f"Survey not found: {identifier}")


class SurveyNotActiveError(Exception):
    """Raised when a survey in draft or closed status is asked to accept responses."""

    def __init__(self, survey_id: str = "", status: str = ""):
        self.survey_id = survey_id
        self.status = status
        super().__init__(f"Survey {survey_id} is not accepting responses (status: {status})")


class MalformedIdentifierError(Exception):
    """Raised in strict mode when an identifier is neither a UUID nor a short code."""

    def __init__(self, identifier: str = ""):
        self.identifier = identifier
        super().__init__(f"Malformed survey identifier: {identifier!r}")


class ResponseNotFoundError(Exception):
    def __init__(self, response_id: str = ""):
        self.response_id = response_id
        super().__init__(f"Response not found: {response_id}")


class ResponseAlreadyTerminalError(Exception):
    """Raised on any mutation of a response that is already partial or completed."""

    def __init__(self, response_id: str = "", status: str = ""):
        self.response_id = response_id
        self.status = status
        super().__init__(f"Response {response_id} is already {status}")


class InvalidStatusTransitionError(Exception):
    """Raised when a response status transition is not allowed."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot transition from {current} to {target}")


class RequiredAnswersMissingError(Exception):
    def __init__(self, question_ids: list[str]):
        self.question_ids = question_ids
        super().__init__(f"Required questions unanswered: {', '.join(question_ids)}")


class UnknownQuestionError(Exception):
    def __init__(self, question_id: str = ""):
        self.question_id = question_id
        super().__init__(f"Question not found in survey: {question_id}")


class IdentifierSpaceExhaustedError(Exception):
    """Raised when no unused short code is found at the maximum length.

    Operator-level capacity problem (widen the alphabet or the length
    ceiling); callers must not retry.
    """
