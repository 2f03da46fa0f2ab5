from .enums import QuestionType, ResponseStatus, SurveyStatus
from .response import Response
from .survey import Survey

__all__ = [
    "QuestionType",
    "Response",
    "ResponseStatus",
    "Survey",
    "SurveyStatus",
]
