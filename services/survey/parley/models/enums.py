import enum

from sqlalchemy.dialects.postgresql import ENUM as PgEnum


class SurveyStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"


class ResponseStatus(str, enum.Enum):
    IN_PROGRESS = "in_progress"
    PARTIAL = "partial"
    COMPLETED = "completed"


class QuestionType(str, enum.Enum):
    TEXT = "text"
    MULTIPLE_CHOICE = "multiple_choice"
    MULTI_SELECT = "multi_select"
    DROPDOWN = "dropdown"
    RATING = "rating"
    SLIDER = "slider"
    YES_NO = "yes_no"
    DATE = "date"
    NUMBER = "number"
    EMAIL = "email"
    PHONE = "phone"


def _values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


# SQLAlchemy PgEnum instances (reuse across models to avoid duplicate type creation).
# Lower-case values are what the database stores.
survey_status_enum = PgEnum(
    SurveyStatus, name="survey_status", create_type=True, values_callable=_values
)
response_status_enum = PgEnum(
    ResponseStatus, name="response_status", create_type=True, values_callable=_values
)
