import pytest

from parley.exceptions import SurveyNotFoundError
from parley.identifiers.classifier import is_short_code
from parley.identifiers.pet_names import CHINESE_PET_NAMES
from parley.models.enums import QuestionType, SurveyStatus
from parley.responses.service import start_response
from parley.surveys.schemas import SurveySettingsSchema
from parley.surveys.service import (
    audit_linkage,
    create_survey,
    get_survey_by_id,
    list_surveys_for_creator,
    update_survey,
)

from conftest import make_questions


@pytest.mark.asyncio
async def test_create_survey_issues_identifiers(active_survey) -> None:
    assert is_short_code(active_survey.short_code)
    assert active_survey.creator_name[-3:].isdigit()
    assert active_survey.status == SurveyStatus.ACTIVE
    assert active_survey.question_ids == ["q1", "q2", "q3"]


@pytest.mark.asyncio
async def test_create_survey_keeps_supplied_creator(make_survey) -> None:
    survey = await make_survey(creator_name="Nugget042")
    assert survey.creator_name == "Nugget042"


@pytest.mark.asyncio
async def test_create_survey_chinese_alias(store, settings) -> None:
    survey = await create_survey(
        store,
        settings,
        title="问卷",
        questions=[],
        survey_settings=SurveySettingsSchema(language="zh"),
    )
    assert survey.creator_name[:-3] in CHINESE_PET_NAMES
    assert survey.status == SurveyStatus.DRAFT


@pytest.mark.asyncio
async def test_short_codes_are_distinct(make_survey) -> None:
    surveys = [await make_survey() for _ in range(20)]
    codes = {s.short_code.upper() for s in surveys}
    assert len(codes) == 20


@pytest.mark.asyncio
async def test_get_survey_by_id(store, active_survey) -> None:
    assert (await get_survey_by_id(store, active_survey.id)).id == active_survey.id


@pytest.mark.asyncio
async def test_list_surveys_for_creator_newest_first(make_survey, store) -> None:
    first = await make_survey(creator_name="Pickle123", title="First")
    second = await make_survey(creator_name="Pickle123", title="Second")
    await make_survey(creator_name="Taco456")
    surveys = await list_surveys_for_creator(store, "Pickle123")
    assert [s.id for s in surveys] == [second.id, first.id]


@pytest.mark.asyncio
async def test_update_survey_by_short_code(store, active_survey) -> None:
    updated = await update_survey(
        store,
        active_survey.short_code.lower(),
        title="Renamed",
        questions=make_questions(("q9", QuestionType.NUMBER, False)),
    )
    assert updated.id == active_survey.id
    assert updated.short_code == active_survey.short_code
    assert updated.title == "Renamed"
    assert updated.question_ids == ["q9"]
    assert updated.updated_at >= active_survey.updated_at


@pytest.mark.asyncio
async def test_update_survey_ignores_identity_fields(store, active_survey) -> None:
    updated = await update_survey(store, str(active_survey.id), short_code="HACK", id="x")
    assert updated == active_survey


@pytest.mark.asyncio
async def test_update_unknown_survey(store) -> None:
    with pytest.raises(SurveyNotFoundError):
        await update_survey(store, "ABCD", title="x")


@pytest.mark.asyncio
async def test_audit_linkage_counts(store, active_survey) -> None:
    await start_response(store, active_survey)
    await start_response(store, active_survey)
    # Simulate a legacy row keyed by the alias.
    await store.insert(
        "responses",
        {"survey_id": active_survey.short_code, "answers": {}, "status": "in_progress"},
    )
    report = await audit_linkage(store, active_survey)
    assert report.linked_responses == 2
    assert report.alias_keyed_responses == 1
