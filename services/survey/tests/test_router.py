from fastapi.testclient import TestClient

from parley.config import Settings
from parley.main import create_app

QUESTIONS = [
    {"id": "q1", "type": "text", "text": "Your name?", "required": True},
    {"id": "q2", "type": "rating", "text": "How was it?"},
]


def _create_survey(client: TestClient, **overrides) -> dict:
    body = {"title": "Feedback", "questions": QUESTIONS, "status": "active", **overrides}
    response = client.post("/api/v1/surveys", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "survey"}


def test_request_id_is_echoed(client: TestClient) -> None:
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_create_and_get_survey(client: TestClient) -> None:
    survey = _create_survey(client)
    assert len(survey["short_code"]) == 4
    assert survey["creator_name"]

    by_id = client.get(f"/api/v1/surveys/{survey['id']}")
    by_code = client.get(f"/api/v1/surveys/{survey['short_code'].lower()}")
    assert by_id.status_code == by_code.status_code == 200
    assert by_id.json() == by_code.json() == survey


def test_create_survey_rejects_duplicate_question_ids(client: TestClient) -> None:
    body = {"title": "Dup", "questions": [QUESTIONS[0], QUESTIONS[0]]}
    assert client.post("/api/v1/surveys", json=body).status_code == 422


def test_get_unknown_survey(client: TestClient) -> None:
    response = client.get("/api/v1/surveys/ZZZZZZZZ")
    assert response.status_code == 404
    assert response.json()["detail"] == "Survey not found."


def test_list_surveys_for_creator(client: TestClient) -> None:
    first = _create_survey(client, creator_name="Waffles123")
    second = _create_survey(client, creator_name="Waffles123")
    response = client.get("/api/v1/surveys", params={"creator_name": "Waffles123"})
    assert [s["id"] for s in response.json()] == [second["id"], first["id"]]


def test_update_survey_by_short_code(client: TestClient) -> None:
    survey = _create_survey(client, status="draft")
    response = client.patch(
        f"/api/v1/surveys/{survey['short_code']}", json={"status": "active", "title": "Live"},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "active"
    assert response.json()["title"] == "Live"
    assert response.json()["id"] == survey["id"]


def test_step_by_step_session_via_short_code(client: TestClient) -> None:
    survey = _create_survey(client)
    started = client.post("/api/v1/responses", json={"survey_id": survey["short_code"].lower()})
    assert started.status_code == 201
    response = started.json()
    assert response["survey_id"] == survey["id"]
    assert response["status"] == "in_progress"

    rid = response["id"]
    answered = client.post(f"/api/v1/responses/{rid}/answers", json={"question_id": "q1", "value": "Alice"})
    assert answered.json()["current_question_index"] == 1
    assert client.post(f"/api/v1/responses/{rid}/back").json()["current_question_index"] == 0

    completed = client.post(f"/api/v1/responses/{rid}/complete")
    assert completed.status_code == 200
    assert completed.json()["status"] == "completed"
    assert completed.json()["completed_at"] is not None

    again = client.post(f"/api/v1/responses/{rid}/answers", json={"question_id": "q2", "value": 5})
    assert again.status_code == 409
    assert client.get(f"/api/v1/responses/{rid}").json() == completed.json()


def test_direct_submit_via_short_code(client: TestClient) -> None:
    survey = _create_survey(client)
    response = client.post(
        "/api/v1/responses",
        json={"survey_id": survey["short_code"], "answers": {"q1": "Alice"}, "status": "completed"},
    )
    assert response.status_code == 201
    assert response.json()["survey_id"] == survey["id"]
    assert response.json()["answers"] == {"q1": "Alice"}


def test_direct_submit_missing_required_answer(client: TestClient) -> None:
    survey = _create_survey(client)
    response = client.post(
        "/api/v1/responses",
        json={"survey_id": survey["id"], "answers": {"q2": 3}, "status": "completed"},
    )
    assert response.status_code == 400
    assert client.get(f"/api/v1/surveys/{survey['id']}/responses").json() == []


def test_response_to_unknown_survey_creates_nothing(client: TestClient) -> None:
    response = client.post("/api/v1/responses", json={"survey_id": "ZZZZ"})
    assert response.status_code == 404


def test_response_to_draft_survey(client: TestClient) -> None:
    survey = _create_survey(client, status="draft")
    response = client.post("/api/v1/responses", json={"survey_id": survey["short_code"]})
    assert response.status_code == 400
    assert response.json()["detail"] == "Survey is not accepting responses."


def test_list_responses_resolves_alias(client: TestClient) -> None:
    survey = _create_survey(client)
    first = client.post("/api/v1/responses", json={"survey_id": survey["id"]}).json()
    second = client.post(
        "/api/v1/responses",
        json={"survey_id": survey["short_code"], "answers": {"q1": "Bo"}, "status": "partial"},
    ).json()

    listed = client.get(f"/api/v1/surveys/{survey['short_code'].lower()}/responses").json()
    assert [r["id"] for r in listed] == [second["id"], first["id"]]

    linkage = client.get(f"/api/v1/surveys/{survey['short_code']}/linkage").json()
    assert linkage["linked_responses"] == 2
    assert linkage["alias_keyed_responses"] == 0


def test_unknown_response(client: TestClient) -> None:
    response = client.post("/api/v1/responses/60f43ae3-0428-4474-bfb2-ad74d00727d1/complete")
    assert response.status_code == 404


def test_analytics_by_short_code(client: TestClient) -> None:
    survey = _create_survey(client)
    for score in (4, 5):
        client.post(
            "/api/v1/responses",
            json={"survey_id": survey["short_code"], "answers": {"q1": "A", "q2": score}, "status": "completed"},
        )
    overview = client.get(f"/api/v1/analytics/surveys/{survey['short_code']}/overview").json()
    assert overview["responses"]["total"] == 2
    assert overview["responses"]["completion_rate"] == 100

    stats = client.get(f"/api/v1/analytics/surveys/{survey['id']}/questions/q2").json()
    assert stats["average"] == 4.5

    missing = client.get(f"/api/v1/analytics/surveys/{survey['id']}/questions/q9")
    assert missing.status_code == 404


def test_issue_identifiers(client: TestClient) -> None:
    code = client.post("/api/v1/identifiers/short-code")
    assert code.status_code == 200
    assert len(code.json()["short_code"]) == 4

    alias = client.post("/api/v1/identifiers/creator-alias", params={"language": "zh"})
    assert alias.status_code == 200
    assert alias.json()["creator_name"][-3:].isdigit()


def test_strict_mode_rejects_ambiguous_identifier() -> None:
    settings = Settings(store_backend="memory", reject_ambiguous_identifiers=True)
    with TestClient(create_app(settings)) as client:
        assert client.get("/api/v1/surveys/not-a-code").status_code == 400
        assert client.get("/api/v1/surveys/ABCD").status_code == 404


def test_lenient_mode_ambiguous_identifier_not_found(client: TestClient) -> None:
    assert client.get("/api/v1/surveys/not-a-code").status_code == 404
