# =============================================================================
# TESTS - HTTP endpoints
# =============================================================================
# Exercises the routers end to end through FastAPI's TestClient against the
# in-memory database from conftest.
# =============================================================================

import uuid

import pytest
from fastapi.testclient import TestClient

from quizmaker.core.config import settings
from quizmaker.services import quiz_service


def create_quiz(client, name="Geo Quiz", existing=None, new=None):
    body = {
        "name": name,
        "existingQuestionIds": [str(i) for i in (existing or [])],
        "newQuestions": [{"text": t, "correctAnswer": a} for t, a in (new or [("Capital of France?", "Paris")])],
    }
    return client.post("/quizzes/", json=body)


class TestQuizEndpoints:
    def test_create_returns_location(self, client):
        response = create_quiz(client)

        assert response.status_code == 201
        quiz_id = response.json()["id"]
        assert response.headers["location"] == f"/quizzes/{quiz_id}"

    def test_get_details_in_camel_case(self, client, make_question):
        existing = make_question("Largest ocean?", "Pacific")
        quiz_id = create_quiz(client, existing=[existing.id], new=[("Capital of France?", "Paris")]).json()["id"]

        response = client.get(f"/quizzes/{quiz_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Geo Quiz"
        assert [q["text"] for q in body["questions"]] == ["Largest ocean?", "Capital of France?"]
        assert body["questions"][0]["correctAnswer"] == "Pacific"

    def test_list_with_paging_and_sort(self, client):
        for name in ("First quiz", "Second quiz", "Third quiz"):
            create_quiz(client, name=name)

        response = client.get("/quizzes/", params={"pageSize": 2, "sortOrder": "asc"})

        assert response.status_code == 200
        body = response.json()
        assert body["totalCount"] == 3
        assert body["pageSize"] == 2
        assert body["totalPages"] == 2
        assert len(body["items"]) == 2
        assert body["items"][0]["questionCount"] == 1
        assert "createdAt" in body["items"][0]

    def test_list_search(self, client):
        create_quiz(client, name="History basics")
        create_quiz(client, name="Geography basics")

        body = client.get("/quizzes/", params={"search": "geo"}).json()

        assert [item["name"] for item in body["items"]] == ["Geography basics"]

    def test_update_returns_no_content(self, client):
        quiz_id = create_quiz(client).json()["id"]

        response = client.put(
            f"/quizzes/{quiz_id}",
            json={"name": "Renamed quiz", "newQuestions": [{"text": "Boiling point?", "correctAnswer": "100"}]},
        )

        assert response.status_code == 204
        body = client.get(f"/quizzes/{quiz_id}").json()
        assert body["name"] == "Renamed quiz"
        assert [q["text"] for q in body["questions"]] == ["Boiling point?"]

    def test_delete_then_not_found(self, client):
        quiz_id = create_quiz(client).json()["id"]

        assert client.delete(f"/quizzes/{quiz_id}").status_code == 204
        response = client.get(f"/quizzes/{quiz_id}")

        assert response.status_code == 404
        assert response.json()["kind"] == "entity_not_found"

    def test_delete_unknown_quiz(self, client):
        response = client.delete(f"/quizzes/{uuid.uuid4()}")

        assert response.status_code == 404

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "", "newQuestions": [{"text": "Q?", "correctAnswer": "A"}]},
            {"name": "ab", "newQuestions": [{"text": "Q?", "correctAnswer": "A"}]},
            {"name": "Valid name"},
            {"name": "Valid name", "existingQuestionIds": [str(uuid.uuid4())]},
        ],
    )
    def test_invalid_input_is_bad_request(self, client, body):
        response = client.post("/quizzes/", json=body)

        assert response.status_code == 400
        assert response.json()["kind"] == "missing_argument"
        assert response.json()["detail"]


class TestExportEndpoints:
    def test_export_plain_text(self, client):
        quiz_id = create_quiz(client, new=[("First?", "1"), ("Second?", "2")]).json()["id"]

        response = client.get(f"/quizzes/{quiz_id}/export", params={"exporter": "TXT"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'filename="Geo_Quiz.txt"' in response.headers["content-disposition"]
        assert response.content == b"\xef\xbb\xbfFirst?\nSecond?"

    def test_unknown_exporter(self, client):
        quiz_id = create_quiz(client).json()["id"]

        response = client.get(f"/quizzes/{quiz_id}/export", params={"exporter": "docx"})

        assert response.status_code == 404
        assert response.json()["kind"] == "exporter_not_found"

    def test_missing_exporter(self, client):
        quiz_id = create_quiz(client).json()["id"]

        response = client.get(f"/quizzes/{quiz_id}/export")

        assert response.status_code == 400

    def test_list_exporters(self, client):
        response = client.get("/exporters/")

        assert response.status_code == 200
        body = response.json()
        assert [e["key"] for e in body] == ["csv", "json", "pdf", "txt", "xml"]
        assert body[0] == {
            "key": "csv",
            "displayName": "CSV",
            "fileExtension": "csv",
            "mimeType": "text/csv",
        }


class TestQuestionEndpoints:
    def test_list_questions(self, client, make_question):
        make_question("What is the chemical symbol for gold?", "Au")

        body = client.get("/questions/", params={"search": "GOLD"}).json()

        assert body["totalCount"] == 1
        assert body["items"][0]["text"] == "What is the chemical symbol for gold?"
        assert "correctAnswer" not in body["items"][0]


class TestAppEndpoints:
    def test_root_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "QuizMaker API" in response.text

    def test_unexpected_error_is_hidden(self, client, monkeypatch):
        def boom(db, quiz_id):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(quiz_service, "get_quiz_details", boom)
        quiet_client = TestClient(client.app, raise_server_exceptions=False)

        response = quiet_client.get(f"/quizzes/{uuid.uuid4()}")

        assert response.status_code == 500
        assert response.json() == {"detail": "An unexpected error occurred.", "kind": "unexpected"}


class TestMalformedInput:
    """Input FastAPI cannot parse answers like any other missing argument."""

    def test_malformed_question_id(self, client):
        response = client.post(
            "/quizzes/",
            json={"name": "Geo Quiz", "existingQuestionIds": ["not-a-uuid"]},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["kind"] == "missing_argument"
        assert "existingQuestionIds" in body["detail"]

    def test_wrong_typed_name(self, client):
        response = client.post(
            "/quizzes/",
            json={"name": ["Geo Quiz"], "newQuestions": [{"text": "Q?", "correctAnswer": "A"}]},
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "missing_argument"

    def test_unknown_sort_order(self, client):
        response = client.get("/quizzes/", params={"sortOrder": "sideways"})

        assert response.status_code == 400
        assert response.json()["kind"] == "missing_argument"

    def test_malformed_quiz_id_in_path(self, client):
        response = client.get("/quizzes/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["kind"] == "missing_argument"

    def test_null_collections_are_empty(self, client):
        response = client.post(
            "/quizzes/",
            json={
                "name": "Geo Quiz",
                "existingQuestionIds": None,
                "newQuestions": [{"text": "Capital of France?", "correctAnswer": "Paris"}],
            },
        )

        assert response.status_code == 201

    def test_all_null_collections_still_need_a_question(self, client):
        response = client.post(
            "/quizzes/",
            json={"name": "Geo Quiz", "existingQuestionIds": None, "newQuestions": None},
        )

        assert response.status_code == 400
        assert response.json()["kind"] == "missing_argument"


class TestPagingDefaults:
    def test_quiz_page_size_follows_settings(self, client, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_PAGE_SIZE", 7)

        body = client.get("/quizzes/").json()

        assert body["pageSize"] == 7

    def test_question_page_size_follows_settings(self, client, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_PAGE_SIZE", 3)

        body = client.get("/questions/").json()

        assert body["pageSize"] == 3
