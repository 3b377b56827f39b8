"""
Tests for the HTTP surface.
"""

import pytest


@pytest.fixture
def alice(auth_headers):
    return auth_headers("alice")


@pytest.fixture
def bob(auth_headers):
    return auth_headers("bob")


def create_quiz(client, headers, title="Learning Style"):
    response = client.post("/quizzes", json={"title": title}, headers=headers)
    assert response.status_code == 201
    return response.json()["data"]["id"]


class TestAuthentication:
    def test_anonymous_create_rejected(self, client):
        response = client.post("/quizzes", json={"title": "Nope"})

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": {"code": "UNAUTHORIZED", "message": "You must be signed in to perform this action."},
        }

    def test_invalid_token_rejected(self, client):
        response = client.get("/quizzes/mine", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_health_is_public(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestQuizRoutes:
    def test_learning_style_scenario(self, client, alice):
        quiz_id = create_quiz(client, alice)
        t1 = client.post(
            f"/quizzes/{quiz_id}/types", json={"code": "A", "name": "Visual"}, headers=alice
        ).json()["data"]["id"]
        q1 = client.post(
            f"/quizzes/{quiz_id}/questions",
            json={"order_index": 0, "question_text": "Do you prefer diagrams?"},
            headers=alice,
        ).json()["data"]["id"]
        o1 = client.post(
            f"/questions/{q1}/options",
            json={"order_index": 0, "option_text": "Yes", "type_scores": {t1: 2}},
            headers=alice,
        ).json()["data"]["id"]

        response = client.get(f"/quizzes/{quiz_id}", headers=alice)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["quiz"]["id"] == quiz_id
        assert [t["id"] for t in data["types"]] == [t1]
        assert [q["id"] for q in data["questions"]] == [q1]
        assert [o["id"] for o in data["questions"][0]["options"]] == [o1]
        assert data["questions"][0]["options"][0]["type_scores"] == {t1: 2.0}

    def test_non_owner_cannot_update_or_read(self, client, alice, bob):
        quiz_id = create_quiz(client, alice)

        update = client.put(f"/quizzes/{quiz_id}", json={"title": "Stolen"}, headers=bob)
        read = client.get(f"/quizzes/{quiz_id}", headers=bob)

        assert update.status_code == 403
        assert update.json()["error"]["code"] == "FORBIDDEN"
        assert read.status_code == 403

    def test_update_and_archive(self, client, alice):
        quiz_id = create_quiz(client, alice)

        update = client.put(
            f"/quizzes/{quiz_id}", json={"title": "Work Style", "category": "career"}, headers=alice
        )
        archive = client.post(f"/quizzes/{quiz_id}/archive", headers=alice)

        assert update.json() == {"success": True, "data": None}
        assert archive.status_code == 200

        active = client.get("/quizzes/mine", headers=alice).json()["data"]
        everything = client.get("/quizzes/mine?include_inactive=true", headers=alice).json()["data"]

        assert active == {"items": [], "total": 0}
        assert everything["total"] == 1
        assert everything["items"][0]["title"] == "Work Style"
        assert everything["items"][0]["is_active"] is False

    def test_missing_quiz(self, client, alice):
        response = client.get("/quizzes/does-not-exist", headers=alice)

        assert response.status_code == 404
        assert response.json()["error"] == {"code": "NOT_FOUND", "message": "Quiz not found."}

    def test_empty_title_is_validation_error(self, client, alice):
        response = client.post("/quizzes", json={"title": ""}, headers=alice)

        assert response.status_code == 422

    def test_system_quiz(self, client, alice, bob, system_quiz):
        assert client.get(f"/quizzes/{system_quiz}", headers=bob).status_code == 200
        assert client.put(f"/quizzes/{system_quiz}", json={"title": "x"}, headers=alice).status_code == 403
        assert client.post(f"/quizzes/{system_quiz}/archive", headers=bob).status_code == 403


class TestChildRoutes:
    def test_delete_question_removes_its_options(self, client, alice):
        quiz_id = create_quiz(client, alice)
        q1 = client.post(
            f"/quizzes/{quiz_id}/questions", json={"order_index": 0, "question_text": "1"}, headers=alice
        ).json()["data"]["id"]
        q2 = client.post(
            f"/quizzes/{quiz_id}/questions", json={"order_index": 1, "question_text": "2"}, headers=alice
        ).json()["data"]["id"]
        client.post(f"/questions/{q1}/options", json={"order_index": 0, "option_text": "a"}, headers=alice)
        client.post(f"/questions/{q2}/options", json={"order_index": 0, "option_text": "b"}, headers=alice)

        response = client.delete(f"/quizzes/{quiz_id}/questions/{q1}", headers=alice)

        assert response.status_code == 200
        questions = client.get(f"/quizzes/{quiz_id}", headers=alice).json()["data"]["questions"]
        assert [q["id"] for q in questions] == [q2]
        assert [o["option_text"] for o in questions[0]["options"]] == ["b"]

    def test_option_on_unknown_question(self, client, alice):
        response = client.post(
            "/questions/ghost/options", json={"order_index": 0, "option_text": "a"}, headers=alice
        )

        assert response.status_code == 404

    def test_option_on_foreign_question(self, client, alice, bob):
        quiz_id = create_quiz(client, alice)
        question_id = client.post(
            f"/quizzes/{quiz_id}/questions", json={"order_index": 0, "question_text": "1"}, headers=alice
        ).json()["data"]["id"]

        response = client.post(
            f"/questions/{question_id}/options", json={"order_index": 0, "option_text": "a"}, headers=bob
        )

        assert response.status_code == 403

    def test_delete_option_and_type(self, client, alice):
        quiz_id = create_quiz(client, alice)
        type_id = client.post(
            f"/quizzes/{quiz_id}/types", json={"code": "A", "name": "A"}, headers=alice
        ).json()["data"]["id"]
        question_id = client.post(
            f"/quizzes/{quiz_id}/questions", json={"order_index": 0, "question_text": "1"}, headers=alice
        ).json()["data"]["id"]
        option_id = client.post(
            f"/questions/{question_id}/options", json={"order_index": 0, "option_text": "a"}, headers=alice
        ).json()["data"]["id"]

        assert client.delete(f"/questions/{question_id}/options/{option_id}", headers=alice).status_code == 200
        assert client.delete(f"/quizzes/{quiz_id}/types/{type_id}", headers=alice).status_code == 200

        data = client.get(f"/quizzes/{quiz_id}", headers=alice).json()["data"]
        assert data["types"] == []
        assert data["questions"][0]["options"] == []


class TestResultRoutes:
    def test_record_and_list(self, client, alice, bob, system_quiz):
        response = client.post(
            f"/quizzes/{system_quiz}/results",
            json={"result_summary": "Blue", "scores": {"x": 3}},
            headers=bob,
        )

        assert response.status_code == 201
        result_id = response.json()["data"]["id"]

        mine = client.get("/results/mine", headers=bob).json()["data"]
        assert mine["total"] == 1
        assert mine["items"][0]["id"] == result_id
        assert mine["items"][0]["scores"] == {"x": 3.0}
        assert client.get("/results/mine", headers=alice).json()["data"]["total"] == 0

    def test_foreign_dominant_type(self, client, alice):
        quiz_id = create_quiz(client, alice)
        other_id = create_quiz(client, alice, title="Other")
        foreign_type = client.post(
            f"/quizzes/{other_id}/types", json={"code": "B", "name": "B"}, headers=alice
        ).json()["data"]["id"]

        response = client.post(
            f"/quizzes/{quiz_id}/results", json={"dominant_type_id": foreign_type}, headers=alice
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"
        assert client.get("/results/mine", headers=alice).json()["data"]["total"] == 0
