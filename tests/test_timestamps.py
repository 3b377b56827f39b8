"""
Tests for UTC normalisation of output timestamps.
"""

from datetime import datetime, timedelta, timezone

from app.schemas.common.timestamps import as_utc
from app.schemas.quiz.quiz_base import QuizCreate, QuizOut
from app.services import quiz_service
from app.services.quiz_details import get_quiz_with_details


class TestAsUtc:
    def test_naive_is_read_as_utc(self):
        value = as_utc(datetime(2026, 1, 2, 3, 4, 5))

        assert value == datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_other_offset_is_converted(self):
        plus_eight = timezone(timedelta(hours=8))
        value = as_utc(datetime(2026, 1, 2, 11, 0, tzinfo=plus_eight))

        assert value.tzinfo == timezone.utc
        assert value.hour == 3


class TestQuizOutTimestamps:
    def test_fresh_and_reloaded_quiz_match(self, db, session_factory):
        quiz_id = quiz_service.create_quiz(db, "alice", QuizCreate(title="Learning Style"))
        written = QuizOut.model_validate(quiz_service.list_my_quizzes(db, "alice")[0])

        fresh = session_factory()
        try:
            reloaded = get_quiz_with_details(fresh, "alice", quiz_id).quiz
        finally:
            fresh.close()

        assert written.created_at.tzinfo == timezone.utc
        assert reloaded.created_at.tzinfo == timezone.utc
        assert reloaded.updated_at.tzinfo == timezone.utc
        assert reloaded.model_dump_json() == written.model_dump_json()

    def test_json_carries_utc_offset(self, client, auth_headers):
        headers = auth_headers("alice")
        quiz_id = client.post("/quizzes", json={"title": "Learning Style"}, headers=headers).json()["data"]["id"]

        quiz = client.get(f"/quizzes/{quiz_id}", headers=headers).json()["data"]["quiz"]

        for field in ("created_at", "updated_at"):
            assert quiz[field].endswith("Z") or quiz[field].endswith("+00:00")
