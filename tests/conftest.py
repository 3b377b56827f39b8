import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_access_token
from app.models.quiz_db import option_db, question_db, quiz_db, result_db, type_db  # noqa: F401
from main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def make(user_id: str) -> dict:
        token = create_access_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return make


@pytest.fixture
def system_quiz(db):
    """A quiz with no owner, readable by everyone."""
    quiz = quiz_db.PersonalityQuiz(
        id=quiz_db.new_id(),
        user_id=None,
        title="Which color are you?",
        is_system=True,
        is_active=True,
    )
    db.add(quiz)
    db.commit()
    return quiz.id
