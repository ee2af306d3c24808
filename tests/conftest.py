# =============================================================================
# CONFTEST - Shared fixtures
# =============================================================================
# In-memory SQLite database, a session per test and a FastAPI TestClient
# wired to the same database.
# =============================================================================

import uuid

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from quizmaker.core.database import Base, get_db
from quizmaker.models.common.audit import AuditInfo
from quizmaker.models.question_db.question_db import Question
from quizmaker.models.quiz_db.quiz_db import Quiz  # noqa: F401
from quizmaker.schemas.quiz.quiz_base import NewQuestionIn, QuizCreate


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture
def engine():
    """Fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
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


# =============================================================================
# FASTAPI FIXTURES
# =============================================================================


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the test database."""
    from fastapi.testclient import TestClient
    from main import app

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


# =============================================================================
# DATA FIXTURES
# =============================================================================


@pytest.fixture
def make_question(db):
    """Persist a standalone question and return it."""

    def _make(text: str, correct_answer: str = "answer") -> Question:
        question = Question(
            id=uuid.uuid4(),
            text=text,
            correct_answer=correct_answer,
            audit=AuditInfo.new(),
        )
        db.add(question)
        db.commit()
        return question

    return _make


@pytest.fixture
def quiz_payload():
    """Build a QuizCreate from plain values."""

    def _build(name="Sample Quiz", existing=None, new=None) -> QuizCreate:
        return QuizCreate(
            name=name,
            existing_question_ids=existing or [],
            new_questions=[NewQuestionIn(text=t, correct_answer=a) for t, a in (new or [])],
        )

    return _build
