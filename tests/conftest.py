import pytest
from sqlalchemy import func, select

from quiz_api import create_app
from quiz_api.config import Config
from quiz_api.extensions import db
from quiz_api.models import Answer, Option, Question


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    # SQLite's pool takes none of the PostgreSQL tuning options
    SQLALCHEMY_ENGINE_OPTIONS = {}
    STARTUP_MAX_ATTEMPTS = 3
    STARTUP_RETRY_DELAY_MS = 0
    LOG_LEVEL = "DEBUG"


class UnreachableDbConfig(TestConfig):
    SQLALCHEMY_DATABASE_URI = "sqlite:////nonexistent-quiz-dir/quiz.db"


QUESTIONS = {
    1: ("What is the capital of France?", {1: "Paris", 2: "London", 3: "Berlin"}),
    3: ("Which planet is known as the Red Planet?", {6: "Mars", 7: "Venus"}),
    2: ("What is 2 + 2?", {4: "3", 5: "4"}),
}


def seed(session):
    # Inserted out of id order on purpose
    for qid, (text, options) in QUESTIONS.items():
        session.add(Question(id=qid, question_text=text))
        for oid, option_text in options.items():
            session.add(Option(id=oid, question_id=qid, option_text=option_text))
    session.commit()


def count_answers():
    return db.session.scalar(select(func.count()).select_from(Answer))


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        seed(db.session)
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["quiz_store"]


@pytest.fixture
def unreachable_app():
    return create_app(UnreachableDbConfig)
