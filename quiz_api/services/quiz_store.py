import logging
from typing import List, Optional

from flask import current_app
from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError

from ..models.answer import Answer
from ..models.question import Question

EXTENSION_KEY = "quiz_store"


class QuizStore:
    """
    Data access for the quiz API.

    Owns the Flask-SQLAlchemy handle (and through it the connection pool) for
    one application. Built once by the app factory, looked up per request via
    ``get_quiz_store()``, and disposed of with ``close()`` on shutdown.
    Every operation is a single statement; failures are logged with context
    and re-raised unchanged.
    """

    def __init__(self, db, logger: Optional[logging.Logger] = None):
        self.db = db
        self.logger = logger or logging.getLogger(__name__)

    @property
    def session(self):
        return self.db.session

    def ping(self) -> None:
        # Check out one pooled connection and hand it straight back
        with self.db.engine.connect():
            pass

    def list_questions(self) -> List[Question]:
        try:
            return list(self.session.scalars(select(Question).order_by(Question.id.asc())))
        except SQLAlchemyError as exc:
            self.logger.error("list_questions failed: %s", exc)
            raise

    def get_question(self, question_id: int) -> Optional[Question]:
        try:
            return self.session.get(Question, question_id)
        except SQLAlchemyError as exc:
            self.logger.error("get_question failed question_id=%s: %s", question_id, exc)
            raise

    def save_answer(self, question_id: int, option_id: int) -> Answer:
        answer = Answer(question_id=question_id, selected_option_id=option_id)
        try:
            self.session.add(answer)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            self.logger.error(
                "save_answer failed question_id=%s option_id=%s: %s", question_id, option_id, exc
            )
            raise
        return answer

    def clear_answers(self) -> None:
        if self.db.engine.dialect.name == "postgresql":
            stmt = text(f"TRUNCATE TABLE {Answer.__tablename__}")
        else:
            stmt = delete(Answer)
        try:
            self.session.execute(stmt)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            self.logger.error("clear_answers failed: %s", exc)
            raise

    def close(self) -> None:
        self.session.remove()
        self.db.engine.dispose()


def init_quiz_store(app, db) -> QuizStore:
    store = QuizStore(db, logger=app.logger)
    app.extensions[EXTENSION_KEY] = store
    return store


def get_quiz_store() -> QuizStore:
    return current_app.extensions[EXTENSION_KEY]
