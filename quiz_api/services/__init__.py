from .quiz_store import QuizStore, get_quiz_store  # noqa: F401
