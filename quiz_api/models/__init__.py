from .question import Question  # noqa: F401
from .option import Option  # noqa: F401
from .answer import Answer  # noqa: F401

# Import ALL models so SQLAlchemy registers them

__all__ = [
    "Question",
    "Option",
    "Answer",
]
