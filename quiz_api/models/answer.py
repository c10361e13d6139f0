from ..extensions import db

class Answer(db.Model):
    """One submitted answer. Rows are appended per request and wiped at startup."""

    __tablename__ = "answers"

    id = db.Column(db.Integer, primary_key=True)

    question_id = db.Column(db.Integer, db.ForeignKey("questions.id"), nullable=False)
    selected_option_id = db.Column(db.Integer, db.ForeignKey("options.id"), nullable=False)
