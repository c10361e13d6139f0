from ..extensions import db

class Question(db.Model):
    __tablename__ = "questions"

    id = db.Column(db.Integer, primary_key=True)
    question_text = db.Column(db.Text, nullable=False)

    # relationship
    options = db.relationship(
        "Option",
        backref="question",
        lazy="selectin",
    )
