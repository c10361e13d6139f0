from flask import Blueprint, jsonify
from flasgger import swag_from

from ...schemas.question import QuestionReadSchema
from ...services.quiz_store import get_quiz_store
from ...utils.validation import parse_positive_id

questions_bp = Blueprint("questions", __name__)

question_read_schema = QuestionReadSchema()
question_read_many_schema = QuestionReadSchema(many=True)


@questions_bp.get("")
@swag_from({
    "tags": ["Questions"],
    "summary": "List all questions with their options",
    "description": "Ordered by question id ascending.",
    "responses": {
        200: {"description": "OK", "schema": {"type": "array", "items": {"$ref": "#/definitions/Question"}}},
        500: {"description": "Server error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
    }
})
def list_questions():
    questions = get_quiz_store().list_questions()
    return jsonify(question_read_many_schema.dump(questions)), 200


@questions_bp.get("/<question_id>")
@swag_from({
    "tags": ["Questions"],
    "summary": "Get one question with its options",
    "parameters": [{"in": "path", "name": "question_id", "type": "integer", "required": True}],
    "responses": {
        200: {"description": "OK", "schema": {"$ref": "#/definitions/Question"}},
        400: {"description": "Invalid question ID", "schema": {"$ref": "#/definitions/ErrorResponse"}},
        404: {"description": "Question not found"},
        500: {"description": "Server error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
    }
})
def get_question(question_id):
    # Rejected before any query is issued
    qid = parse_positive_id(question_id, label="question ID")

    question = get_quiz_store().get_question(qid)
    if not question:
        return {"message": "Question not found."}, 404

    return question_read_schema.dump(question), 200
