from flask import Blueprint, request
from flasgger import swag_from

from ...schemas.answer import AnswerSubmitSchema, AnswerReceiptSchema
from ...services.quiz_store import get_quiz_store
from ...utils.validation import validate_or_abort

answers_bp = Blueprint("answers", __name__)

answer_submit_schema = AnswerSubmitSchema()
answer_receipt_schema = AnswerReceiptSchema()


@answers_bp.post("")
@swag_from({
    "tags": ["Answers"],
    "summary": "Submit an answer",
    "description": "Appends one answer row. Repeated submissions are stored independently.",
    "parameters": [{
        "in": "body",
        "name": "body",
        "required": True,
        "schema": {
            "type": "object",
            "properties": {
                "questionId": {"type": "integer", "example": 1},
                "optionId": {"type": "integer", "example": 2},
            },
            "required": ["questionId", "optionId"],
        },
    }],
    "responses": {
        201: {"description": "Answer saved"},
        400: {"description": "Missing questionId or optionId", "schema": {"$ref": "#/definitions/ErrorResponse"}},
        500: {"description": "Server error", "schema": {"$ref": "#/definitions/ErrorResponse"}},
    },
})
def submit_answer():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    data = validate_or_abort(answer_submit_schema, payload)

    get_quiz_store().save_answer(data["question_id"], data["option_id"])

    return answer_receipt_schema.dump({"message": "Answer saved"}), 201
