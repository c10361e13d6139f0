def swagger_template(app=None):
    title = "Quiz API"
    version = "1.0.0"

    if app:
        title = app.config.get("SWAGGER_TITLE", title)
        version = app.config.get("SWAGGER_VERSION", version)

    return {
        "swagger": "2.0",
        "info": {"title": title, "version": version},
        "definitions": {
            "Option": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer", "example": 2},
                    "option_text": {"type": "string", "example": "Paris"},
                }
            },
            "Question": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer", "example": 1},
                    "question_text": {"type": "string", "example": "What is the capital of France?"},
                    "options": {"type": "array", "items": {"$ref": "#/definitions/Option"}},
                }
            },
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "success": {"type": "boolean", "example": False},
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string", "example": "VALIDATION_ERROR"},
                            "message": {"type": "string", "example": "Validation error"},
                            "details": {"type": "object"}
                        }
                    },
                    "request_id": {"type": "string"}
                }
            }
        }
    }
