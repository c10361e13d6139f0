from flask import abort

def validate_or_abort(schema, payload):
    """Load ``payload`` through ``schema``; a 400 VALIDATION_ERROR on failure."""
    errors = schema.validate(payload)
    if errors:
        abort(
            400,
            description={
                "code": "VALIDATION_ERROR",
                "message": "Validation error",
                "errors": errors,
            },
        )
    return schema.load(payload)

def parse_positive_id(raw: str, label: str = "id") -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = 0
    if value < 1:
        abort(
            400,
            description={
                "code": "INVALID_ID",
                "message": f"Invalid {label}.",
            },
        )
    return value
