from marshmallow import EXCLUDE, fields, validate

from ..extensions import ma

class AnswerSubmitSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    # Clients send camelCase; 0 is treated the same as a missing id
    question_id = fields.Int(required=True, data_key="questionId", validate=validate.Range(min=1))
    option_id = fields.Int(required=True, data_key="optionId", validate=validate.Range(min=1))

class AnswerReceiptSchema(ma.Schema):
    message = fields.Str(required=True)
