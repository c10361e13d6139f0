from marshmallow import fields

from ..extensions import ma

class OptionReadSchema(ma.Schema):
    id = fields.Int()
    option_text = fields.Str()

class QuestionReadSchema(ma.Schema):
    id = fields.Int()
    question_text = fields.Str()
    options = fields.List(fields.Nested(OptionReadSchema))
