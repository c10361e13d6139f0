import pytest
from sqlalchemy import select

from quiz_api.extensions import db
from quiz_api.models import Answer

from .conftest import count_answers


def test_submit_answer_persists_one_row(client):
    resp = client.post("/answers", json={"questionId": 1, "optionId": 2})
    assert resp.status_code == 201
    assert resp.get_json() == {"message": "Answer saved"}

    rows = db.session.scalars(select(Answer)).all()
    assert len(rows) == 1
    assert (rows[0].question_id, rows[0].selected_option_id) == (1, 2)


def test_repeated_submission_is_not_deduplicated(client):
    for _ in range(2):
        assert client.post("/answers", json={"questionId": 1, "optionId": 2}).status_code == 201

    rows = db.session.scalars(select(Answer).order_by(Answer.id)).all()
    assert len(rows) == 2
    assert rows[0].id != rows[1].id
    assert {(r.question_id, r.selected_option_id) for r in rows} == {(1, 2)}


@pytest.mark.parametrize("payload", [
    {"questionId": 1},
    {"optionId": 2},
    {},
    {"questionId": None, "optionId": 2},
    {"questionId": 0, "optionId": 2},
    {"questionId": "one", "optionId": 2},
])
def test_missing_field_is_rejected(client, payload):
    resp = client.post("/answers", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "VALIDATION_ERROR"
    assert count_answers() == 0


def test_non_json_body_is_rejected(client):
    resp = client.post("/answers", data="questionId=1&optionId=2", content_type="text/plain")
    assert resp.status_code == 400
    assert count_answers() == 0


def test_extra_fields_are_ignored(client):
    resp = client.post("/answers", json={"questionId": 3, "optionId": 6, "user": "x"})
    assert resp.status_code == 201
    assert count_answers() == 1
