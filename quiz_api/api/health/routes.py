from flask import Blueprint
from flasgger import swag_from

health_bp = Blueprint("health", __name__)


@health_bp.get("/healthcheck")
@swag_from({
    "tags": ["Health"],
    "summary": "Liveness probe",
    "description": "Never touches the database, so it answers even while the DB is down.",
    "responses": {200: {"description": "OK"}},
})
def healthcheck():
    return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}
