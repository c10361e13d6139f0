import time
import uuid
from flask import g, request, current_app

HEADER = "X-Request-Id"

def init_request_id(app):
    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get(HEADER) or str(uuid.uuid4())
        g.request_started = time.perf_counter()

    @app.after_request
    def _add_request_id_header(response):
        if hasattr(g, "request_id"):
            response.headers[HEADER] = g.request_id
            elapsed_ms = (time.perf_counter() - g.request_started) * 1000.0
            current_app.logger.debug(
                "%s %s -> %s in %.1fms request_id=%s",
                request.method, request.path, response.status_code, elapsed_ms, g.request_id,
            )
        return response
