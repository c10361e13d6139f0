"""
Startup sequence for the quiz API.

The process must not accept connections before the database is reachable:
wait for a pooled connection (fixed-interval retry), reset the answers
table (best effort), and only then open the listener.
"""
import logging
import sys
import time
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from .services.quiz_store import QuizStore, get_quiz_store

DEFAULT_MAX_ATTEMPTS = 20
DEFAULT_DELAY_MS = 1500

log = logging.getLogger(__name__)


def wait_for_db(
    ping: Callable[[], None],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_ms: int = DEFAULT_DELAY_MS,
    logger: Optional[logging.Logger] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Call ``ping`` until it succeeds, at most ``max_attempts`` times, waiting
    ``delay_ms`` between attempts. Returns the attempt that succeeded.
    The last failure is re-raised.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    logger = logger or log
    for attempt in range(1, max_attempts + 1):
        try:
            ping()
        except Exception as exc:
            logger.warning("DB not ready (attempt %d/%d): %s", attempt, max_attempts, exc)
            if attempt == max_attempts:
                raise
            sleep(delay_ms / 1000.0)
        else:
            logger.info("Connected to DB on attempt %d", attempt)
            return attempt


def clear_answers(store: QuizStore, logger: Optional[logging.Logger] = None) -> bool:
    logger = logger or log
    try:
        store.clear_answers()
    except SQLAlchemyError as exc:
        logger.warning("Failed to truncate answers table (continuing): %s", exc)
        return False
    logger.info("Answers table cleared.")
    return True


def prepare(app) -> None:
    """Wait for the database and reset answers. Raises if the DB never comes up."""
    with app.app_context():
        store = get_quiz_store()
        wait_for_db(
            store.ping,
            max_attempts=app.config.get("STARTUP_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            delay_ms=app.config.get("STARTUP_RETRY_DELAY_MS", DEFAULT_DELAY_MS),
            logger=app.logger,
        )
        clear_answers(store, logger=app.logger)


def listen(app) -> None:
    host = app.config.get("HOST", "0.0.0.0")
    port = app.config.get("PORT", 3000)
    app.logger.info("Flask server running on http://%s:%s", host, port)
    app.run(host=host, port=port, threaded=True)


def main(app=None) -> int:
    if app is None:
        from . import create_app
        app = create_app()

    try:
        prepare(app)
    except Exception:
        app.logger.exception("Failed to initialize server")
        return 1

    try:
        listen(app)
    except OSError:
        app.logger.exception("Failed to start listener")
        return 1
    except SystemExit as exc:
        # werkzeug reports a failed bind on stderr and exits on its own
        if not exc.code:
            return 0
        app.logger.error(
            "Failed to start listener on %s:%s (exit status %s)",
            app.config.get("HOST"), app.config.get("PORT"), exc.code,
        )
        return 1
    finally:
        with app.app_context():
            get_quiz_store().close()
    return 0


def run() -> None:
    sys.exit(main())
