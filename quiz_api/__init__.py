from dotenv import load_dotenv
from flask import Flask
from flasgger import Swagger
from .config import Config
from .errors import register_error_handlers
from .extensions import db, ma
from .middleware.request_id import init_request_id
from .services.quiz_store import init_quiz_store
from .swagger_config import swagger_template

load_dotenv()

def create_app(config_class=Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    Swagger(app, template=swagger_template(app))

    # Extensions
    db.init_app(app)
    ma.init_app(app)

    # The pool is created lazily; nothing here touches the database
    init_quiz_store(app, db)

    # Middleware + errors
    init_request_id(app)
    register_error_handlers(app)

    # Blueprint imports
    from .api.health.routes import health_bp
    from .api.questions.routes import questions_bp
    from .api.answers.routes import answers_bp

    # Blueprints
    app.register_blueprint(health_bp)
    app.register_blueprint(questions_bp, url_prefix="/questions")
    app.register_blueprint(answers_bp, url_prefix="/answers")

    return app
