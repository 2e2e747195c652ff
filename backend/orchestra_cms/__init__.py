from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt, storage
from .api.v1 import v1_bp
from .cli import register_commands
from .middleware.request_context import request_context_middleware
from .errors import register_error_handlers, register_jwt_handlers
from flask_swagger_ui import get_swaggerui_blueprint
import os

OPENAPI_URL = "/openapi/cms.yaml"
SWAGGER_URL = "/swagger"


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    storage.init_app(app)

    # -------------------------------------------------
    # Request ids, errors, CLI
    # -------------------------------------------------
    request_context_middleware(app)
    register_error_handlers(app)
    register_jwt_handlers(jwt)
    register_commands(app)

    # -------------------------------------------------
    # API
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_api_docs(app)

    app.logger.info(f"Orchestra CMS started with {config_name} config")
    return app


def register_api_docs(app: Flask) -> None:
    """Serve the OpenAPI description and a Swagger UI pointing at it."""

    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_cms")
    def serve_openapi():
        spec_path = os.path.join(current_app.root_path, "api", "v1", "cms_openapi.yaml")
        return send_file(spec_path, mimetype="application/yaml", as_attachment=False)

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        OPENAPI_URL,
        config={
            "app_name": "Orchestra CMS API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )
    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)
