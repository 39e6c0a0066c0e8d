from flask import Flask
from flasgger import Swagger
from flask_cors import CORS

from .config import get_config, parse_origins, validate_config
from .errors import register_error_handlers
from .logging_config import configure_logging, register_request_logging
from models import storage
from models.credential_store import CredentialStore
from utils.auth_service import AuthService
from utils.security import TokenSettings

# Swagger config: exposes /apispec.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Bucket List API",
        "version": "1.0.0",
        "description": "Users, locations and bucket list items with access/refresh token authentication.",
    },
    "basePath": "/",
    "schemes": ["http"],
    "securityDefinitions": {
        "Bearer": {
            "type": "apiKey",
            "name": "Authorization",
            "in": "header",
            "description": "Enter the token with the `Bearer ` prefix, e.g. \"Bearer abcde12345\"."
        }
    }
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": "/apispec.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None, clock=None, is_revoked=None) -> Flask:
    """
    Application factory: creates and configures the Flask app.

    ``clock`` (a callable returning an aware UTC datetime) and ``is_revoked``
    (jti -> bool) are handed to the token issuer/verifier; tests use them to
    simulate time and revocation.
    """
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    validate_config(app.config)

    configure_logging(app)
    register_request_logging(app)

    origins = parse_origins(app.config.get("CORS_ORIGINS", "*")) or ["*"]
    wildcard = "*" in origins
    CORS(
        app,
        resources={r"/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        send_wildcard=wildcard,
    )
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)
    register_error_handlers(app)

    # Secrets are read once here and stay fixed for the life of the process
    app.extensions["auth"] = AuthService(
        CredentialStore(storage),
        TokenSettings.from_config(app.config),
        clock=clock,
        is_revoked=is_revoked,
    )

    from .health import bp as health_bp
    from .auth import bp as auth_bp
    from .users import bp as users_bp
    from .locations import bp as locations_bp
    from .bucket_list_items import bp as items_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(locations_bp)
    app.register_blueprint(items_bp)

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        storage.close()

    @app.route("/")
    def root():
        """
        The classic move, hello world
        ---
        responses:
          200:
            description: Returns hello, world
        """
        return {"test": "hello,world"}, 200

    return app
