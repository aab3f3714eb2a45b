"""Flask application entry point."""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Settings
from .dependencies import EXTENSION_KEY, Services
from .exceptions import INTERNAL_ERROR_MESSAGE, KVaultError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


# Error handlers
def handle_kvault_error(error: KVaultError):
    """Handle domain errors with their own code and status."""
    if error.status_code >= 500:
        logger.error(f"{error.__class__.__name__}: {error.message}", exc_info=error)
        return jsonify({
            "status": "error",
            "code": "INTERNAL_SERVER_ERROR",
            "message": INTERNAL_ERROR_MESSAGE
        }), 500
    return jsonify(error.to_dict()), error.status_code


def handle_http_error(error: HTTPException):
    """Handle routing errors (404, 405, ...) in the response envelope."""
    return jsonify({
        "status": "error",
        "code": error.name.upper().replace(" ", "_"),
        "message": error.description
    }), error.code


def handle_internal_error(error: Exception):
    """Handle unexpected failures without leaking detail to the client."""
    logger.exception(f"Internal error: {error}")
    return jsonify({
        "status": "error",
        "code": "INTERNAL_SERVER_ERROR",
        "message": INTERNAL_ERROR_MESSAGE
    }), 500


def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


def create_app(settings: Settings | None = None) -> Flask:
    """
    Build the Flask app and its services.

    Args:
        settings: Configuration; loaded from the environment when omitted

    Returns:
        Flask app with database, auth and data services attached
    """
    settings = settings or Settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)

    # CORS configuration
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    if settings.uses_default_secret:
        logger.warning("Using the default JWT secret; set JWT_SECRET_KEY in production")

    try:
        services = Services.build(settings)
        app.extensions[EXTENSION_KEY] = services
        logger.info(
            f"Database initialized successfully ({settings.database_path}, "
            f"schema version {services.database.get_schema_version()})"
        )
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise

    app.register_error_handler(KVaultError, handle_kvault_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_internal_error)

    app.add_url_rule("/health", view_func=health)

    # Register API blueprints
    from .api.auth import auth_bp
    from .api.data import data_bp

    app.register_blueprint(auth_bp, url_prefix=settings.api_prefix)
    app.register_blueprint(data_bp, url_prefix=f"{settings.api_prefix}/data")

    return app


def run() -> None:
    """Run the development server on the configured host and port."""
    settings = Settings()
    app = create_app(settings)
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    run()
