import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify
from flask_cors import CORS
from pymongo.errors import PyMongoError
from werkzeug.exceptions import BadRequest, HTTPException, NotFound

from card_advisor.core import ensure_indexes, get_database, get_mongo_client, get_settings, load_environment
from card_advisor.routes import create_api_blueprint
from card_advisor.services import build_services


def create_app(database: Any = None, settings: Optional[Dict[str, Any]] = None) -> Flask:
    load_environment()
    app = Flask(__name__)
    settings = {**get_settings(), **(settings or {})}

    CORS(
        app,
        resources={r"/api/*": {"origins": [settings["client_origin"], "http://127.0.0.1:5173"]}},
        supports_credentials=True,
        methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-User-Id"],
        expose_headers=["Content-Type"],
    )

    mongo_client = None
    if database is None:
        mongo_client = get_mongo_client()
        database = get_database(mongo_client)
    ensure_indexes(database)

    services = build_services(database, settings["session_ttl_seconds"])
    if settings["seed_catalog"]:
        services.catalog.seed_reference_cards()

    app.config.update(
        MONGO_CLIENT=mongo_client,
        MONGO_DB=database,
        SERVICES=services,
        SETTINGS=settings,
    )

    app.register_blueprint(create_api_blueprint(services, settings["default_user_id"]))

    @app.errorhandler(BadRequest)
    def handle_bad_request(error):
        response = jsonify({"error": "bad_request", "message": error.description})
        response.status_code = 400
        return response

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        response = jsonify({"error": "not_found", "message": error.description})
        response.status_code = 404
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({"error": (error.name or "error").lower().replace(" ", "_"), "message": error.description})
        response.status_code = error.code or 500
        return response

    @app.errorhandler(PyMongoError)
    def handle_store_error(error):
        app.logger.exception("Database error: %s", error)
        response = jsonify({"error": "internal_error", "message": "Internal server error"})
        response.status_code = 500
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        app.logger.exception("Unhandled error: %s", error)
        response = jsonify({"error": "internal_error", "message": "Internal server error"})
        response.status_code = 500
        return response

    return app


if __name__ == "__main__":
    # Create and run the Flask app directly (use Flask CLI in production)
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    settings = app.config["SETTINGS"]
    app.run(host="0.0.0.0", port=settings["port"], debug=settings["debug"])
