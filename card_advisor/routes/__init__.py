"""Blueprint factory for API routes."""

from flask import Blueprint, g, jsonify, request

from card_advisor.services import AppServices

from .cards import register_card_routes
from .chat import register_chat_routes
from .favorites import register_favorite_routes
from .recommendations import register_recommendation_routes

USER_HEADER = "X-User-Id"


def create_api_blueprint(services: AppServices, default_user_id: str = "guest") -> Blueprint:
    bp = Blueprint("api", __name__, url_prefix="/api")

    @bp.before_request
    def resolve_user() -> None:
        # No login flow; callers identify themselves or share the guest profile.
        g.user_id = (request.headers.get(USER_HEADER) or "").strip() or default_user_id

    @bp.get("/health")
    def health_check():
        return jsonify({"status": "ok", "message": "Server is running"})

    register_card_routes(bp, services)
    register_chat_routes(bp, services)
    register_recommendation_routes(bp, services)
    register_favorite_routes(bp, services)

    return bp
