"""Chatbot interaction routes."""

from typing import Any, Dict, List

from flask import Blueprint, current_app, g, jsonify, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import BadRequest

from card_advisor.services import AppServices
from card_advisor.services.conversation import Stage, advance
from card_advisor.services.ranking import recommend


def register_chat_routes(bp: Blueprint, services: AppServices) -> None:
    @bp.post("/chat")
    def chat():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
        message = payload.get("message")
        session_id = payload.get("sessionId")
        if not isinstance(message, str) or not isinstance(session_id, str):
            raise BadRequest("message and sessionId are required")
        if not message.strip() or not session_id.strip():
            raise BadRequest("message and sessionId are required")
        message = message.strip()
        session_id = session_id.strip()

        with services.sessions.locked(session_id, g.user_id) as session:
            # only the greeting so far
            greeting = session.messages[0] if len(session.messages) == 1 else None

            result = advance(message, session.profile, session.stage)
            session.apply(message, result)
            profile = session.profile

            recommendations: List[Dict[str, Any]] = []
            if session.stage is Stage.RECOMMENDATIONS and profile.monthly_income is not None:
                recommendations = recommend(services.catalog, profile).cards

            history = services.chat_history
            try:
                if greeting is not None:
                    history.append(session_id, g.user_id, greeting["role"], greeting["content"])
                history.append(session_id, g.user_id, "user", message)
                history.append(
                    session_id,
                    g.user_id,
                    "assistant",
                    result.reply,
                    recommendations=[card["id"] for card in recommendations],
                    profile=profile.to_dict(),
                )
            except PyMongoError:
                current_app.logger.exception("Failed to persist chat history for session %s", session_id)

            return jsonify(
                {
                    "message": result.reply,
                    "recommendations": recommendations,
                    "userProfile": profile.to_dict(),
                    "stage": session.stage.value,
                }
            )

    @bp.get("/chat/<session_id>/history")
    def chat_history(session_id: str):
        session = services.sessions.get(session_id)
        if session is not None and session.user_id == g.user_id:
            with session.lock:
                return jsonify(list(session.messages))
        return jsonify(services.chat_history.history(session_id, g.user_id))
