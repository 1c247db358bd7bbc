"""Saved-card routes for the current user."""

from flask import Blueprint, g, jsonify, request
from werkzeug.exceptions import BadRequest, NotFound

from card_advisor.services import AppServices


def register_favorite_routes(bp: Blueprint, services: AppServices) -> None:
    favorites = services.favorites

    @bp.get("/favorites")
    def list_favorites():
        return jsonify(favorites.list_favorites(g.user_id))

    @bp.post("/favorites")
    def add_favorite():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise BadRequest("Invalid payload")
        raw_card_id = payload.get("cardId")
        if raw_card_id is None or isinstance(raw_card_id, bool):
            raise BadRequest("cardId is required")
        try:
            card_id = int(raw_card_id)
        except (TypeError, ValueError):
            raise BadRequest("cardId must be an integer")

        if services.catalog.get_card(card_id) is None:
            raise NotFound("Card not found")
        return jsonify(favorites.add_favorite(g.user_id, card_id)), 201

    @bp.delete("/favorites/<int:card_id>")
    def remove_favorite(card_id: int):
        favorites.remove_favorite(g.user_id, card_id)
        return jsonify({"ok": True})

    @bp.get("/favorites/<int:card_id>/status")
    def favorite_status(card_id: int):
        return jsonify({"favorited": favorites.is_card_favorited(g.user_id, card_id)})
