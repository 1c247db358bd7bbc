"""Card catalog routes."""

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest, NotFound

from card_advisor.core import parse_page_args
from card_advisor.services import AppServices


def register_card_routes(bp: Blueprint, services: AppServices) -> None:
    catalog = services.catalog

    @bp.get("/cards")
    def list_cards():
        page, limit = parse_page_args(request.args.get("page"), request.args.get("limit"))
        cards, total = catalog.list_cards(
            offset=(page - 1) * limit,
            limit=limit,
            search=request.args.get("search"),
            issuer=request.args.get("issuer"),
            card_type=request.args.get("cardType"),
            sort_by=request.args.get("sortBy"),
        )
        return jsonify({"cards": cards, "total": total})

    @bp.get("/cards/<int:card_id>")
    def get_card(card_id: int):
        card = catalog.get_card(card_id)
        if card is None:
            raise NotFound("Card not found")
        return jsonify(card)

    @bp.post("/cards")
    def create_card():
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise BadRequest("Invalid payload")
        return jsonify(catalog.create_card(payload)), 201
