"""Recommendation endpoints."""

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import BadRequest

from card_advisor.services import AppServices
from card_advisor.services.profile import UserProfile
from card_advisor.services.ranking import recommend


def register_recommendation_routes(bp: Blueprint, services: AppServices) -> None:
    @bp.post("/recommendations")
    def recommendations():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            raise BadRequest("preferences must be an object")
        try:
            profile = UserProfile.from_payload(payload)
        except ValueError as exc:
            raise BadRequest(str(exc))
        return jsonify(recommend(services.catalog, profile).cards)
