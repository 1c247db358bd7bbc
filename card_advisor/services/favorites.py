"""Saved cards per user, stored in ``user_favorites``."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError

from card_advisor.core import format_timestamp
from card_advisor.services.catalog import format_card


def format_favorite(doc: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": str(doc["_id"]),
        "userId": doc.get("user_id"),
        "cardId": doc.get("card_id"),
        "createdAt": format_timestamp(doc.get("created_at")),
    }


class FavoritesStore:
    def __init__(self, database: Any) -> None:
        self.collection = database["user_favorites"]
        self.cards = database["credit_cards"]

    def list_favorites(self, user_id: str) -> List[Dict[str, Any]]:
        favorites = list(
            self.collection.find({"user_id": user_id}).sort([("created_at", DESCENDING), ("_id", DESCENDING)])
        )
        if not favorites:
            return []
        card_ids = list({fav["card_id"] for fav in favorites})
        cards_by_id = {doc["_id"]: doc for doc in self.cards.find({"_id": {"$in": card_ids}})}

        results: List[Dict[str, Any]] = []
        for fav in favorites:
            card = cards_by_id.get(fav["card_id"])
            if card is None:
                continue
            entry = format_favorite(fav)
            entry["card"] = format_card(card)
            results.append(entry)
        return results

    def add_favorite(self, user_id: str, card_id: int) -> Dict[str, Any]:
        """Save a card; saving the same pair twice returns the existing favorite."""
        key = {"user_id": user_id, "card_id": card_id}
        try:
            self.collection.update_one(
                key,
                {"$setOnInsert": {"created_at": datetime.utcnow()}},
                upsert=True,
            )
        except DuplicateKeyError:
            pass  # a concurrent add won the upsert
        return format_favorite(self.collection.find_one(key))

    def remove_favorite(self, user_id: str, card_id: int) -> bool:
        result = self.collection.delete_one({"user_id": user_id, "card_id": card_id})
        return result.deleted_count > 0

    def is_card_favorited(self, user_id: str, card_id: int) -> bool:
        return self.collection.find_one({"user_id": user_id, "card_id": card_id}, {"_id": 1}) is not None
