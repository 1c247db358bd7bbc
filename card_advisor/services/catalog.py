"""Credit card catalog backed by the ``credit_cards`` collection."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING
from werkzeug.exceptions import BadRequest

from card_advisor.core import format_decimal, format_timestamp, next_sequence, require_amount
from card_advisor.services.reference_cards import REFERENCE_CARDS

logger = logging.getLogger(__name__)

ALL_ISSUERS = "All Issuers"
ALL_TYPES = "All Types"

SORT_ORDERS: Dict[str, List[Tuple[str, int]]] = {
    "Lowest Annual Fee": [("annual_fee", ASCENDING), ("_id", ASCENDING)],
    "annual_fee": [("annual_fee", ASCENDING), ("_id", ASCENDING)],
    "Highest Cashback": [("reward_rate", DESCENDING), ("_id", ASCENDING)],
    "reward_rate": [("reward_rate", DESCENDING), ("_id", ASCENDING)],
}
DEFAULT_SORT: List[Tuple[str, int]] = [("created_at", DESCENDING), ("_id", DESCENDING)]


def format_card(doc: Dict[str, Any]) -> Dict[str, Any]:
    min_score = doc.get("min_credit_score")
    return {
        "id": doc.get("_id"),
        "name": doc.get("name"),
        "issuer": doc.get("issuer"),
        "joiningFee": format_decimal(doc.get("joining_fee", 0)),
        "annualFee": format_decimal(doc.get("annual_fee", 0)),
        "rewardType": doc.get("reward_type"),
        "rewardRate": doc.get("reward_rate"),
        "eligibilityCriteria": doc.get("eligibility_criteria"),
        "specialPerks": list(doc.get("special_perks") or []),
        "affiliateLink": doc.get("affiliate_link"),
        "applyLink": doc.get("apply_link"),
        "cardType": doc.get("card_type"),
        "minCreditScore": int(min_score) if min_score is not None else None,
        "minIncome": format_decimal(doc.get("min_income")),
        "isActive": bool(doc.get("is_active", True)),
        "createdAt": format_timestamp(doc.get("created_at")),
    }


def _optional_link(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip() or None
    if value is not None:
        return str(value)
    return None


def prepare_card_payload(data: Dict[str, Any]) -> Dict[str, Any]:
    """Validate an API-shaped card and return the document to store."""
    required_fields = ["name", "issuer", "rewardType", "rewardRate", "eligibilityCriteria", "cardType"]
    for field in required_fields:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise BadRequest(f"{field} is required")

    perks = data.get("specialPerks", [])
    if not isinstance(perks, list) or not all(isinstance(perk, str) for perk in perks):
        raise BadRequest("specialPerks must be a list of strings")

    min_score = data.get("minCreditScore")
    if min_score is not None:
        if isinstance(min_score, bool):
            raise BadRequest("minCreditScore must be an integer")
        try:
            min_score = int(min_score)
        except (TypeError, ValueError):
            raise BadRequest("minCreditScore must be an integer")
        if min_score < 0:
            raise BadRequest("minCreditScore must not be negative")

    return {
        "name": data["name"].strip(),
        "issuer": data["issuer"].strip(),
        "joining_fee": require_amount(data, "joiningFee"),
        "annual_fee": require_amount(data, "annualFee"),
        "reward_type": data["rewardType"].strip(),
        "reward_rate": data["rewardRate"].strip(),
        "eligibility_criteria": data["eligibilityCriteria"].strip(),
        "special_perks": [perk.strip() for perk in perks if perk.strip()],
        "affiliate_link": _optional_link(data.get("affiliateLink")),
        "apply_link": _optional_link(data.get("applyLink")),
        "card_type": data["cardType"].strip(),
        "min_credit_score": min_score,
        "min_income": require_amount(data, "minIncome", required=False),
        "is_active": bool(data.get("isActive", True)),
    }


class CardCatalog:
    """Paginated, filtered access to the card catalog."""

    def __init__(self, database: Any) -> None:
        self.database = database
        self.collection = database["credit_cards"]

    def _build_query(
        self,
        search: Optional[str] = None,
        issuer: Optional[str] = None,
        card_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        query: Dict[str, Any] = {"is_active": True}
        if search and search.strip():
            pattern = re.escape(search.strip())
            query["$or"] = [
                {"name": {"$regex": pattern, "$options": "i"}},
                {"issuer": {"$regex": pattern, "$options": "i"}},
            ]
        if issuer and issuer != ALL_ISSUERS:
            query["issuer"] = issuer
        if card_type and card_type != ALL_TYPES:
            query["card_type"] = card_type
        return query

    def list_cards(
        self,
        offset: int,
        limit: int,
        search: Optional[str] = None,
        issuer: Optional[str] = None,
        card_type: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], int]:
        query = self._build_query(search, issuer, card_type)
        order = SORT_ORDERS.get(sort_by or "", DEFAULT_SORT)
        cursor = self.collection.find(query).sort(order).skip(max(offset, 0)).limit(limit)
        cards = [format_card(doc) for doc in cursor]
        total = self.collection.count_documents(query)
        return cards, total

    def list_active(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        cursor = self.collection.find({"is_active": True}).sort("_id", ASCENDING)
        if limit is not None:
            cursor = cursor.limit(limit)
        return [format_card(doc) for doc in cursor]

    def get_card(self, card_id: int) -> Optional[Dict[str, Any]]:
        doc = self.collection.find_one({"_id": card_id})
        return format_card(doc) if doc else None

    def create_card(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        document = prepare_card_payload(payload)
        document["_id"] = next_sequence(self.database, "credit_cards")
        document["created_at"] = datetime.utcnow()
        self.collection.insert_one(document)
        return format_card(document)

    def seed_reference_cards(self) -> int:
        """Insert the reference dataset unless the catalog already has cards."""
        if self.collection.find_one({}, {"_id": 1}) is not None:
            return 0
        documents = [prepare_card_payload(card) for card in REFERENCE_CARDS]
        first_id = next_sequence(self.database, "credit_cards", count=len(documents))
        now = datetime.utcnow()
        for offset, document in enumerate(documents):
            document["_id"] = first_id + offset
            document["created_at"] = now
        self.collection.insert_many(documents)
        logger.info("Seeded %d reference cards", len(documents))
        return len(documents)
