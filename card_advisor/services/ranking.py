"""Eligibility filtering and fee ordering for card recommendations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from card_advisor.core import parse_decimal
from card_advisor.services.profile import UserProfile

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5

RANKED = "ranked"
FALLBACK = "fallback"
UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class Recommendation:
    cards: List[Dict[str, Any]] = field(default_factory=list)
    strategy: str = RANKED


def _threshold(card: Dict[str, Any], key: str) -> Decimal:
    value = card.get(key)
    if value is None or value == "":
        return Decimal(0)
    return parse_decimal(value)


def _annual_fee(card: Dict[str, Any]) -> Decimal:
    try:
        return parse_decimal(card.get("annualFee"))
    except ValueError:
        return Decimal(0)


def rank_cards(cards: Iterable[Dict[str, Any]], profile: UserProfile) -> List[Dict[str, Any]]:
    """Cheapest-first active cards the profile qualifies for, at most five.

    Raises ``ValueError`` when a card carries a threshold that is not a number.
    """
    eligible = [card for card in cards if card.get("isActive", True)]

    income = profile.monthly_income
    if income is not None and income > 0:
        eligible = [card for card in eligible if _threshold(card, "minIncome") <= income]

    if profile.credit_score is not None:
        eligible = [card for card in eligible if _threshold(card, "minCreditScore") <= profile.credit_score]

    eligible.sort(key=_annual_fee)
    return eligible[:MAX_RECOMMENDATIONS]


def recommend(catalog: Any, profile: UserProfile) -> Recommendation:
    """Rank the catalog for a profile, degrading instead of raising.

    Ranking or store errors fall back to the first active cards unranked; if the
    store cannot be read at all the result is empty.
    """
    try:
        return Recommendation(cards=rank_cards(catalog.list_active(), profile), strategy=RANKED)
    except Exception:
        logger.exception("Ranking failed, falling back to unranked cards")

    try:
        return Recommendation(cards=catalog.list_active(limit=MAX_RECOMMENDATIONS), strategy=FALLBACK)
    except Exception:
        logger.exception("Fallback card lookup failed")
        return Recommendation(cards=[], strategy=UNAVAILABLE)
