"""Profile facts accumulated over a conversation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

SPENDING_CATEGORIES = ("dining", "travel", "shopping", "fuel", "grocery")


def _parse_whole_number(value: Any, field: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{field} must be a number")


@dataclass(frozen=True)
class UserProfile:
    monthly_income: Optional[int] = None
    spending_categories: Optional[List[str]] = None
    credit_score: Optional[int] = None

    def merge(self, patch: Dict[str, Any]) -> "UserProfile":
        """Return a copy with the patched fields replaced; other fields are kept."""
        return replace(self, **patch)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.monthly_income is not None:
            payload["monthlyIncome"] = self.monthly_income
        if self.spending_categories is not None:
            payload["spendingCategories"] = list(self.spending_categories)
        if self.credit_score is not None:
            payload["creditScore"] = self.credit_score
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "UserProfile":
        """Build a profile from request preferences; numbers may arrive as strings."""
        categories = payload.get("spendingCategories")
        if categories is not None:
            if not isinstance(categories, list):
                raise ValueError("spendingCategories must be a list")
            categories = [str(tag).lower() for tag in categories if str(tag).lower() in SPENDING_CATEGORIES]
        return cls(
            monthly_income=_parse_whole_number(payload.get("monthlyIncome"), "monthlyIncome"),
            spending_categories=categories,
            credit_score=_parse_whole_number(payload.get("creditScore"), "creditScore"),
        )
