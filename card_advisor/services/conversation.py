"""
Scripted questionnaire that gathers a profile before recommending cards.

The flow moves forward only:

    welcome -> income -> spending -> credit_score -> recommendations -> general

``advance`` is pure: it reads the message, the profile gathered so far and the
current stage, and returns the reply, the next stage and the profile fields to
merge. Persisting the result is the caller's job.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Tuple

from card_advisor.services.profile import UserProfile


class Stage(str, Enum):
    WELCOME = "welcome"
    INCOME = "income"
    SPENDING = "spending"
    CREDIT_SCORE = "credit_score"
    RECOMMENDATIONS = "recommendations"
    GENERAL = "general"


STAGE_ORDER: Tuple[Stage, ...] = (
    Stage.WELCOME,
    Stage.INCOME,
    Stage.SPENDING,
    Stage.CREDIT_SCORE,
    Stage.RECOMMENDATIONS,
    Stage.GENERAL,
)

GREETING = (
    "Hi! I'm your AI credit card advisor. I'll ask you a few questions to recommend the best "
    "cards for your needs. Let's start - what's your approximate monthly income in rupees?"
)

INTEGER_PATTERN = re.compile(r"\d+")

CATEGORY_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("dining", ("dining", "restaurant")),
    ("travel", ("travel", "flight", "hotel")),
    ("shopping", ("shopping", "online")),
    ("fuel", ("fuel", "petrol", "gas")),
    ("grocery", ("grocery", "groceries")),
)

# First match wins, so "700-750" lands on 780.
CREDIT_SCORE_RULES: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("750", "above 750", "excellent"), 780),
    (("700", "good"), 720),
    (("650", "fair"), 670),
    (("below", "poor"), 600),
)
DEFAULT_CREDIT_SCORE = 700


@dataclass(frozen=True)
class StageResult:
    reply: str
    next_stage: Stage
    profile_patch: Dict[str, Any] = field(default_factory=dict)


def extract_income(message: str) -> int:
    """First integer in the message; values under 1000 are read as thousands ("50" -> 50000)."""
    match = INTEGER_PATTERN.search(message)
    income = int(match.group(0)) if match else 0
    if income < 1000:
        income *= 1000
    return income


def extract_categories(message: str) -> List[str]:
    text = message.lower()
    return [tag for tag, keywords in CATEGORY_KEYWORDS if any(word in text for word in keywords)]


def estimate_credit_score(message: str) -> int:
    text = message.lower()
    for keywords, score in CREDIT_SCORE_RULES:
        if any(word in text for word in keywords):
            return score
    return DEFAULT_CREDIT_SCORE


def _handle_income(message: str, profile: UserProfile) -> StageResult:
    income = extract_income(message)
    return StageResult(
        reply=(
            f"Perfect! With a monthly income of ₹{income}, you qualify for several great cards. "
            "Now, what are your main spending categories? For example: dining out, online shopping, "
            "travel, fuel, groceries?"
        ),
        next_stage=Stage.SPENDING,
        profile_patch={"monthly_income": income},
    )


def _handle_spending(message: str, profile: UserProfile) -> StageResult:
    categories = extract_categories(message)
    if categories:
        opener = f"Excellent! I can see you spend on {', '.join(categories)}."
    else:
        opener = "Got it, no single category stands out."
    return StageResult(
        reply=(
            f"{opener} One more question - do you know your approximate credit score? This helps me "
            "recommend cards you're likely to get approved for. (You can say: above 750, 700-750, "
            "650-700, or below 650)"
        ),
        next_stage=Stage.CREDIT_SCORE,
        profile_patch={"spending_categories": categories},
    )


def _handle_credit_score(message: str, profile: UserProfile) -> StageResult:
    score = estimate_credit_score(message)
    income = profile.monthly_income if profile.monthly_income is not None else "not shared"
    categories = ", ".join(profile.spending_categories or []) or "general purchases"
    return StageResult(
        reply=(
            f"Perfect! Based on your profile - income: ₹{income}, spending on {categories}, and credit "
            f"score around {score} - I've found the best cards that match your needs! Check out the "
            "recommendations below."
        ),
        next_stage=Stage.RECOMMENDATIONS,
        profile_patch={"credit_score": score},
    )


def _handle_followup(message: str, profile: UserProfile) -> StageResult:
    return StageResult(
        reply=(
            "Thank you for that information! Is there anything specific about credit cards you'd "
            "like to know more about?"
        ),
        next_stage=Stage.GENERAL,
    )


STAGE_HANDLERS: Dict[Stage, Callable[[str, UserProfile], StageResult]] = {
    Stage.WELCOME: _handle_income,
    Stage.INCOME: _handle_income,
    Stage.SPENDING: _handle_spending,
    Stage.CREDIT_SCORE: _handle_credit_score,
    Stage.RECOMMENDATIONS: _handle_followup,
    Stage.GENERAL: _handle_followup,
}


def advance(message: str, profile: UserProfile, stage: Stage) -> StageResult:
    return STAGE_HANDLERS[Stage(stage)](message, profile)
