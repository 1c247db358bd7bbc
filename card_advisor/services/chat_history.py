"""Durable log of chat messages in ``chat_history``."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING

from card_advisor.core import format_timestamp


class ChatHistoryStore:
    def __init__(self, database: Any) -> None:
        self.collection = database["chat_history"]

    def append(
        self,
        session_id: str,
        user_id: str,
        role: str,
        content: str,
        recommendations: Optional[List[int]] = None,
        profile: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.collection.insert_one(
            {
                "session_id": session_id,
                "user_id": user_id,
                "role": role,
                "content": content,
                "recommendations": recommendations,
                "user_profile": profile,
                "timestamp": datetime.utcnow(),
            }
        )

    def history(self, session_id: str, user_id: str) -> List[Dict[str, Any]]:
        cursor = self.collection.find({"session_id": session_id, "user_id": user_id}).sort(
            [("timestamp", ASCENDING), ("_id", ASCENDING)]
        )
        return [
            {
                "role": doc.get("role"),
                "content": doc.get("content"),
                "timestamp": format_timestamp(doc.get("timestamp")),
            }
            for doc in cursor
        ]
