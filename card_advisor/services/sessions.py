"""In-process conversation sessions keyed by session id."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Iterator, List, Optional

from card_advisor.services.conversation import GREETING, Stage, StageResult
from card_advisor.services.profile import UserProfile


def _now_iso() -> str:
    return datetime.utcnow().isoformat(timespec="seconds") + "Z"


@dataclass
class ConversationSession:
    session_id: str
    user_id: Optional[str] = None
    messages: List[Dict[str, Any]] = field(default_factory=list)
    profile: UserProfile = field(default_factory=UserProfile)
    stage: Stage = Stage.WELCOME
    last_seen: float = 0.0
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add_message(self, role: str, content: str) -> Dict[str, Any]:
        message = {"role": role, "content": content, "timestamp": _now_iso()}
        self.messages.append(message)
        return message

    def apply(self, user_message: str, result: StageResult) -> None:
        self.add_message("user", user_message)
        self.profile = self.profile.merge(result.profile_patch)
        self.stage = result.next_stage
        self.add_message("assistant", result.reply)


class SessionStore:
    """
    Lock-guarded session table with idle expiry.

    Sessions idle for longer than ``ttl_seconds`` are dropped the next time the
    table is touched; ``ttl_seconds=0`` keeps sessions for the life of the
    process.
    """

    def __init__(self, ttl_seconds: int = 24 * 60 * 60, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, ConversationSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            self._evict_expired(self._clock())
            return len(self._sessions)

    def _evict_expired(self, now: float) -> None:
        if not self.ttl_seconds:
            return
        expired = [sid for sid, session in self._sessions.items() if now - session.last_seen > self.ttl_seconds]
        for sid in expired:
            del self._sessions[sid]

    def get(self, session_id: str) -> Optional[ConversationSession]:
        with self._lock:
            self._evict_expired(self._clock())
            return self._sessions.get(session_id)

    def get_or_create(self, session_id: str, user_id: Optional[str] = None) -> ConversationSession:
        with self._lock:
            now = self._clock()
            self._evict_expired(now)
            session = self._sessions.get(session_id)
            if session is None:
                session = ConversationSession(session_id=session_id, user_id=user_id)
                session.add_message("assistant", GREETING)
                self._sessions[session_id] = session
            session.last_seen = now
            return session

    @contextmanager
    def locked(self, session_id: str, user_id: Optional[str] = None) -> Iterator[ConversationSession]:
        """Yield the session while holding its lock so same-id updates never interleave."""
        session = self.get_or_create(session_id, user_id)
        with session.lock:
            try:
                yield session
            finally:
                session.last_seen = self._clock()
