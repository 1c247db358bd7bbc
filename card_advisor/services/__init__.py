"""Stores and business rules behind the API routes."""

from dataclasses import dataclass

from .catalog import CardCatalog
from .chat_history import ChatHistoryStore
from .favorites import FavoritesStore
from .sessions import SessionStore


@dataclass
class AppServices:
    catalog: CardCatalog
    favorites: FavoritesStore
    sessions: SessionStore
    chat_history: ChatHistoryStore


def build_services(database, session_ttl_seconds: int) -> AppServices:
    return AppServices(
        catalog=CardCatalog(database),
        favorites=FavoritesStore(database),
        sessions=SessionStore(ttl_seconds=session_ttl_seconds),
        chat_history=ChatHistoryStore(database),
    )


__all__ = [
    "AppServices",
    "build_services",
    "CardCatalog",
    "ChatHistoryStore",
    "FavoritesStore",
    "SessionStore",
]
