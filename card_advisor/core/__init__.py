"""Core utilities for the Card Advisor server."""

from .config import get_settings, load_environment
from .database import ensure_indexes, get_database, get_mongo_client, next_sequence
from .utils import format_decimal, format_timestamp, parse_decimal, parse_page_args, require_amount

__all__ = [
    "load_environment",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "ensure_indexes",
    "next_sequence",
    "format_decimal",
    "format_timestamp",
    "parse_decimal",
    "parse_page_args",
    "require_amount",
]
