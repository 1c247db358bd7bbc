"""Database helpers and index management."""

import logging
import os
from typing import Any, List, Tuple

from pymongo import ASCENDING, DESCENDING, MongoClient, ReturnDocument
from pymongo.errors import DuplicateKeyError, OperationFailure

logger = logging.getLogger(__name__)


def get_mongo_client() -> MongoClient:
    uri = os.environ.get("MONGODB_URI")
    if not uri:
        raise RuntimeError("MONGODB_URI must be set")
    return MongoClient(uri, tlsAllowInvalidCertificates=False)


def get_database(client: MongoClient):
    db_name = os.environ.get("MONGODB_DB")
    if db_name:
        return client[db_name]
    database = client.get_default_database()
    if database is None:
        raise RuntimeError("Database name must be provided via connection string or MONGODB_DB")
    return database


def _safe_create_index(coll, keys: List[Tuple[str, int]], **opts):
    """
    Create an index but be forgiving:
      - Ignore differing options / specs conflicts (codes 85, 86)
      - Skip if data currently violates a unique index
    """
    try:
        return coll.create_index(keys, **opts)
    except DuplicateKeyError:
        logger.warning("Skipped creating index %s due to duplicate key", opts.get("name") or keys)
        return None
    except OperationFailure as exc:
        code = getattr(exc, "code", None)
        if code in (85, 86):
            # 85 IndexOptionsConflict, 86 IndexKeySpecsConflict
            logger.warning("Ignored index conflict for %s (code %s)", opts.get("name") or keys, code)
            return None
        raise


def ensure_indexes(database: Any) -> None:
    cards = database["credit_cards"]
    _safe_create_index(cards, [("is_active", ASCENDING), ("created_at", DESCENDING)])
    _safe_create_index(cards, [("issuer", ASCENDING)])
    _safe_create_index(cards, [("card_type", ASCENDING)])

    favorites = database["user_favorites"]
    _safe_create_index(
        favorites,
        [("user_id", ASCENDING), ("card_id", ASCENDING)],
        unique=True,
        name="user_id_1_card_id_1",
    )
    _safe_create_index(favorites, [("user_id", ASCENDING), ("created_at", DESCENDING)])

    history = database["chat_history"]
    _safe_create_index(
        history, [("user_id", ASCENDING), ("session_id", ASCENDING), ("timestamp", ASCENDING)]
    )


def next_sequence(database: Any, name: str, count: int = 1) -> int:
    """Reserve ``count`` consecutive integer ids and return the first one."""
    if count < 1:
        raise ValueError("count must be positive")
    counter = database["counters"].find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": count}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(counter["seq"]) - count + 1
