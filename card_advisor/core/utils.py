"""Shared helper utilities for routes and stores."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from werkzeug.exceptions import BadRequest


def format_timestamp(value: Any) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat(timespec="milliseconds").replace("+00:00", "") + "Z"
    return value


def format_decimal(value: Any) -> Optional[str]:
    """Render a stored amount the way a DECIMAL(10, 2) column would."""
    if value is None:
        return None
    try:
        return f"{Decimal(str(value)):.2f}"
    except InvalidOperation as exc:
        raise ValueError(f"not a number: {value!r}") from exc


def parse_decimal(value: Any) -> Decimal:
    """Parse a fee/threshold given as a number or a decimal string."""
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"not a number: {value!r}") from exc
    if not parsed.is_finite():
        raise ValueError(f"not a number: {value!r}")
    return parsed


def require_amount(data: dict, field: str, *, required: bool = True) -> Optional[float]:
    """Validate a non-negative amount from a request payload."""
    raw = data.get(field)
    if raw is None or raw == "":
        if required:
            raise BadRequest(f"{field} is required")
        return None
    try:
        amount = parse_decimal(raw)
    except ValueError:
        raise BadRequest(f"{field} must be a number")
    if amount < 0:
        raise BadRequest(f"{field} must not be negative")
    return float(amount)


def parse_page_args(
    raw_page: Optional[str],
    raw_limit: Optional[str],
    default_limit: int = 12,
    max_limit: int = 100,
) -> Tuple[int, int]:
    """Parse page/limit query parameters; non-numeric values fall back to defaults."""
    try:
        page = int(raw_page) if raw_page is not None else 1
    except (TypeError, ValueError):
        page = 1
    try:
        limit = int(raw_limit) if raw_limit is not None else default_limit
    except (TypeError, ValueError):
        limit = default_limit
    if page < 1:
        page = 1
    if limit < 1:
        limit = default_limit
    return page, min(limit, max_limit)
