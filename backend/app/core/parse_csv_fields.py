"""CSV Field Parsers: pure coercion helpers for seed data rows.

Invariants:
    - Never raise on bad input: return a neutral value (None, '', 0, False)
    - Inputs may be None (short rows from csv.DictReader)

Design Decisions:
    - Pure functions in core: importers in services/ do all file and DB IO
"""

import logging
import uuid
from datetime import date

logger = logging.getLogger(__name__)

UUID_LENGTH = 36


def parse_uuid(value: str | None) -> uuid.UUID | None:
    """Trimmed 36-char UUID, or None (with a warning) when invalid."""
    cleaned = (value or "").strip()
    if len(cleaned) != UUID_LENGTH:
        logger.warning(f"Invalid UUID detected: {cleaned!r}")
        return None
    try:
        return uuid.UUID(cleaned)
    except ValueError:
        logger.warning(f"Invalid UUID detected: {cleaned!r}")
        return None


def parse_string(value: str | None) -> str:
    return value.strip() if isinstance(value, str) else ""


def parse_int_value(value: str | None) -> int:
    """Integer value, 0 when the field is missing or not numeric."""
    parsed = parse_optional_int(value)
    return 0 if parsed is None else parsed


def parse_optional_int(value: str | None) -> int | None:
    try:
        return int((value or "").strip())
    except ValueError:
        return None


def parse_date(value: str | None) -> date | None:
    """Parse a DD/MM/YYYY date."""
    parts = (value or "").strip().split("/")
    if len(parts) != 3:
        return None
    try:
        day, month, year = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def parse_bool(value: str | None) -> bool:
    return str(value).strip().lower() == "true"
