# edumanage/utils/date_format.py
"""Conversion between the display format (DD/MM/YYYY) and the database format (YYYY-MM-DD)."""
import logging
import re
from datetime import date, datetime
from typing import Optional, Union

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DIGITS_RE = re.compile(r"[0-9]+")

MIN_YEAR = 1900
MAX_YEAR = 2100


def to_database_format(value: Optional[str]) -> Optional[str]:
    """Convert ``DD/MM/YYYY`` to ``YYYY-MM-DD``.

    Strings already in ISO form are returned unchanged. Returns ``None`` for
    empty or malformed input and for any field outside its range. The day is
    only checked against 1..31, so ``31/02/2024`` is accepted.
    """
    if not value:
        return None

    if ISO_DATE_RE.fullmatch(value):
        return value

    parts = value.split("/")
    if len(parts) != 3:
        return None

    if not all(DIGITS_RE.fullmatch(part) for part in parts):
        return None
    day, month, year = (int(part) for part in parts)

    if not (1 <= day <= 31 and 1 <= month <= 12 and MIN_YEAR <= year <= MAX_YEAR):
        return None

    return f"{year}-{month:02d}-{day:02d}"


def to_display_format(value: Union[str, date, datetime, None]) -> str:
    """Convert an ISO date (string, date or datetime) to ``DD/MM/YYYY``.

    Returns an empty string when the value is empty or cannot be parsed.
    """
    if not value:
        return ""

    if isinstance(value, (date, datetime)):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value.strip())
        except (AttributeError, ValueError) as e:
            logger.debug(f"Cannot format date {value!r}: {e}")
            return ""

    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year}"
