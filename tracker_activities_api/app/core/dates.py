"""Date helpers for the ``YYYY-MM-DD`` input and ``dd/mm/yyyy`` output formats."""

import re
from datetime import date
from typing import Optional, Union

ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def matches_iso_format(value: str) -> bool:
    return bool(ISO_DATE_PATTERN.fullmatch(value))


def parse_iso_date(value: str) -> Optional[date]:
    """Return the calendar date for ``value`` or ``None`` if it does not exist."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def format_date(value: Union[date, str, None]) -> Optional[str]:
    """Render a stored date as ``dd/mm/yyyy``.

    SQLite hands dates back as ISO text; ``date`` objects are accepted
    too.  ``None`` stays ``None``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        # Stored values may carry a time part, e.g. ``2024-12-01 00:00:00``.
        value = date.fromisoformat(value[:10])
    return value.strftime("%d/%m/%Y")
