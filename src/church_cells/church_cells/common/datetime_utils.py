from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional


def parse_report_date(value: Any) -> Optional[datetime]:
    """Parse a stored report date into a naive local datetime.

    Accepts datetime, date and ISO-8601 strings (a trailing ``Z`` is UTC).
    Timezone-aware values are converted to local time so year/month follow the
    local calendar. Anything else, including malformed strings, gives None.
    """

    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        # Offsets at the edges of the datetime range cannot be shifted to local time.
        try:
            parsed = parsed.astimezone().replace(tzinfo=None)
        except (OverflowError, ValueError, OSError):
            return None
    return parsed


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
