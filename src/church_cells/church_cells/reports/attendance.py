"""Attendance payload normalisation.

Reports have stored attendees in three shapes over time:

- a flat list of member references (everyone listed was present),
- a list of ``{"memberId", "name", "present"}`` entries,
- an object ``{"present": [...], "absent": [...]}``.

``normalize_attendance`` folds all of them into one ``Attendance`` value.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .model import Attendance, Attendee

_ID_KEYS = ("memberId", "member_id", "id")


def _decode(raw: Any) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except ValueError:
            return None
    return raw


def _unwrap(item: Any) -> Any:
    # Some rows were saved with each entry JSON-encoded on its own.
    if isinstance(item, str):
        decoded = _decode(item)
        if isinstance(decoded, dict):
            return decoded
    return item


def _to_attendee(item: Any) -> Optional[Attendee]:
    if isinstance(item, bool):
        return None

    if isinstance(item, (str, int)):
        member_id = str(item).strip()
        return Attendee(member_id=member_id) if member_id else None

    if isinstance(item, dict):
        member_id = ""
        for key in _ID_KEYS:
            if item.get(key) not in (None, ""):
                member_id = str(item[key]).strip()
                break
        return Attendee(member_id=member_id, name=str(item.get("name") or "").strip())

    return None


def _attendees(items: Any) -> tuple[Attendee, ...]:
    if not isinstance(items, list):
        return ()
    out = (_to_attendee(_unwrap(i)) for i in items)
    return tuple(a for a in out if a is not None)


def normalize_attendance(raw: Any) -> Attendance:
    data = _decode(raw)

    if isinstance(data, list):
        present: list[Attendee] = []
        absent: list[Attendee] = []
        for item in map(_unwrap, data):
            attendee = _to_attendee(item)
            if attendee is None:
                continue
            if isinstance(item, dict) and item.get("present") is False:
                absent.append(attendee)
            else:
                present.append(attendee)
        return Attendance(present=tuple(present), absent=tuple(absent))

    if isinstance(data, dict):
        return Attendance(present=_attendees(data.get("present")), absent=_attendees(data.get("absent")))

    return Attendance()
