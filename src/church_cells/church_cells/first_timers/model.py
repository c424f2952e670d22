from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional


@dataclass(frozen=True)
class FirstTimer:
    """Domain entity: a visitor on their first attendance, tracked until settled in a cell."""

    first_timer_id: str
    name: str
    mobile: str = ""
    invited_by: str = ""
    date_joined: Optional[date] = None
    status: str = ""
    foundation_school: str = ""
    cell_id: Optional[str] = None
    cell_name: str = ""
    archived: bool = False


@dataclass(frozen=True)
class FollowUp:
    """One follow-up contact with a first-timer. ``date`` keeps the raw stored value."""

    follow_up_id: str
    first_timer_id: Optional[str]
    date: Any
    first_timer_name: str = ""
    time: str = ""
    comment: str = ""
    visitation_arranged: bool = False
    visitation_date: Optional[date] = None
