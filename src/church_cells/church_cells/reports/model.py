from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Report:
    """Domain entity: one cell meeting.

    ``date`` and ``attendees`` keep the raw stored values; parsing happens at
    read time so a malformed row never blocks loading the rest.
    """

    report_id: str
    cell_id: Optional[str]
    date: Any
    venue: str = ""
    meeting_type: str = ""
    description: str = ""
    attendees: Any = None


@dataclass(frozen=True)
class Attendee:
    member_id: str
    name: str = ""


@dataclass(frozen=True)
class Attendance:
    present: tuple[Attendee, ...] = ()
    absent: tuple[Attendee, ...] = ()

    def status_of(self, member_id: str) -> Optional[bool]:
        """True if present, False if absent, None if the member is not listed."""

        member_id = str(member_id)
        if any(a.member_id == member_id for a in self.present):
            return True
        if any(a.member_id == member_id for a in self.absent):
            return False
        return None
