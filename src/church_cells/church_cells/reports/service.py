from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..cells.repository import CellRepository
from ..common.datetime_utils import now_local, parse_report_date
from ..core.constants import RECENT_REPORT_DAYS, REPORT_EDIT_WINDOW_DAYS
from ..core.enums import MeetingType, Role
from .attendance import normalize_attendance
from .model import Attendance, Report
from .repository import ReportRepository

_MEETING_TYPE_TEXT = {
    MeetingType.PRAYER: "Prayer and Planning",
    MeetingType.BIBLE_STUDY_1: "Bible Study 1",
    MeetingType.BIBLE_STUDY_2: "Bible Study 2",
    MeetingType.OUTREACH: "Outreach Meeting",
    MeetingType.OTHER: "Other",
}


def meeting_type_text(value: str) -> str:
    try:
        return _MEETING_TYPE_TEXT[MeetingType(value)]
    except ValueError:
        return value


def sort_newest_first(reports: Iterable[Report]) -> list[Report]:
    """Newest first; reports without a usable date go last in input order."""

    dated: list[tuple[datetime, Report]] = []
    undated: list[Report] = []
    for r in reports:
        when = parse_report_date(r.date)
        if when is None:
            undated.append(r)
        else:
            dated.append((when, r))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [r for _, r in dated] + undated


@dataclass(frozen=True)
class ReportRow:
    """Read-model for report cards and tables."""

    report: Report
    reported_at: Optional[datetime]
    cell_name: str
    meeting_type: str
    present_count: int
    absent_count: int


class ReportService:
    def __init__(self, reports: ReportRepository, cells: CellRepository):
        self._reports = reports
        self._cells = cells

    def attendance(self, report: Report) -> Attendance:
        return normalize_attendance(report.attendees)

    def recent_reports(self, *, now: datetime | None = None, days: int = RECENT_REPORT_DAYS) -> list[ReportRow]:
        now = now or now_local()
        since = now - timedelta(days=int(days))

        recent = []
        for r in self._reports.list_all():
            when = parse_report_date(r.date)
            if when is not None and when >= since:
                recent.append(r)
        return self._to_rows(sort_newest_first(recent))

    def list_for_cell(self, cell_id: str) -> list[ReportRow]:
        return self._to_rows(sort_newest_first(self._reports.list_for_cell(str(cell_id))))

    def can_edit(self, report: Report, *, role: Role | str, now: datetime | None = None) -> bool:
        """Admins may always edit; others only for a short window after the meeting."""

        if role in (Role.SUPERUSER, Role.ADMIN):
            return True

        when = parse_report_date(report.date)
        if when is None:
            return False
        now = now or now_local()
        return (now - when).days <= REPORT_EDIT_WINDOW_DAYS

    def _to_rows(self, reports: list[Report]) -> list[ReportRow]:
        names = {c.cell_id: c.name for c in self._cells.list_all()}
        rows = []
        for r in reports:
            attendance = self.attendance(r)
            rows.append(
                ReportRow(
                    report=r,
                    reported_at=parse_report_date(r.date),
                    cell_name=names.get(str(r.cell_id), "Unknown Cell"),
                    meeting_type=meeting_type_text(r.meeting_type),
                    present_count=len(attendance.present),
                    absent_count=len(attendance.absent),
                )
            )
        return rows
