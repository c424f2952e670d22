from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..cells.model import Cell
from ..cells.repository import CellRepository
from ..common.datetime_utils import parse_report_date
from ..common.pagination import Page, paginate
from ..core.exceptions import NotFoundError, ValidationError
from ..reports.attendance import normalize_attendance
from ..reports.repository import ReportRepository
from ..reports.service import sort_newest_first
from .model import Member
from .repository import MemberRepository


@dataclass(frozen=True)
class MemberRow:
    member: Member
    cell: Optional[Cell]

    @property
    def cell_name(self) -> str:
        return self.cell.name if self.cell else "Unknown Cell"


@dataclass(frozen=True)
class MemberAttendanceRecord:
    report_id: str
    cell_id: Optional[str]
    reported_at: Optional[datetime]
    meeting_type: str
    present: bool


@dataclass(frozen=True)
class MemberAttendanceSummary:
    member_id: str
    present: int
    absent: int
    total: int
    records: list[MemberAttendanceRecord]


def _search_text(member: Member, cell: Optional[Cell]) -> str:
    parts = [
        member.title,
        member.name,
        member.gender,
        member.mobile,
        member.email,
        member.role,
        member.date_of_birth,
    ]
    if cell:
        parts += [cell.name, cell.venue, cell.day, cell.time]
    return " ".join(p for p in parts if p).lower()


class MemberService:
    def __init__(self, members: MemberRepository, cells: CellRepository, reports: ReportRepository):
        self._members = members
        self._cells = cells
        self._reports = reports

    def search(self, term: str = "", *, page: int = 1) -> Page[MemberRow]:
        """Case-insensitive match on member details and the member's cell."""

        rows = self._rows(self._members.list_all())
        needle = (term or "").strip().lower()
        if needle:
            rows = [r for r in rows if needle in _search_text(r.member, r.cell)]
        return paginate(rows, page)

    def list_for_cell(self, cell_id: str, *, page: int = 1) -> Page[MemberRow]:
        return paginate(self._rows(self._members.list_for_cell(str(cell_id))), page)

    def attendance_summary(self, member_id: str) -> MemberAttendanceSummary:
        member_id = str(member_id or "").strip()
        if not member_id:
            raise ValidationError("Member id is required")
        if self._members.get_by_id(member_id) is None:
            raise NotFoundError(f"Member {member_id} not found")

        records: list[MemberAttendanceRecord] = []
        for r in sort_newest_first(self._reports.list_all()):
            status = normalize_attendance(r.attendees).status_of(member_id)
            if status is None:
                continue
            records.append(
                MemberAttendanceRecord(
                    report_id=r.report_id,
                    cell_id=r.cell_id,
                    reported_at=parse_report_date(r.date),
                    meeting_type=r.meeting_type,
                    present=status,
                )
            )

        present = sum(1 for rec in records if rec.present)
        return MemberAttendanceSummary(
            member_id=member_id,
            present=present,
            absent=len(records) - present,
            total=len(records),
            records=records,
        )

    def _rows(self, members) -> list[MemberRow]:
        cells = {c.cell_id: c for c in self._cells.list_all()}
        return [MemberRow(member=m, cell=cells.get(str(m.cell_id))) for m in members]
