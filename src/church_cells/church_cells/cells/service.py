from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from ..common.datetime_utils import now_local, parse_report_date
from ..common.pagination import Page, paginate
from ..core.constants import ACTIVE_WINDOW_DAYS
from ..core.enums import CellStatus
from ..members.repository import MemberRepository
from ..reports.repository import ReportRepository
from .classifier import AttendanceClassifier
from .model import Cell
from .repository import CellRepository


@dataclass(frozen=True)
class CellHealthRow:
    cell: Cell
    member_count: int
    monthly_counts: list[int]
    status: CellStatus
    status_label: str
    status_css: str
    green_months: int
    green_percentage: int


@dataclass(frozen=True)
class CellStats:
    total_cells: int
    total_members: int
    active_cells: int
    inactive_cells: int


class CellHealthService:
    """Use case: the cells overview table and dashboard counters."""

    def __init__(self, cells: CellRepository, members: MemberRepository, reports: ReportRepository):
        self._cells = cells
        self._members = members
        self._reports = reports

    def classifier(self, *, today: date | None = None) -> AttendanceClassifier:
        return AttendanceClassifier(self._reports.list_all(), today=today)

    def list_cell_health(self, *, page: int = 1, today: date | None = None) -> Page[CellHealthRow]:
        classifier = self.classifier(today=today)
        member_counts = Counter(str(m.cell_id) for m in self._members.list_all() if m.cell_id is not None)

        ranked = classifier.rank_cells(list(self._cells.list_all()))
        rows = [self._to_row(c, classifier, member_counts[c.cell_id]) for c in ranked]
        return paginate(rows, page)

    def summary(self, *, now: datetime | None = None) -> CellStats:
        now = now or now_local()
        since = now - timedelta(days=ACTIVE_WINDOW_DAYS)

        reported = set()
        for r in self._reports.list_all():
            when = parse_report_date(r.date)
            if when is not None and when > since:
                reported.add(str(r.cell_id))

        cells = self._cells.list_all()
        active = sum(1 for c in cells if c.cell_id in reported)
        return CellStats(
            total_cells=len(cells),
            total_members=len(self._members.list_all()),
            active_cells=active,
            inactive_cells=len(cells) - active,
        )

    def _to_row(self, cell: Cell, classifier: AttendanceClassifier, member_count: int) -> CellHealthRow:
        status = classifier.get_cell_status(cell.cell_id)
        label = {
            CellStatus.RED: "Below Target (0-2)",
            CellStatus.AMBER: "At Risk (3)",
            CellStatus.GREEN: "On Track (4+)",
        }[status]

        return CellHealthRow(
            cell=cell,
            member_count=member_count,
            monthly_counts=classifier.get_monthly_report_counts(cell.cell_id),
            status=status,
            status_label=label,
            status_css=f"status-{status.value}",
            green_months=classifier.get_green_months(cell.cell_id),
            green_percentage=classifier.get_green_percentage(cell.cell_id),
        )
