from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import pytest

from src.church_cells.church_cells.cells.model import Cell
from src.church_cells.church_cells.cells.service import CellHealthService
from src.church_cells.church_cells.core.enums import CellStatus
from src.church_cells.church_cells.core.exceptions import ValidationError
from src.church_cells.church_cells.members.model import Member
from src.church_cells.church_cells.reports.model import Report


@dataclass
class InMemoryCells:
    cells: list[Cell]

    def list_all(self):
        return list(self.cells)


@dataclass
class InMemoryMembers:
    members: list[Member] = field(default_factory=list)

    def list_all(self):
        return list(self.members)


@dataclass
class InMemoryReports:
    reports: list[Report] = field(default_factory=list)

    def list_all(self):
        return list(self.reports)


def _reports(cell_id: str, *days: str) -> list[Report]:
    return [Report(report_id=f"{cell_id}-{d}", cell_id=cell_id, date=d) for d in days]


def test_cell_health_rows_are_ranked_and_labelled():
    cells = [
        Cell(cell_id="1", name="Bethel"),
        Cell(cell_id="2", name="Antioch"),
        Cell(cell_id="3", name="Canaan"),
    ]
    members = [
        Member(member_id="m1", cell_id="2", name="Ada"),
        Member(member_id="m2", cell_id="2", name="Ben"),
        Member(member_id="m3", cell_id="3", name="Cy"),
    ]
    reports = (
        _reports("3", "2024-01-03", "2024-01-10", "2024-01-17", "2024-01-24")
        + _reports("3", "2024-02-07", "2024-02-14", "2024-02-21")
        + _reports("1", "2024-02-01")
    )

    svc = CellHealthService(InMemoryCells(cells), InMemoryMembers(members), InMemoryReports(reports))
    page = svc.list_cell_health(today=date(2024, 2, 25))

    assert [r.cell.name for r in page.items] == ["Canaan", "Antioch", "Bethel"]

    canaan = page.items[0]
    assert canaan.monthly_counts == [4, 3]
    assert canaan.status == CellStatus.AMBER
    assert canaan.status_label == "At Risk (3)"
    assert canaan.status_css == "status-amber"
    assert canaan.green_months == 1
    assert canaan.green_percentage == 50
    assert canaan.member_count == 1

    antioch = page.items[1]
    assert antioch.member_count == 2
    assert antioch.status == CellStatus.RED
    assert antioch.status_label == "Below Target (0-2)"


def test_cell_health_pages_are_clamped():
    cells = [Cell(cell_id=str(i), name=f"Cell {i:02d}") for i in range(45)]
    svc = CellHealthService(InMemoryCells(cells), InMemoryMembers(), InMemoryReports())

    page = svc.list_cell_health(page=99, today=date(2024, 1, 1))

    assert page.page == 3
    assert page.total_pages == 3
    assert len(page.items) == 5
    assert page.items[0].cell.name == "Cell 40"


def test_cell_health_rejects_non_numeric_page():
    svc = CellHealthService(InMemoryCells([]), InMemoryMembers(), InMemoryReports())

    with pytest.raises(ValidationError):
        svc.list_cell_health(page="abc", today=date(2024, 1, 1))


def test_summary_counts_cells_with_reports_in_last_30_days():
    cells = [Cell(cell_id="1", name="A"), Cell(cell_id="2", name="B"), Cell(cell_id="3", name="C")]
    members = [Member(member_id="m1", cell_id="1", name="Ada")]
    reports = [
        Report(report_id="r1", cell_id="1", date="2024-03-20T19:00:00"),
        Report(report_id="r2", cell_id="2", date="2024-02-01T19:00:00"),
        Report(report_id="r3", cell_id="3", date="garbage"),
    ]

    svc = CellHealthService(InMemoryCells(cells), InMemoryMembers(members), InMemoryReports(reports))
    stats = svc.summary(now=datetime(2024, 3, 25, 12, 0))

    assert stats.total_cells == 3
    assert stats.total_members == 1
    assert stats.active_cells == 1
    assert stats.inactive_cells == 2


def test_report_exactly_30_days_old_does_not_make_cell_active():
    now = datetime(2024, 3, 31, 12, 0)
    cells = [Cell(cell_id="1", name="A"), Cell(cell_id="2", name="B")]
    reports = [
        Report(report_id="r1", cell_id="1", date=now - timedelta(days=30)),
        Report(report_id="r2", cell_id="2", date=now - timedelta(days=30) + timedelta(seconds=1)),
    ]

    svc = CellHealthService(InMemoryCells(cells), InMemoryMembers(), InMemoryReports(reports))
    stats = svc.summary(now=now)

    assert (stats.active_cells, stats.inactive_cells) == (1, 1)
