from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from src.church_cells.church_cells.cells.model import Cell
from src.church_cells.church_cells.core.enums import Role
from src.church_cells.church_cells.reports.model import Report
from src.church_cells.church_cells.reports.service import ReportService, meeting_type_text


@dataclass
class InMemoryCells:
    cells: list[Cell] = field(default_factory=list)

    def list_all(self):
        return list(self.cells)


class FakeReportsRepo:
    def __init__(self, reports):
        self._reports = reports
        self.last_cell_id = None

    def list_all(self):
        return list(self._reports)

    def list_for_cell(self, cell_id):
        self.last_cell_id = cell_id
        return [r for r in self._reports if r.cell_id == cell_id]


NOW = datetime(2024, 5, 20, 12, 0)


def test_recent_reports_are_newest_first_with_counts():
    reports = [
        Report(report_id="1", cell_id="1", date="2024-05-14T19:00:00", meeting_type="prayer",
               attendees=[{"memberId": "a", "present": True}, {"memberId": "b", "present": False}]),
        Report(report_id="2", cell_id="9", date="2024-05-18T19:00:00", meeting_type="custom"),
        Report(report_id="3", cell_id="1", date="2024-05-01T19:00:00"),
        Report(report_id="4", cell_id="1", date=None),
    ]
    svc = ReportService(FakeReportsRepo(reports), InMemoryCells([Cell(cell_id="1", name="Bethel")]))

    rows = svc.recent_reports(now=NOW)

    assert [r.report.report_id for r in rows] == ["2", "1"]
    assert rows[0].cell_name == "Unknown Cell"
    assert rows[0].meeting_type == "custom"
    assert rows[1].cell_name == "Bethel"
    assert rows[1].meeting_type == "Prayer and Planning"
    assert (rows[1].present_count, rows[1].absent_count) == (1, 1)


def test_list_for_cell_puts_undated_reports_last():
    reports = [
        Report(report_id="1", cell_id="1", date="bad"),
        Report(report_id="2", cell_id="1", date="2024-01-01"),
        Report(report_id="3", cell_id="1", date="2024-03-01"),
    ]
    repo = FakeReportsRepo(reports)
    svc = ReportService(repo, InMemoryCells())

    rows = svc.list_for_cell(1)

    assert repo.last_cell_id == "1"
    assert [r.report.report_id for r in rows] == ["3", "2", "1"]
    assert rows[-1].reported_at is None


def test_admins_can_always_edit():
    svc = ReportService(FakeReportsRepo([]), InMemoryCells())
    old = Report(report_id="1", cell_id="1", date="2020-01-01")

    assert svc.can_edit(old, role=Role.ADMIN, now=NOW)
    assert svc.can_edit(old, role="superuser", now=NOW)


def test_members_edit_only_within_two_weeks():
    svc = ReportService(FakeReportsRepo([]), InMemoryCells())

    assert svc.can_edit(Report(report_id="1", cell_id="1", date="2024-05-06T11:00:00"), role=Role.MEMBER, now=NOW)
    assert not svc.can_edit(Report(report_id="2", cell_id="1", date="2024-05-05T11:00:00"), role=Role.MEMBER, now=NOW)
    assert not svc.can_edit(Report(report_id="3", cell_id="1", date="???"), role=Role.MEMBER, now=NOW)


def test_meeting_type_text_falls_back_to_raw_value():
    assert meeting_type_text("bible-study-2") == "Bible Study 2"
    assert meeting_type_text("outreach") == "Outreach Meeting"
    assert meeting_type_text("vigil") == "vigil"


def test_recent_reports_include_the_window_start():
    reports = [
        Report(report_id="edge", cell_id="1", date=NOW - timedelta(days=7)),
        Report(report_id="older", cell_id="1", date=NOW - timedelta(days=7, seconds=1)),
    ]
    svc = ReportService(FakeReportsRepo(reports), InMemoryCells())

    rows = svc.recent_reports(now=NOW)

    assert [r.report.report_id for r in rows] == ["edge"]
