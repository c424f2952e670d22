from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, decode_json_column, fetchall, optional_str
from .model import Report
from .repository import ReportRepository

_COLUMNS = "id, cell_id, date, venue, meeting_type, description, attendees"


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Report]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM reports ORDER BY date DESC, id DESC")
            return [self._to_report(r) for r in fetchall(cur)]

    def list_for_cell(self, cell_id: str) -> Sequence[Report]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM reports WHERE cell_id=%s ORDER BY date DESC, id DESC",
                (cell_id,),
            )
            return [self._to_report(r) for r in fetchall(cur)]

    @staticmethod
    def _to_report(r: dict) -> Report:
        return Report(
            report_id=str(r["id"]),
            cell_id=optional_str(r.get("cell_id")),
            date=r.get("date"),
            venue=r.get("venue") or "",
            meeting_type=r.get("meeting_type") or "",
            description=r.get("description") or "",
            attendees=decode_json_column(r.get("attendees")),
        )
