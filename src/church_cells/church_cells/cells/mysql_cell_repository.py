from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_meeting_time
from .model import Cell
from .repository import CellRepository


class MySQLCellRepository(CellRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Cell]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, venue, day, time, description FROM cells ORDER BY id")
            return [self._to_cell(r) for r in fetchall(cur)]

    @staticmethod
    def _to_cell(r: dict) -> Cell:
        return Cell(
            cell_id=str(r["id"]),
            name=r.get("name") or "",
            venue=r.get("venue") or "",
            day=r.get("day") or "",
            time=format_meeting_time(r.get("time")),
            description=r.get("description") or "",
        )
