from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_str
from .model import Member
from .repository import MemberRepository

_COLUMNS = """
    id, cell_id, title, name, gender, mobile, email, role,
    date_of_birth, joined_date, is_first_timer
"""


def _dob_text(value: Any) -> Optional[str]:
    """Birthdays are shown as MM-DD; the year is not kept for display."""

    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return value.strftime("%m-%d")
    return str(value)


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members ORDER BY id")
            return [self._to_member(r) for r in fetchall(cur)]

    def list_for_cell(self, cell_id: str) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE cell_id=%s ORDER BY id", (cell_id,))
            return [self._to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE id=%s", (member_id,))
            row = fetchone(cur)
            return self._to_member(row) if row else None

    @staticmethod
    def _to_member(r: dict) -> Member:
        return Member(
            member_id=str(r["id"]),
            cell_id=optional_str(r.get("cell_id")),
            name=r.get("name") or "",
            title=r.get("title") or "",
            gender=r.get("gender") or "",
            mobile=r.get("mobile") or "",
            email=r.get("email") or "",
            role=r.get("role") or "",
            date_of_birth=_dob_text(r.get("date_of_birth")),
            joined_date=_as_date(r.get("joined_date")),
            is_first_timer=bool(r.get("is_first_timer") or False),
        )
