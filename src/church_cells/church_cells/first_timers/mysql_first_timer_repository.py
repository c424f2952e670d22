from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_meeting_time, optional_str
from .model import FirstTimer, FollowUp
from .repository import FirstTimerRepository


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


class MySQLFirstTimerRepository(FirstTimerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_first_timers(self, *, include_archived: bool = False) -> Sequence[FirstTimer]:
        where = "" if include_archived else "WHERE COALESCE(ft.archived, FALSE) = FALSE"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    ft.id,
                    ft.name,
                    ft.mobile,
                    ft.invited_by,
                    ft.date_joined,
                    ft.status,
                    ft.foundation_school,
                    ft.cell_id,
                    c.name AS cell_name,
                    ft.archived
                FROM first_timers ft
                LEFT JOIN cells c ON c.id = ft.cell_id
                {where}
                ORDER BY ft.date_joined IS NULL, ft.date_joined DESC, ft.id DESC
                """
            )
            out: list[FirstTimer] = []
            for r in fetchall(cur):
                out.append(
                    FirstTimer(
                        first_timer_id=str(r["id"]),
                        name=r.get("name") or "",
                        mobile=r.get("mobile") or "",
                        invited_by=r.get("invited_by") or "",
                        date_joined=_as_date(r.get("date_joined")),
                        status=r.get("status") or "",
                        foundation_school=r.get("foundation_school") or "",
                        cell_id=optional_str(r.get("cell_id")),
                        cell_name=r.get("cell_name") or "",
                        archived=bool(r.get("archived") or False),
                    )
                )
            return out

    def list_follow_ups(self) -> Sequence[FollowUp]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    fu.id,
                    fu.first_timer_id,
                    ft.name AS first_timer_name,
                    fu.followup_date,
                    fu.followup_time,
                    fu.comment,
                    fu.visitation_arranged,
                    fu.visitation_date
                FROM follow_ups fu
                LEFT JOIN first_timers ft ON ft.id = fu.first_timer_id
                ORDER BY fu.followup_date IS NULL, fu.followup_date DESC, fu.id DESC
                """
            )
            out: list[FollowUp] = []
            for r in fetchall(cur):
                out.append(
                    FollowUp(
                        follow_up_id=str(r["id"]),
                        first_timer_id=optional_str(r.get("first_timer_id")),
                        date=r.get("followup_date"),
                        first_timer_name=r.get("first_timer_name") or "",
                        time=format_meeting_time(r.get("followup_time")),
                        comment=r.get("comment") or "",
                        visitation_arranged=bool(r.get("visitation_arranged") or False),
                        visitation_date=_as_date(r.get("visitation_date")),
                    )
                )
            return out
