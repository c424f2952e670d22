from __future__ import annotations

from dataclasses import dataclass

from .cells.mysql_cell_repository import MySQLCellRepository
from .cells.service import CellHealthService
from .database.connection import DBConfig, DatabaseConnection
from .first_timers.mysql_first_timer_repository import MySQLFirstTimerRepository
from .first_timers.service import FirstTimerService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.service import MemberService
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    cells_repo: MySQLCellRepository
    members_repo: MySQLMemberRepository
    reports_repo: MySQLReportRepository
    first_timers_repo: MySQLFirstTimerRepository

    cell_health_service: CellHealthService
    member_service: MemberService
    report_service: ReportService
    first_timer_service: FirstTimerService


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    cells_repo = MySQLCellRepository(conn)
    members_repo = MySQLMemberRepository(conn)
    reports_repo = MySQLReportRepository(conn)
    first_timers_repo = MySQLFirstTimerRepository(conn)

    return Container(
        conn=conn,
        cells_repo=cells_repo,
        members_repo=members_repo,
        reports_repo=reports_repo,
        first_timers_repo=first_timers_repo,
        cell_health_service=CellHealthService(cells_repo, members_repo, reports_repo),
        member_service=MemberService(members_repo, cells_repo, reports_repo),
        report_service=ReportService(reports_repo, cells_repo),
        first_timer_service=FirstTimerService(first_timers_repo),
    )
