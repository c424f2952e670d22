from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import parse_report_date
from ..core.enums import CellStatus
from .model import FirstTimer, FollowUp
from .repository import FirstTimerRepository


def first_timer_status_label(status: str) -> str:
    """Green and red are explicit; anything else, including blank, reads as amber."""

    if status == CellStatus.GREEN:
        return "Green"
    if status == CellStatus.RED:
        return "Red"
    return "Amber"


def latest_follow_up(first_timer_id: str, follow_ups: Iterable[FollowUp]) -> Optional[FollowUp]:
    """Most recent follow-up for one first-timer; undated entries only win when nothing is dated."""

    first_timer_id = str(first_timer_id)
    best: Optional[FollowUp] = None
    best_when: Optional[datetime] = None
    for fu in follow_ups:
        if fu.first_timer_id is None or str(fu.first_timer_id) != first_timer_id:
            continue
        when = parse_report_date(fu.date)
        if best is None or (when is not None and (best_when is None or when > best_when)):
            best, best_when = fu, when
    return best


def _date_text(value) -> str:
    when = parse_report_date(value)
    return when.strftime("%Y-%m-%d") if when else ""


@dataclass(frozen=True)
class FirstTimerRow:
    first_timer: FirstTimer
    status_label: str
    last_follow_up: Optional[FollowUp]
    last_follow_up_text: str


@dataclass(frozen=True)
class FollowUpRow:
    follow_up: FollowUp
    date_text: str
    visitation_arranged_text: str
    visitation_date_text: str


class FirstTimerService:
    """Use case: first-timer and follow-up tables."""

    def __init__(self, first_timers: FirstTimerRepository):
        self._first_timers = first_timers

    def list_first_timers(self, *, include_archived: bool = False) -> list[FirstTimerRow]:
        follow_ups = list(self._first_timers.list_follow_ups())

        rows = []
        for ft in self._first_timers.list_first_timers(include_archived=include_archived):
            last = latest_follow_up(ft.first_timer_id, follow_ups)
            rows.append(
                FirstTimerRow(
                    first_timer=ft,
                    status_label=first_timer_status_label(ft.status),
                    last_follow_up=last,
                    last_follow_up_text=(_date_text(last.date) if last else "") or "-",
                )
            )
        return rows

    def list_follow_ups(self) -> list[FollowUpRow]:
        return [
            FollowUpRow(
                follow_up=fu,
                date_text=_date_text(fu.date),
                visitation_arranged_text="Yes" if fu.visitation_arranged else "No",
                visitation_date_text=_date_text(fu.visitation_date),
            )
            for fu in self._first_timers.list_follow_ups()
        ]
