from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_report_date
from ..core.constants import GREEN_MIN_REPORTS, RED_MAX_REPORTS
from ..core.enums import CellStatus
from ..reports.model import Report
from .model import Cell

logger = logging.getLogger(__name__)


def _cell_key(cell_id: Any) -> Optional[str]:
    if cell_id is None or cell_id == "":
        return None
    return str(cell_id)


class AttendanceClassifier:
    """Cell health from meeting report history for the current calendar year.

    Counts are built once from the reports given at construction. Reports
    from other years, from months after the current one, without a cell id or
    with an unparseable date contribute nothing.
    """

    def __init__(self, reports: Iterable[Report], *, today: date | None = None):
        today = today or now_local()
        self._year = today.year
        self._current_month_index = today.month - 1
        self._counts: dict[str, list[int]] = defaultdict(self._empty_counts)

        skipped = 0
        for report in reports:
            key = _cell_key(report.cell_id)
            when = parse_report_date(report.date)
            if key is None or when is None:
                skipped += 1
                continue
            if when.year != self._year or when.month - 1 > self._current_month_index:
                continue
            self._counts[key][when.month - 1] += 1

        if skipped:
            logger.debug("Skipped %d report(s) without a cell id or a parseable date", skipped)

    @property
    def months_elapsed(self) -> int:
        return self._current_month_index + 1

    def _empty_counts(self) -> list[int]:
        return [0] * self.months_elapsed

    def get_monthly_report_counts(self, cell_id: Any) -> list[int]:
        key = _cell_key(cell_id)
        if key is None or key not in self._counts:
            return self._empty_counts()
        return list(self._counts[key])

    def get_cell_status(self, cell_id: Any) -> CellStatus:
        count = self.get_monthly_report_counts(cell_id)[self._current_month_index]
        if count <= RED_MAX_REPORTS:
            return CellStatus.RED
        if count >= GREEN_MIN_REPORTS:
            return CellStatus.GREEN
        return CellStatus.AMBER

    def get_green_months(self, cell_id: Any) -> int:
        return sum(1 for count in self.get_monthly_report_counts(cell_id) if count >= GREEN_MIN_REPORTS)

    def get_green_percentage(self, cell_id: Any) -> int:
        months = self.months_elapsed
        if not months:
            return 0
        # Integer half-up rounding: 12.5% -> 13%.
        return (self.get_green_months(cell_id) * 200 + months) // (2 * months)

    def rank_cells(self, cells: Sequence[Cell]) -> list[Cell]:
        """Best green percentage first, then by name."""

        return sorted(cells, key=lambda c: (-self.get_green_percentage(c.cell_id), c.name))
