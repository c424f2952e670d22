from __future__ import annotations

from typing import Protocol, Sequence

from .model import Report


class ReportRepository(Protocol):
    def list_all(self) -> Sequence[Report]:
        raise NotImplementedError

    def list_for_cell(self, cell_id: str) -> Sequence[Report]:
        raise NotImplementedError
