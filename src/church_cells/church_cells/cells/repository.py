from __future__ import annotations

from typing import Protocol, Sequence

from .model import Cell


class CellRepository(Protocol):
    def list_all(self) -> Sequence[Cell]:
        raise NotImplementedError
