from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """Domain entity: a small recurring meeting group."""

    cell_id: str
    name: str
    venue: str = ""
    day: str = ""
    time: str = ""
    description: str = ""
