from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Member:
    """Domain entity: a person belonging to a cell."""

    member_id: str
    cell_id: Optional[str]
    name: str
    title: str = ""
    gender: str = ""
    mobile: str = ""
    email: str = ""
    role: str = ""
    date_of_birth: Optional[str] = None
    joined_date: Optional[date] = None
    is_first_timer: bool = False
