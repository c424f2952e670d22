from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for permission checks."""

    SUPERUSER = "superuser"
    ADMIN = "admin"
    MEMBER = "member"


class CellStatus(str, Enum):
    """Traffic-light health of a cell for the current month."""

    RED = "red"
    AMBER = "amber"
    GREEN = "green"


class MeetingType(str, Enum):
    PRAYER = "prayer"
    BIBLE_STUDY_1 = "bible-study-1"
    BIBLE_STUDY_2 = "bible-study-2"
    OUTREACH = "outreach"
    OTHER = "other"
