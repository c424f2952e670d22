from __future__ import annotations

from typing import Protocol, Sequence

from .model import FirstTimer, FollowUp


class FirstTimerRepository(Protocol):
    def list_first_timers(self, *, include_archived: bool = False) -> Sequence[FirstTimer]:
        """Newest joiners first."""

        raise NotImplementedError

    def list_follow_ups(self) -> Sequence[FollowUp]:
        raise NotImplementedError
