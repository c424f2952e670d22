from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    def list_all(self) -> Sequence[Member]:
        raise NotImplementedError

    def list_for_cell(self, cell_id: str) -> Sequence[Member]:
        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError
