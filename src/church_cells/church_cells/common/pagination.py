from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from ..core.constants import PAGE_SIZE
from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    total_pages: int
    total_items: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def get_total_pages(total_items: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    try:
        page = int(page)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid page: {page!r}") from None
    return min(max(page, 1), total_pages)


def paginate(items: Sequence[T], page: int = 1, *, page_size: int = PAGE_SIZE) -> Page[T]:
    """Slice one page out of ``items``; out-of-range pages snap to the nearest valid one."""

    total_pages = get_total_pages(len(items), page_size)
    page = clamp_page(page, total_pages)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        total_pages=total_pages,
        total_items=len(items),
    )
