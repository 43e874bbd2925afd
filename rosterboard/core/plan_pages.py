"""Page Planner — pure chunking of a roster length into fixed-capacity pages.

Invariants:
    - Ranges are half-open [start, end), consecutive, and cover [0, length) exactly
    - Every range has size == capacity except possibly the last
    - length == 0 yields no pages (not one empty page)
    - Depends only on length and capacity — never on claim state

Design Decisions:
    - Recomputed on every render, never cached: structure always reflects latest length
    - page_for() falls back to an empty range so stale page indices still render
"""

from typing import NamedTuple

from rosterboard.core.domain_types import PAGE_CAPACITY


class PageRange(NamedTuple):
    """Half-open index range over a roster's entries."""
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


EMPTY_PAGE = PageRange(0, 0)


def plan_pages(length: int, capacity: int = PAGE_CAPACITY) -> list[PageRange]:
    """Partition [0, length) into consecutive ranges of at most capacity."""
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if capacity <= 0:
        raise ValueError(f"capacity must be > 0, got {capacity}")
    return [
        PageRange(start, min(length, start + capacity))
        for start in range(0, length, capacity)
    ]


def page_for(plan: list[PageRange], page_index: int) -> PageRange:
    """Range of page_index in plan, or EMPTY_PAGE if it no longer exists."""
    if 0 <= page_index < len(plan):
        return plan[page_index]
    return EMPTY_PAGE
