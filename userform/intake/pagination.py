"""
Split a list of rows into fixed-size pages for the users listing.

File: intake/pagination.py
Author: userform contributors
Created: 2026-10-15
Last Modified: 2026-10-15
"""

from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_ROWS_PER_PAGE = 5


@dataclass
class Page(Generic[T]):
    """One page of rows."""

    index: int  # 0-based
    rows: List[T]
    per_page: int
    total: int

    @property
    def first_row(self) -> int:
        """1-based position of the first row on this page."""
        return self.index * self.per_page + 1 if self.rows else 0

    @property
    def last_row(self) -> int:
        return self.index * self.per_page + len(self.rows)

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def has_next(self) -> bool:
        return self.last_row < self.total

    @property
    def label(self) -> str:
        return f"{self.first_row}–{self.last_row} of {self.total}"


def page_count(total: int, per_page: int = DEFAULT_ROWS_PER_PAGE) -> int:
    if per_page < 1:
        raise ValueError(f"per_page must be at least 1, got {per_page}")
    return (total + per_page - 1) // per_page


def get_page(items: Sequence[T], index: int, per_page: int = DEFAULT_ROWS_PER_PAGE) -> Page[T]:
    """
    Get a single page of items.

    Raises:
        ValueError: If per_page is less than 1
        IndexError: If index is outside the available pages
    """
    pages = page_count(len(items), per_page)
    if index < 0 or index >= pages:
        raise IndexError(f"Page {index} out of range ({pages} pages)")

    start = index * per_page
    return Page(
        index=index,
        rows=list(items[start : start + per_page]),
        per_page=per_page,
        total=len(items),
    )


def paginate(items: Sequence[T], per_page: int = DEFAULT_ROWS_PER_PAGE) -> List[Page[T]]:
    """Split items into consecutive pages; an empty sequence yields no pages."""
    return [get_page(items, i, per_page) for i in range(page_count(len(items), per_page))]
