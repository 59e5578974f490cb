"""
utils/pagination.py
-------------------
Page request/response value objects shared by every paged query.
"""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

SORT_DIRECTIONS = ("ASC", "DESC")


@dataclass
class PageOptions:
    """
    A request for one page of an ordered result set.

    Attributes:
        page_number: 1-based page index.
        page_size: Maximum number of items per page.
        sort_by: Column to order by (validated by the repository).
        sort_direction: 'ASC' or 'DESC' (case-insensitive on input).

    Raises:
        ValueError: On a non-positive page number/size or unknown direction.
    """
    page_number: int = 1
    page_size: int = 10
    sort_by: str = "id"
    sort_direction: str = "ASC"

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {self.page_number}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        self.sort_direction = self.sort_direction.upper()
        if self.sort_direction not in SORT_DIRECTIONS:
            raise ValueError(f"sort_direction must be ASC or DESC, got {self.sort_direction!r}")

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return (self.page_number - 1) * self.page_size


@dataclass
class Page(Generic[T]):
    """One page of results plus the totals needed to navigate the rest."""
    page_number: int
    page_size: int
    total_pages: int
    total_elements: int
    items: list[T] = field(default_factory=list)

    @classmethod
    def build(cls, items: list[T], total_elements: int, options: PageOptions) -> "Page[T]":
        total_pages = math.ceil(total_elements / options.page_size)
        return cls(
            page_number=options.page_number,
            page_size=options.page_size,
            total_pages=total_pages,
            total_elements=total_elements,
            items=items,
        )

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1
