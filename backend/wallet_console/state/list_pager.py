"""Pagination and page-size selection for ordered collections."""
import logging
import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar
from wallet_console.utils.errors import ValidationFailure

logger = logging.getLogger("wallet_console.state.pager")

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One rendered page of a collection."""
    page_items: List[T]
    total_pages: int
    current_page: int = 1
    items_per_page: int = 0
    total_items: int = 0

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def page_numbers(self) -> List[int]:
        return list(range(1, self.total_pages + 1))


def total_pages_for(total_items: int, items_per_page: int) -> int:
    """Number of pages, never less than one."""
    if items_per_page < 1:
        raise ValueError("items_per_page must be positive")
    return max(1, math.ceil(total_items / items_per_page))


def paginate(items: Sequence[T], items_per_page: int, current_page: int) -> Page[T]:
    """
    Slice one page out of ``items``.

    Pure function. A ``current_page`` past the last page yields an empty
    slice; callers clamp through ListPager.
    """
    total_pages = total_pages_for(len(items), items_per_page)
    start = (current_page - 1) * items_per_page
    end = current_page * items_per_page
    page_items = list(items[start:end]) if current_page >= 1 else []
    return Page(
        page_items=page_items,
        total_pages=total_pages,
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=len(items),
    )


@dataclass
class ListPager:
    """
    Page state for one list: page size from a fixed allowed set plus the
    current page.

    ``current_page`` stays within ``[1, total_pages]`` after every mutation.
    """
    allowed_sizes: Sequence[int]
    reset_page_on_size_change: bool = True
    items_per_page: int = 0
    current_page: int = 1
    total_items: int = field(default=0)

    def __post_init__(self):
        self.allowed_sizes = tuple(self.allowed_sizes)
        if not self.allowed_sizes:
            raise ValueError("allowed_sizes must not be empty")
        if self.items_per_page == 0:
            self.items_per_page = self.allowed_sizes[0]
        elif self.items_per_page not in self.allowed_sizes:
            raise ValueError(f"items_per_page {self.items_per_page} not in {self.allowed_sizes}")
        self._clamp()

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total_items, self.items_per_page)

    def _clamp(self):
        self.current_page = min(max(self.current_page, 1), self.total_pages)

    def sync(self, total_items: int):
        """Record a new collection size and clamp the current page."""
        self.total_items = total_items
        before = self.current_page
        self._clamp()
        if before != self.current_page:
            logger.debug(f"Clamped page {before} -> {self.current_page} ({total_items} items)")

    def set_items_per_page(self, items_per_page: int):
        if items_per_page not in self.allowed_sizes:
            raise ValidationFailure(
                f"Page size {items_per_page} is not one of {list(self.allowed_sizes)}"
            )
        self.items_per_page = items_per_page
        if self.reset_page_on_size_change:
            self.current_page = 1
        else:
            self._clamp()

    def set_page(self, page: int):
        if page < 1 or page > self.total_pages:
            raise ValidationFailure(f"Page {page} is out of range 1..{self.total_pages}")
        self.current_page = page

    def view(self, items: Sequence[T]) -> Page[T]:
        """Sync to ``items`` and return the current page of it."""
        self.sync(len(items))
        return paginate(items, self.items_per_page, self.current_page)
