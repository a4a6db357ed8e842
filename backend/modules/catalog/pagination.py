"""
Page window computation for the catalog browser.

compute_window decides which page numbers and ellipses a paginator shows;
Paginator wraps it with the previous/next navigation rules.
"""

import logging
from typing import Callable, Optional

from .exceptions import InvalidPageError, PageNavigationError
from .models import PageWindow

logger = logging.getLogger(__name__)

# Up to this many pages are shown in full, without ellipses
MAX_FULL_PAGES = 7

# Pages within this distance of either end use the edge layout
EDGE_PAGES = 3


def should_render(total_pages: int) -> bool:
    """A paginator is only shown when there is more than one page."""
    return total_pages > 1


def compute_window(current_page: int, total_pages: int) -> PageWindow:
    """
    Compute the page markers a paginator renders.

    Args:
        current_page: 1-indexed current page
        total_pages: Number of pages (0 for an empty catalog)

    Returns:
        Ordered list of page numbers and Ellipsis markers. For more than
        seven pages the first and last page are always included, e.g.
        compute_window(10, 20) == [1, ..., 9, 10, 11, ..., 20].

    Raises:
        InvalidPageError: If total_pages is negative or current_page is
            outside 1..max(total_pages, 1). Out-of-range pages are rejected,
            not clamped.
    """
    if total_pages < 0 or current_page < 1 or current_page > max(total_pages, 1):
        raise InvalidPageError(current_page, total_pages)

    if total_pages <= MAX_FULL_PAGES:
        return list(range(1, total_pages + 1))

    if current_page <= EDGE_PAGES:
        return [1, 2, 3, 4, ..., total_pages]

    if current_page >= total_pages - (EDGE_PAGES - 1):
        return [1, ..., total_pages - 3, total_pages - 2, total_pages - 1, total_pages]

    return [1, ..., current_page - 1, current_page, current_page + 1, ..., total_pages]


class Paginator:
    """
    Navigation state for a paginated listing.

    Previous is disabled on the first page and next on the last one;
    requests for a disabled direction raise PageNavigationError rather
    than being clamped.

    When the listing is cursor-based and the total is not known up front,
    pass has_next_page: it then decides whether next is enabled, and
    total_pages only counts the pages seen so far.
    """

    def __init__(
        self,
        current_page: int,
        total_pages: int,
        on_page_change: Optional[Callable[[int], None]] = None,
        has_next_page: Optional[bool] = None,
    ):
        self._total_pages = total_pages
        self._has_next_page = has_next_page
        self._on_page_change = on_page_change

        # Validates the starting position
        compute_window(current_page, self._known_pages(current_page))
        self._current_page = current_page

    @property
    def current_page(self) -> int:
        return self._current_page

    @property
    def total_pages(self) -> int:
        return self._known_pages(self._current_page)

    @property
    def can_go_previous(self) -> bool:
        return self._current_page > 1

    @property
    def can_go_next(self) -> bool:
        if self._has_next_page is not None:
            return self._has_next_page
        return self._current_page < self._total_pages

    @property
    def visible(self) -> bool:
        return should_render(self.total_pages) or self.can_go_next

    @property
    def window(self) -> PageWindow:
        return compute_window(self._current_page, self.total_pages)

    def go_to(self, page: int) -> None:
        """
        Activate a page marker.

        Raises:
            PageNavigationError: If the page is not reachable
        """
        reachable = 1 <= page <= self.total_pages or (
            page == self._current_page + 1 and self.can_go_next
        )
        if not reachable:
            raise PageNavigationError(page, f"outside 1..{self.total_pages}")

        if self._has_next_page is not None:
            # Past the furthest page seen, next stays disabled until the
            # caller reports it with set_has_next_page()
            self._total_pages = max(self._total_pages, page)
            self._has_next_page = page < self._total_pages

        self._current_page = page
        logger.debug(f"Page changed to {page}")
        if self._on_page_change is not None:
            self._on_page_change(page)

    def previous(self) -> None:
        if not self.can_go_previous:
            raise PageNavigationError(self._current_page - 1, "already on the first page")
        self.go_to(self._current_page - 1)

    def next(self) -> None:
        if not self.can_go_next:
            raise PageNavigationError(self._current_page + 1, "already on the last page")
        self.go_to(self._current_page + 1)

    def set_has_next_page(self, has_next_page: bool) -> None:
        """Record whether the page just loaded has a successor (cursor-based listings)."""
        self._has_next_page = has_next_page

    def _known_pages(self, current_page: int) -> int:
        if self._has_next_page is None:
            return self._total_pages
        return max(self._total_pages, current_page)
