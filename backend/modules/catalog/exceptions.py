"""
Catalog module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidPageError(ValidationError):
    """Raised when a page window is requested for an out-of-range page."""

    def __init__(self, current_page: int, total_pages: int):
        super().__init__(
            f"Page {current_page} is outside 1..{max(total_pages, 1)}",
            code="INVALID_PAGE",
            details={"current_page": current_page, "total_pages": total_pages},
        )


class PageNavigationError(ValidationError):
    """Raised when navigating to a page the paginator has disabled."""

    def __init__(self, page: int, reason: str):
        super().__init__(
            f"Cannot navigate to page {page}: {reason}",
            code="PAGE_NAVIGATION_DISABLED",
            details={"page": page},
        )
