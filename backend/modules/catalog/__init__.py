"""
Catalog browser module.

Public API:
- compute_window, should_render: Page window computation
- Paginator: Previous/next navigation around a page window
- FilterSelection: Sale-type and view-mode selection
- SaleType, ViewMode: Selection enumerations
- InvalidPageError, PageNavigationError: Catalog exceptions
"""

from .models import SaleType, ViewMode, PageMarker, PageWindow
from .pagination import compute_window, should_render, Paginator
from .filters import FilterSelection, sale_type_options
from .exceptions import InvalidPageError, PageNavigationError

__all__ = [
    # Models
    "SaleType",
    "ViewMode",
    "PageMarker",
    "PageWindow",
    # Pagination
    "compute_window",
    "should_render",
    "Paginator",
    # Filters
    "FilterSelection",
    "sale_type_options",
    # Exceptions
    "InvalidPageError",
    "PageNavigationError",
]
