"""
Catalog filter selection.

Holds the active sale-type filter and view mode and reports every
selection to its observer.
"""

from typing import Callable, Optional

from .models import SaleType, ViewMode


class FilterSelection:
    """
    Current sale-type filter and view mode.

    Each setter notifies its callback exactly once per call, including
    when the value does not change.
    """

    def __init__(
        self,
        on_sale_type_change: Optional[Callable[[SaleType], None]] = None,
        on_view_change: Optional[Callable[[ViewMode], None]] = None,
        sale_type: SaleType = SaleType.ALL,
        view_mode: ViewMode = ViewMode.GRID,
    ):
        self._on_sale_type_change = on_sale_type_change
        self._on_view_change = on_view_change
        self._sale_type = SaleType(sale_type)
        self._view_mode = ViewMode(view_mode)

    @property
    def sale_type(self) -> SaleType:
        return self._sale_type

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    def set_sale_type(self, value: SaleType) -> None:
        self._sale_type = SaleType(value)
        if self._on_sale_type_change is not None:
            self._on_sale_type_change(self._sale_type)

    def set_view_mode(self, value: ViewMode) -> None:
        self._view_mode = ViewMode(value)
        if self._on_view_change is not None:
            self._on_view_change(self._view_mode)


def sale_type_options() -> list[tuple[SaleType, str]]:
    """Sale types with their display labels, in toggle order."""
    return [(sale_type, sale_type.label) for sale_type in SaleType]
