"""
Catalog module data models.

Enumerations for the catalog browser's selections and the marker types
that make up a page window.
"""

from enum import Enum
from types import EllipsisType
from typing import Union


class SaleType(str, Enum):
    """Sale-type filter applied to catalog listings."""

    ALL = "ALL"
    FIXEDPRICE = "FIXEDPRICE"  # Listed at a fixed price
    AUCTION = "AUCTION"
    REDEEMED = "REDEEMED"      # Physical asset already claimed

    @property
    def label(self) -> str:
        return SALE_TYPE_LABELS[self]


SALE_TYPE_LABELS: dict[SaleType, str] = {
    SaleType.ALL: "All",
    SaleType.FIXEDPRICE: "On Sale",
    SaleType.AUCTION: "Auction",
    SaleType.REDEEMED: "Redeemed",
}


class ViewMode(str, Enum):
    """Layout of the catalog listing."""

    GRID = "grid"
    LIST = "list"


# A page window element: a 1-indexed page number, or the Ellipsis
# singleton (...) standing for a run of hidden pages.
PageMarker = Union[int, EllipsisType]
PageWindow = list[PageMarker]
