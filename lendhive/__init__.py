"""
LendHive package.

Exports key modules for convenient imports.
"""

from .domain import (
    ItemType,
    Item,
    User,
    Receipt,
    CopyStatus,
    Available,
    Borrowed,
    Copy,
)

from .errors import (
    LibraryError,
    ItemNotFound,
    ItemOutOfStock,
    ItemNotBorrowed,
)

from .clock import (
    Clock,
    SystemClock,
    FixedClock,
    MoveableClock,
)

from .repositories import CatalogKey, CatalogIndex

from .services import (
    OVERDUE_AFTER_DAYS,
    CirculationService,
    ReportingService,
)

from .api import Library
from .seed import seed_demo_items

__all__ = [
    # domain
    "ItemType",
    "Item",
    "User",
    "Receipt",
    "CopyStatus",
    "Available",
    "Borrowed",
    "Copy",
    # errors
    "LibraryError",
    "ItemNotFound",
    "ItemOutOfStock",
    "ItemNotBorrowed",
    # clocks
    "Clock",
    "SystemClock",
    "FixedClock",
    "MoveableClock",
    # index
    "CatalogKey",
    "CatalogIndex",
    # services
    "OVERDUE_AFTER_DAYS",
    "CirculationService",
    "ReportingService",
    # api
    "Library",
    # seed
    "seed_demo_items",
]
