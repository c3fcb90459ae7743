from __future__ import annotations
from typing import Iterable, List, Tuple

from .clock import Clock
from .domain import Copy, Item, ItemType, Receipt, User
from .repositories import CatalogIndex, CatalogKey
from .services import OVERDUE_AFTER_DAYS, CirculationService, ReportingService


class Library:
    """
    A simple facade that builds the catalog index and wires the services.

    The index is complete before the constructor returns, so it can be shared
    between threads without further locking.
    """

    def __init__(
        self,
        clock: Clock,
        items: Iterable[Item],
        *,
        overdue_after_days: int = OVERDUE_AFTER_DAYS,
        strict_returns: bool = False,
    ) -> None:
        self._clock = clock
        self._index = CatalogIndex.build(Copy(item) for item in items)

        # services
        self.circulation = CirculationService(self._index, clock, strict_returns=strict_returns)
        self.reporting = ReportingService(self._index, clock, overdue_after_days=overdue_after_days)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def index(self) -> CatalogIndex:
        return self._index

    # ---- circulation
    def borrow(self, title: str, item_type: ItemType, user: User) -> Receipt:
        return self.circulation.borrow(title, item_type, user)

    def return_item(self, item: Item) -> None:
        self.circulation.return_item(item)

    # ---- reporting
    def current_inventory(self) -> List[Item]:
        return self.reporting.current_inventory()

    def overdue_items(self) -> List[Item]:
        return self.reporting.overdue_items()

    def borrowed_items(self, user: User) -> List[Item]:
        return self.reporting.borrowed_items(user)

    def inventory_report(self) -> List[Tuple[CatalogKey, int, int]]:
        """
        Returns tuples of (CatalogKey, total_copies, available_copies)
        """
        return self.reporting.inventory_report()
