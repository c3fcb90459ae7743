from __future__ import annotations
import logging
from datetime import timedelta
from typing import List, Optional, Tuple

from .clock import Clock
from .domain import Available, Borrowed, Copy, Item, ItemType, Receipt, User
from .errors import ItemNotFound, ItemOutOfStock
from .repositories import CatalogIndex, CatalogKey

logger = logging.getLogger(__name__)

OVERDUE_AFTER_DAYS = 7


class CirculationService:
    def __init__(self, index: CatalogIndex, clock: Clock, strict_returns: bool = False) -> None:
        self.index = index
        self.clock = clock

        # refuse to "return" a copy that is already on the shelf
        self.strict_returns = strict_returns

    def borrow(self, title: str, item_type: ItemType, user: User) -> Receipt:
        if not self.index.contains(title, item_type):
            logger.info("[borrow] unknown %s %r requested by %s", item_type.value, title, user.username)
            raise ItemNotFound.for_title(title, item_type)

        copies = self.index.lookup(title, item_type)

        # a lost claim means some other caller took that copy for good,
        # so the bucket size bounds how often we can lose
        for _ in range(len(copies)):
            copy = self._pick_available(copies)
            if copy is None:
                break
            try:
                copy.try_borrow(user, self.clock.now())
            except ItemOutOfStock:
                logger.debug(
                    "[borrow] lost race for %s id=%s, rescanning",
                    title,
                    copy.item.unique_id,
                )
                continue
            logger.info(
                "[borrow] %s %r id=%s -> %s",
                item_type.value,
                title,
                copy.item.unique_id,
                user.username,
            )
            return Receipt(self.clock.today(), copy.item)

        logger.info("[borrow] no copies of %s %r available", item_type.value, title)
        raise ItemOutOfStock.for_title(title, item_type)

    def return_item(self, item: Item) -> None:
        if not self.index.contains(item.title, item.type):
            logger.warning("[return] no %s titled %r in the catalog", item.type.value, item.title)
            raise ItemNotFound.for_item(item, reason="unknown_key")

        copy = self._find_copy(item)
        if copy is None:
            logger.warning(
                "[return] %s %r has no copy with id=%s",
                item.type.value,
                item.title,
                item.unique_id,
            )
            raise ItemNotFound.for_item(item, reason="unknown_copy")

        previous = copy.release(require_borrowed=self.strict_returns)
        if isinstance(previous, Available):
            logger.warning("[return] %r id=%s was not on loan", item.title, item.unique_id)
        else:
            logger.info("[return] %r id=%s from %s", item.title, item.unique_id, previous.by.username)

    def _pick_available(self, copies: Tuple[Copy, ...]) -> Optional[Copy]:
        return next((c for c in copies if c.is_available()), None)

    def _find_copy(self, item: Item) -> Optional[Copy]:
        for copy in self.index.lookup(item.title, item.type):
            if copy.item.unique_id == item.unique_id:
                return copy
        return None


class ReportingService:
    """
    Read-only scans over every copy.

    Scans take no locks: each copy's state is read once, so every row is
    consistent on its own, but a copy may change state while the scan is
    under way.
    """

    def __init__(self, index: CatalogIndex, clock: Clock, overdue_after_days: int = OVERDUE_AFTER_DAYS) -> None:
        self.index = index
        self.clock = clock
        self.overdue_after_days = overdue_after_days

    def current_inventory(self) -> List[Item]:
        return [c.item for c in self.index.copies() if isinstance(c.state, Available)]

    def overdue_items(self) -> List[Item]:
        cutoff = self.clock.today() - timedelta(days=self.overdue_after_days)
        overdue: List[Item] = []
        for copy in self.index.copies():
            state = copy.state
            if isinstance(state, Borrowed) and state.at.date() < cutoff:
                overdue.append(copy.item)
        return overdue

    def borrowed_items(self, user: User) -> List[Item]:
        items: List[Item] = []
        for copy in self.index.copies():
            state = copy.state
            if isinstance(state, Borrowed) and state.by == user:
                items.append(copy.item)
        return items

    def inventory_report(self) -> List[Tuple[CatalogKey, int, int]]:
        """
        Returns tuples of (CatalogKey, total_copies, available_copies)
        """
        report: List[Tuple[CatalogKey, int, int]] = []
        for key, copies in self.index.buckets():
            available = sum(1 for c in copies if c.is_available())
            report.append((key, len(copies), available))
        return report
