from __future__ import annotations
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .domain import Item, ItemType


class LibraryError(Exception):
    """Base class for everything the library refuses to do."""


class ItemNotFound(LibraryError):
    def __init__(
        self,
        message: str,
        title: str,
        item_type: ItemType,
        item: Optional[Item] = None,
        reason: str = "unknown_key",
    ) -> None:
        super().__init__(message)
        self.title = title
        self.item_type = item_type
        self.item = item
        # "unknown_key" when no (title, type) bucket exists, "unknown_copy"
        # when the bucket exists but holds no copy with that unique id
        self.reason = reason

    @classmethod
    def for_title(cls, title: str, item_type: ItemType) -> ItemNotFound:
        return cls(
            f"Could not find the {item_type.value}, {title}, you want to borrow",
            title,
            item_type,
        )

    @classmethod
    def for_item(cls, item: Item, reason: str = "unknown_key") -> ItemNotFound:
        # wording matches what existing callers compare against
        return cls(
            f"Could not the item: {item.title}, {item.type.value} with id {item.unique_id}",
            item.title,
            item.type,
            item=item,
            reason=reason,
        )


class ItemOutOfStock(LibraryError):
    def __init__(self, message: str, title: str, item_type: ItemType) -> None:
        super().__init__(message)
        self.title = title
        self.item_type = item_type

    @classmethod
    def for_title(cls, title: str, item_type: ItemType) -> ItemOutOfStock:
        return cls(
            f"The {title} {item_type.value} is currently out of stock",
            title,
            item_type,
        )


class ItemNotBorrowed(LibraryError):
    """Raised for a copy that is not on loan when the caller needs it to be."""

    def __init__(self, message: str, item: Item) -> None:
        super().__init__(message)
        self.item = item
        self.title = item.title
        self.item_type = item.type

    @classmethod
    def for_item(cls, item: Item) -> ItemNotBorrowed:
        return cls(
            f"The {item.title} {item.type.value} with id {item.unique_id} is not on loan",
            item,
        )
