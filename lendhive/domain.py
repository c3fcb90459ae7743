from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum, auto
from threading import Lock
from typing import Optional, Tuple, Union

from .errors import ItemNotBorrowed, ItemOutOfStock


class ItemType(Enum):
    BOOK = "Book"
    DVD = "DVD"
    VHS = "VHS"


@dataclass(frozen=True)
class Item:
    unique_id: str
    book_id: str
    type: ItemType
    title: str

    @classmethod
    def book(cls, unique_id: str, book_id: str, title: str) -> Item:
        return cls(unique_id, book_id, ItemType.BOOK, title)

    @classmethod
    def dvd(cls, unique_id: str, book_id: str, title: str) -> Item:
        return cls(unique_id, book_id, ItemType.DVD, title)

    @classmethod
    def vhs(cls, unique_id: str, book_id: str, title: str) -> Item:
        return cls(unique_id, book_id, ItemType.VHS, title)

    @property
    def key(self) -> Tuple[str, ItemType]:
        return (self.title, self.type)


@dataclass(frozen=True)
class User:
    username: str

    @classmethod
    def named(cls, username: str) -> User:
        return cls(username)


@dataclass(frozen=True)
class Receipt:
    # date of borrowing, as read from the library clock
    return_date: date
    item: Item


class CopyStatus(Enum):
    AVAILABLE = auto()
    CHECKED_OUT = auto()


@dataclass(frozen=True)
class Available:
    status = CopyStatus.AVAILABLE


@dataclass(frozen=True)
class Borrowed:
    by: User
    at: datetime

    status = CopyStatus.CHECKED_OUT


AVAILABLE = Available()

CopyState = Union[Available, Borrowed]


@dataclass(eq=False)
class Copy:
    """
    One physical copy of an item.

    The state is swapped as a whole under the copy's own lock; readers take
    the ``state`` reference once and never see a half-applied transition.
    """

    item: Item
    state: CopyState = AVAILABLE
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    @property
    def status(self) -> CopyStatus:
        return self.state.status

    def is_available(self) -> bool:
        return isinstance(self.state, Available)

    def try_borrow(self, user: User, now: datetime) -> Borrowed:
        with self._lock:
            if not isinstance(self.state, Available):
                raise ItemOutOfStock.for_title(self.item.title, self.item.type)
            borrowed = Borrowed(by=user, at=now)
            self.state = borrowed
            return borrowed

    def release(self, require_borrowed: bool = False) -> CopyState:
        """Put the copy back on the shelf and return the state it had before."""
        with self._lock:
            previous = self.state
            if require_borrowed and isinstance(previous, Available):
                raise ItemNotBorrowed.for_item(self.item)
            self.state = AVAILABLE
            return previous

    def borrowed_on(self) -> date:
        state = self.state
        if not isinstance(state, Borrowed):
            raise ItemNotBorrowed.for_item(self.item)
        return state.at.date()

    def borrowed_by(self) -> Optional[User]:
        state = self.state
        return state.by if isinstance(state, Borrowed) else None
