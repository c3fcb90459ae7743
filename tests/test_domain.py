from datetime import datetime, timezone

import pytest

from lendhive import (
    Available,
    Borrowed,
    Copy,
    CopyStatus,
    Item,
    ItemNotBorrowed,
    ItemOutOfStock,
    ItemType,
    User,
)

NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


def test_item_factories_set_type():
    assert Item.book("1", "2", "Dune").type is ItemType.BOOK
    assert Item.dvd("1", "2", "Pi").type is ItemType.DVD
    assert Item.vhs("1", "2", "WarGames").type is ItemType.VHS


def test_items_compare_by_value():
    assert Item.dvd("1", "7", "Pi") == Item("1", "7", ItemType.DVD, "Pi")
    assert Item.dvd("1", "7", "Pi") != Item.dvd("2", "7", "Pi")
    assert len({Item.dvd("1", "7", "Pi"), Item.dvd("1", "7", "Pi")}) == 1


def test_items_are_immutable():
    item = Item.dvd("1", "7", "Pi")
    with pytest.raises(AttributeError):
        item.title = "Pi 2"


def test_users_compare_by_username():
    assert User.named("alice") == User("alice")
    assert User.named("alice") != User.named("bob")


def test_new_copy_is_available():
    copy = Copy(Item.dvd("1", "7", "Pi"))

    assert copy.is_available()
    assert isinstance(copy.state, Available)
    assert copy.status is CopyStatus.AVAILABLE
    assert copy.borrowed_by() is None


def test_try_borrow_records_user_and_time():
    copy = Copy(Item.dvd("1", "7", "Pi"))
    alice = User.named("alice")

    state = copy.try_borrow(alice, NOW)

    assert state == Borrowed(by=alice, at=NOW)
    assert not copy.is_available()
    assert copy.status is CopyStatus.CHECKED_OUT
    assert copy.borrowed_by() == alice
    assert copy.borrowed_on() == NOW.date()


def test_try_borrow_on_borrowed_copy_raises_out_of_stock():
    copy = Copy(Item.dvd("1", "7", "Pi"))
    copy.try_borrow(User.named("alice"), NOW)

    with pytest.raises(ItemOutOfStock, match="The Pi DVD is currently out of stock"):
        copy.try_borrow(User.named("bob"), NOW)

    # first borrower keeps the copy
    assert copy.borrowed_by() == User.named("alice")


def test_release_returns_previous_state_and_cycles():
    copy = Copy(Item.dvd("1", "7", "Pi"))
    alice = User.named("alice")
    copy.try_borrow(alice, NOW)

    previous = copy.release()

    assert previous == Borrowed(by=alice, at=NOW)
    assert copy.is_available()

    # available -> borrowed -> available is not one-shot
    copy.try_borrow(User.named("bob"), NOW)
    assert copy.borrowed_by() == User.named("bob")


def test_release_of_available_copy_is_allowed_by_default():
    copy = Copy(Item.dvd("1", "7", "Pi"))

    previous = copy.release()

    assert isinstance(previous, Available)
    assert copy.is_available()


def test_release_can_require_a_loan():
    copy = Copy(Item.dvd("1", "7", "Pi"))

    with pytest.raises(ItemNotBorrowed, match="The Pi DVD with id 1 is not on loan"):
        copy.release(require_borrowed=True)


def test_borrowed_on_fails_for_available_copy():
    copy = Copy(Item.vhs("4", "5", "WarGames"))

    with pytest.raises(ItemNotBorrowed):
        copy.borrowed_on()
