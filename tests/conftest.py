from datetime import datetime, timezone

import pytest

from lendhive import FixedClock, Item, MoveableClock, User

START = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return FixedClock(START)


@pytest.fixture
def moveable_clock():
    return MoveableClock(START)


@pytest.fixture
def alice():
    return User.named("alice")


@pytest.fixture
def bob():
    return User.named("bob")


@pytest.fixture
def catalog():
    return [
        Item.dvd("1", "7", "Pi"),
        Item.dvd("2", "7", "Pi"),
        Item.book("3", "4", "Introduction to Algorithms"),
        Item.vhs("4", "5", "WarGames"),
    ]
