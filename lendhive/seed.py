from __future__ import annotations
from typing import List

from .domain import Item


def seed_demo_items() -> List[Item]:
    return [
        Item.dvd("1", "7", "Pi"),
        Item.dvd("2", "7", "Pi"),
        Item.book("3", "4", "Introduction to Algorithms"),
        Item.vhs("4", "5", "WarGames"),
    ]
