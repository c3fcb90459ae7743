from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

from .domain import Copy, ItemType


class CatalogKey(NamedTuple):
    title: str
    type: ItemType


class CatalogIndex:
    """
    Copies bucketed by (title, type).

    Buckets are fixed once built; only the state inside each copy changes,
    so lookups need no locking.
    """

    def __init__(self, buckets: Dict[CatalogKey, Tuple[Copy, ...]]) -> None:
        self._buckets = buckets

    @classmethod
    def build(cls, copies: Iterable[Copy]) -> CatalogIndex:
        grouped: Dict[CatalogKey, List[Copy]] = {}
        for copy in copies:
            key = CatalogKey(copy.item.title, copy.item.type)
            grouped.setdefault(key, []).append(copy)
        return cls({key: tuple(bucket) for key, bucket in grouped.items()})

    def lookup(self, title: str, item_type: ItemType) -> Tuple[Copy, ...]:
        return self._buckets.get(CatalogKey(title, item_type), ())

    def contains(self, title: str, item_type: ItemType) -> bool:
        return CatalogKey(title, item_type) in self._buckets

    def keys(self) -> List[CatalogKey]:
        return list(self._buckets)

    def buckets(self) -> Iterator[Tuple[CatalogKey, Tuple[Copy, ...]]]:
        return iter(self._buckets.items())

    def copies(self) -> Iterator[Copy]:
        # bucket first-seen order, then input order inside the bucket
        for bucket in self._buckets.values():
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())
