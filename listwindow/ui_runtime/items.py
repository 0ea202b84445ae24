"""Immutable keyed item sequences for virtualized lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import overload

from listwindow.runtime.errors import InvalidConfiguration


class ItemSequence[T](Sequence[T]):
    """Ordered, fixed-identity items with stable unique keys.

    Instances are never mutated; a filter change builds a new sequence.
    """

    __slots__ = ("_items", "_key_fn", "_keys", "_positions")

    def __init__(self, items: Iterable[T], key: Callable[[T], Hashable]) -> None:
        self._items: tuple[T, ...] = tuple(items)
        self._key_fn = key
        self._keys: tuple[Hashable, ...] = tuple(key(item) for item in self._items)
        self._positions: dict[Hashable, int] = {}
        for index, item_key in enumerate(self._keys):
            if item_key in self._positions:
                raise InvalidConfiguration(f"duplicate item key: {item_key!r}")
            self._positions[item_key] = index

    @classmethod
    def empty(cls) -> "ItemSequence[T]":
        return cls((), key=lambda item: item)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def key_at(self, index: int) -> Hashable:
        return self._keys[index]

    def index_of_key(self, key: Hashable) -> int | None:
        """Return the position of `key`, or None when absent."""
        return self._positions.get(key)

    def keys(self) -> tuple[Hashable, ...]:
        return self._keys

    def filtered(self, predicate: Callable[[T], bool]) -> "ItemSequence[T]":
        """Return a new sequence holding the items that satisfy `predicate`."""
        return ItemSequence((item for item in self._items if predicate(item)), key=self._key_fn)


def sequence_of[T](items: Sequence[T], key: Callable[[T], Hashable] | None = None) -> ItemSequence[T]:
    """Build an item sequence, keying by the item itself when no key is given."""
    if isinstance(items, ItemSequence) and key is None:
        return items
    return ItemSequence(items, key=key if key is not None else (lambda item: item))
