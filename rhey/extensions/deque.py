from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container


class _DequeOperations(Generic[T]):
    """head and tail mutators. adders return the container, removers return the element or None."""

    def add_first(self: 'Container[T]', item: T) -> 'Container[T]':
        self._items.insert(0, item)
        return self

    def add_last(self: 'Container[T]', item: T) -> 'Container[T]':
        self._items.append(item)
        return self

    def remove_first(self: 'Container[T]') -> Optional[T]:
        return self._items.pop(0) if self._items else None

    def remove_last(self: 'Container[T]') -> Optional[T]:
        return self._items.pop() if self._items else None

    def add_items_first(self: 'Container[T]', items: Iterable[T]) -> 'Container[T]':
        """prepend items, keeping their order: [3, 4].add_items_first([1, 2]) -> [1, 2, 3, 4]"""
        self._items[:0] = list(items)
        return self

    def add_items_last(self: 'Container[T]', items: Iterable[T]) -> 'Container[T]':
        self._items.extend(items)
        return self
