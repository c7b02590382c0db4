from __future__ import annotations
import logging
import typing
from functools import cmp_to_key, reduce as functools_reduce

import numpy as np

from .. import config
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)


def _is_homogeneous_numeric(data: List[Any]) -> bool:
    # bools are ints to python but would come back from numpy as ints, so exclude them
    if not data:
        return False
    first_type = type(data[0])
    return first_type in (int, float) and all(type(x) is first_type for x in data)


def _vectorized_mask(data: List[Any], predicate: Predicate[Any]) -> Optional[List[bool]]:
    """build a boolean filter mask with numpy for homogeneous numeric data, or None to fall back."""
    if not config.get_settings().vectorize or not _is_homogeneous_numeric(data):
        return None
    try:
        arr = np.array(data)
    except (TypeError, ValueError, OverflowError) as e:
        logger.debug(f"vectorized filter fell back to python: {e}")
        return None
    if arr.dtype == object:
        return None
    # the predicate runs once per element; its own errors reach the caller
    return np.vectorize(predicate, otypes=[bool])(arr).tolist()


class _CoreOperations(Generic[T]):
    def map(self: 'Container[T]', fn: Selector[T, U]) -> 'Container[U]':
        """project each element into a new container"""
        return self._spawn(fn(x) for x in self._items)

    def filter(self: 'Container[T]', predicate: Predicate[T]) -> 'Container[T]':
        """new container of the elements satisfying the predicate"""
        data = self._items
        mask = _vectorized_mask(data, predicate)
        if mask is not None:
            return self._spawn(x for x, keep in zip(data, mask) if keep)
        return self._spawn(x for x in data if predicate(x))

    def reduce(self: 'Container[T]', fn: Accumulator[U, T], initial: U = MISSING) -> U:
        """left fold; without an initial value the first element seeds the fold"""
        if initial is MISSING:
            if not self._items:
                raise TypeError("reduce of empty container with no initial value")
            return functools_reduce(fn, self._items)
        return functools_reduce(fn, self._items, initial)

    def sort(self: 'Container[T]', comparator: Optional[Comparer[T]] = None, *,
             key: Optional[Selector[T, Any]] = None, reverse: bool = False) -> 'Container[T]':
        """
        sort in place and return the container.
        comparator is a two-argument function returning a negative, zero or positive number;
        without one the natural ordering (or key) of the elements is used.
        """
        if comparator is not None:
            if key is not None:
                raise TypeError("pass either a comparator or a key, not both")
            key = cmp_to_key(comparator)
        self._items.sort(key=key, reverse=reverse)
        return self

    def some(self: 'Container[T]', predicate: Predicate[T]) -> bool:
        return any(predicate(x) for x in self._items)

    def every(self: 'Container[T]', predicate: Predicate[T]) -> bool:
        return all(predicate(x) for x in self._items)

    def find(self: 'Container[T]', predicate: Predicate[T]) -> Optional[T]:
        """first element satisfying the predicate, or None"""
        return next((x for x in self._items if predicate(x)), None)

    def find_index(self: 'Container[T]', predicate: Predicate[T]) -> int:
        """index of the first element satisfying the predicate, or -1"""
        return next((i for i, x in enumerate(self._items) if predicate(x)), -1)

    def for_each(self: 'Container[T]', action: Callable[[T], Any]) -> 'Container[T]':
        """run an action on every element for its side effects; returns the container"""
        for item in self._items:
            action(item)
        return self

    def includes(self: 'Container[T]', item: T) -> bool:
        return item in self._items

    def concat(self: 'Container[T]', *others: Iterable[T]) -> 'Container[T]':
        """new container with the elements of self followed by each iterable"""
        result = list(self._items)
        for other in others:
            result.extend(other)
        return self._spawn(result)

    def slice(self: 'Container[T]', start: Optional[int] = None, end: Optional[int] = None) -> 'Container[T]':
        """shallow copy of [start, end) with python slice semantics"""
        return self._spawn(self._items[start:end])

    def copy(self: 'Container[T]') -> 'Container[T]':
        return self._spawn(self._items)
