from __future__ import annotations

import operator
from collections.abc import MutableSequence
from .types import *
from .indexing import is_numeric_key, is_range_key, normalize_index, parse_range, range_positions
from .view import SliceView

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.deque import _DequeOperations
from .extensions.splice import _SpliceOperations
from .extensions.sampling import _SamplingOperations
from .extensions.property import _PropertyOperations
from .extensions.terminal import _TerminalOperations

# --- leaf utilities ---
from .extensions.grouping import group_by, partition, chunk
from .extensions.set import union, intersection, difference, difference_by, unique
from .extensions.comprehend import comprehend


class Container(
    _CoreOperations[T],
    _DequeOperations[T],
    _SpliceOperations[T],
    _SamplingOperations[T],
    _PropertyOperations[T],
    _TerminalOperations[T],
    MutableSequence,
):
    """
    an ordered, mutable sequence with negative / string indexing and range views.

        c = Container(0, 1, 2, 3, 4, 5)
        c[-1], c["-1"]          # 5, 5
        c["0:6:2"].to_list()    # [0, 2, 4]

    elements live in a private list; everything a list does (len, iteration,
    append, pop, +=, ...) works through collections.abc.MutableSequence.
    """

    def __init__(self, *items: T):
        self._items: List[T] = list(items)

    def _spawn(self, items: Iterable[U]) -> 'Container[U]':
        """new container of the same class holding items"""
        return type(self)(*items)

    # --- index interception ---

    def _resolve_index(self, key: IndexKey) -> int:
        """turn an int or numeric string into a position inside the container"""
        if is_numeric_key(key):
            index = int(key)
        elif isinstance(key, str):
            raise TypeError(f"container indices must be integers, numeric strings or ranges, not {key!r}")
        else:
            try:
                index = operator.index(key)
            except TypeError:
                raise TypeError(
                    f"container indices must be integers, numeric strings or ranges, not {type(key).__name__}"
                ) from None

        length = len(self._items)
        resolved = normalize_index(index, length)
        if not 0 <= resolved < length:
            raise IndexError(f"container index {index} out of range for length {length}")
        return resolved

    def __getitem__(self, key):
        if isinstance(key, slice):
            return SliceView(self._spawn(self._items[key]))
        if is_range_key(key):
            return self.get_range(key)
        return self._items[self._resolve_index(key)]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, slice):
            self._items[key] = list(value)
            return
        if is_range_key(key):
            raise TypeError(f"range descriptor {key!r} is read-only; assign to single indices instead")
        self._items[self._resolve_index(key)] = value

    def __delitem__(self, key) -> None:
        if isinstance(key, slice):
            del self._items[key]
            return
        if is_range_key(key):
            raise TypeError(f"range descriptor {key!r} is read-only; use remove_items() instead")
        del self._items[self._resolve_index(key)]

    def get(self, index: IndexKey, default: Optional[T] = None) -> Optional[T]:
        """element at index (negative counts from the end), or default when out of range"""
        try:
            return self._items[self._resolve_index(index)]
        except IndexError:
            return default

    def set(self, index: IndexKey, value: T) -> 'Container[T]':
        """write through the same index resolution as reads; returns the container"""
        self._items[self._resolve_index(index)] = value
        return self

    def get_range(self, descriptor: str) -> SliceView[T]:
        """
        view over a "start:end:step" range; every part is optional.
        ex: Container(0, 1, 2, 3, 4, 5).get_range("-2:") -> view of [4, 5]
        """
        positions = range_positions(parse_range(descriptor), len(self._items))
        return SliceView(self._spawn(self._items[i] for i in positions))

    # --- sequence protocol ---

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def insert(self, index: int, value: T) -> None:
        self._items.insert(index, value)

    def append(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(values)

    def clear(self) -> None:
        self._items.clear()

    def __eq__(self, other) -> bool:
        if isinstance(other, Container):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __add__(self, other: Iterable[T]) -> 'Container[T]':
        return self.concat(other)

    def __copy__(self) -> 'Container[T]':
        return self.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    # --- positional properties ---

    @property
    def first(self) -> Optional[T]:
        return self._items[0] if self._items else None

    @property
    def last(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    @property
    def center(self) -> Union[T, 'Container[T]', None]:
        """
        middle element for odd lengths, a container of the two middle elements
        (lower index first) for even lengths, None when empty.
        """
        length = len(self._items)
        if length == 0:
            return None
        mid = length // 2
        if length % 2 == 0:
            return self._spawn(self._items[mid - 1:mid + 1])
        return self._items[mid]

    # --- grouping and set algebra ---

    def group_by(self, prop: str) -> Dict[str, 'Container[T]']:
        """dict from str(property value) to the container of matching elements"""
        return group_by(self, prop)

    def partition(self, predicate: Predicate[T]) -> Tuple['Container[T]', 'Container[T]']:
        return partition(self, predicate)

    def union(self, other: Iterable[T]) -> 'Container[T]':
        return union(self, other)

    def intersection(self, other: Iterable[T]) -> 'Container[T]':
        return intersection(self, other)

    def difference(self, other: Iterable[T]) -> 'Container[T]':
        return difference(self, other)

    def difference_by(self, other: Iterable[T], prop: str) -> 'Container[T]':
        return difference_by(self, other, prop)

    def comprehend(self, map_fn: Selector[T, U], filter_fn: Predicate[U],
                   reduce_fn: Optional[Accumulator[V, U]] = None,
                   initial_value: V = MISSING) -> Union['Container[U]', V]:
        return comprehend(self, map_fn, filter_fn, reduce_fn, initial_value)

    # --- structure ---

    def flatten(self) -> 'Container[Any]':
        """flatten one level of nested lists, tuples and containers"""
        result = []
        for item in self._items:
            if isinstance(item, (list, tuple, Container)):
                result.extend(item)
            else:
                result.append(item)
        return self._spawn(result)

    def unique(self) -> 'Container[T]':
        return unique(self)

    def chunk(self, size: int) -> 'Container[Container[T]]':
        return chunk(self, size)
