from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container


def distinct_by(items: Iterable[T], key_selector: Optional[Selector[T, Any]] = None) -> List[T]:
    """
    order-preserving dedup by equality of key_selector(item) (or the item itself).
    hashable keys use a set; unhashable keys (dicts, lists) fall back to a linear scan.
    """
    seen_hashable = set()
    seen_other = []
    result = []
    for item in items:
        key = item if key_selector is None else key_selector(item)
        try:
            if key in seen_hashable:
                continue
            seen_hashable.add(key)
        except TypeError:
            if key in seen_other:
                continue
            seen_other.append(key)
        result.append(item)
    return result


def union(container: 'Container[T]', other: Iterable[T]) -> 'Container[T]':
    """distinct elements of both sequences in order of first appearance"""
    from ..container import Container
    return Container(*distinct_by(chain(container, other)))


def intersection(container: 'Container[T]', other: Iterable[T]) -> 'Container[T]':
    """elements of container that also occur in other, in container order"""
    from ..container import Container
    other_items = list(other)
    return Container(*(x for x in container if x in other_items))


def difference(container: 'Container[T]', other: Iterable[T]) -> 'Container[T]':
    """elements of container that do not occur in other"""
    from ..container import Container
    other_items = list(other)
    return Container(*(x for x in container if x not in other_items))


def difference_by(container: 'Container[T]', other: Iterable[T], prop: str) -> 'Container[T]':
    """elements of container whose property value occurs on no element of other"""
    from ..container import Container
    excluded = [get_property(x, prop) for x in other]
    return Container(*(x for x in container if get_property(x, prop) not in excluded))


def unique(container: 'Container[T]') -> 'Container[T]':
    """value-equality dedup, first occurrence wins"""
    from ..container import Container
    return Container(*distinct_by(container))
