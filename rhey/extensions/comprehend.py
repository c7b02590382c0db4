from __future__ import annotations
import typing
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container


def comprehend(container: 'Container[T]',
               map_fn: Selector[T, U],
               filter_fn: Predicate[U],
               reduce_fn: Optional[Accumulator[V, U]] = None,
               initial_value: V = MISSING) -> Union['Container[U]', V]:
    """
    list-comprehension style pipeline: map, then filter, then optionally fold.
    the fold only happens when both reduce_fn and initial_value are given;
    otherwise the filtered container is returned.

    ex: comprehend(R([1, 2, 3, 4]), lambda x: x * 10, lambda x: x > 10) -> [20, 30, 40]
    """
    from ..container import Container
    filtered = [y for y in (map_fn(x) for x in container) if filter_fn(y)]
    if reduce_fn is not None and initial_value is not MISSING:
        return reduce(reduce_fn, filtered, initial_value)
    return Container(*filtered)
