from __future__ import annotations
import typing
from collections import defaultdict
from itertools import batched
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container


def group_by(container: 'Container[T]', prop: str) -> Dict[str, 'Container[T]']:
    """group records by the string form of a property; groups keep container order"""
    from ..container import Container
    groups = defaultdict(Container)
    for item in container:
        groups[str(get_property(item, prop))].append(item)
    return dict(groups)


def partition(container: 'Container[T]', predicate: Predicate[T]) -> Tuple['Container[T]', 'Container[T]']:
    """split into (passing, failing) containers, each in original order"""
    from ..container import Container
    passing, failing = Container(), Container()
    for item in container:
        (passing if predicate(item) else failing).append(item)
    return passing, failing


def chunk(container: 'Container[T]', size: int) -> 'Container[Container[T]]':
    """split into sub-containers of `size` elements; the last one may be shorter"""
    from ..container import Container
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return Container(*(Container(*batch) for batch in batched(container, size)))
