import typing
from .types import *

if typing.TYPE_CHECKING:
    from .container import Container


def from_iterable(data: Iterable[T]) -> 'Container[T]':
    """create container from iterable"""
    from .container import Container
    return Container(*data)


def of(*items: T) -> 'Container[T]':
    """create container from the given arguments, in order"""
    from .container import Container
    return Container(*items)


def from_range(start: int, count: int) -> 'Container[int]':
    """create container of `count` consecutive integers"""
    from .container import Container
    return Container(*range(start, start + count))


def repeat(item: T, count: int) -> 'Container[T]':
    """create container with repeated item"""
    from .container import Container
    return Container(*([item] * count))


def empty() -> 'Container[Any]':
    """create empty container"""
    from .container import Container
    return Container()


# --- aliases ---
rhey = from_iterable
R = from_iterable
