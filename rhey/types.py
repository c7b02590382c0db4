import copy
import dataclasses
from collections.abc import Mapping
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]

# a container index: an int, a numeric string ("-1") or a range descriptor ("1:4:2")
IndexKey = Union[int, str]


class _Missing:
    """marks an optional argument that was not supplied (None is a legal value)"""

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def get_property(item: Any, name: str) -> Any:
    """read a named property from a record; mappings by key, other objects by attribute"""
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def merge_properties(item: T, patch: Dict[str, Any]) -> T:
    """
    shallow merge of a record with a patch, returning a new record.
    the original is never modified.
    """
    if isinstance(item, Mapping):
        return {**item, **patch}
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.replace(item, **patch)
    if isinstance(item, tuple) and hasattr(item, '_replace'):
        return item._replace(**patch)

    merged = copy.copy(item)
    for name, value in patch.items():
        setattr(merged, name, value)
    return merged
