from __future__ import annotations
import typing
from .types import *

if typing.TYPE_CHECKING:
    from .container import Container


class SliceView(Generic[T]):
    """
    fluent wrapper around a slice read from a container (container["1:4"]).

    the view owns a private copy of the sliced elements. where() and sort()
    rewrite that copy and return the view so calls can be chained; map(),
    reduce(), some() and every() end the chain. unwrap() hands back the
    underlying container.
    """

    def __init__(self, container: 'Container[T]'):
        self._container = container

    def where(self, predicate: Predicate[T]) -> 'SliceView[T]':
        """keep only the elements satisfying predicate"""
        self._container = self._container.filter(predicate)
        return self

    def map(self, fn: Selector[T, U]) -> 'Container[U]':
        """project into a new plain container (ends the chain)"""
        return self._container.map(fn)

    def sort(self, comparator: Optional[Comparer[T]] = None, *,
             key: Optional[Selector[T, Any]] = None, reverse: bool = False) -> 'SliceView[T]':
        self._container.sort(comparator, key=key, reverse=reverse)
        return self

    def reduce(self, fn: Accumulator[U, T], initial: U = MISSING) -> U:
        return self._container.reduce(fn, initial)

    def some(self, predicate: Predicate[T]) -> bool:
        return self._container.some(predicate)

    def every(self, predicate: Predicate[T]) -> bool:
        return self._container.every(predicate)

    def unwrap(self) -> 'Container[T]':
        return self._container

    def to_list(self) -> List[T]:
        return self._container.to_list()

    def __iter__(self) -> Iterator[T]:
        return iter(self._container)

    def __len__(self) -> int:
        return len(self._container)

    def __str__(self) -> str:
        return ",".join(str(x) for x in self._container)

    def __repr__(self) -> str:
        return f"SliceView({self._container.to_list()!r})"
