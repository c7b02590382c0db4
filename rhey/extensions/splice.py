from __future__ import annotations
import logging
import typing
from ..errors import InvalidArgumentError, NotFoundError
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

Start = Union[int, Predicate[T]]


class ItemsSelection(Generic[T]):
    """
    first stage of remove_items(count) / get_items(count).
    holds the count until from_() supplies the start position.
    """

    def __init__(self, container: 'Container[T]', count: int, destructive: bool):
        self._container = container
        self._count = count
        self._destructive = destructive

    def from_(self, start: Start) -> 'Container[T]':
        """
        resolve start and take `count` items from there.
        start is an index (negative counts from the end) or a predicate; the first
        element satisfying the predicate marks the start.
        """
        index = self._container._resolve_start(start)
        items = self._container._items
        end = index + max(self._count, 0)
        selected = items[index:end]
        if self._destructive:
            del items[index:end]
            logger.debug(f"removed {len(selected)} items starting at index {index}")
        return self._container._spawn(selected)

    def __repr__(self) -> str:
        action = "remove" if self._destructive else "get"
        return f"ItemsSelection({action} {self._count})"


class _SpliceOperations(Generic[T]):
    def remove_items(self: 'Container[T]', count: int) -> ItemsSelection[T]:
        """remove `count` items; call .from_(start) on the result to perform the removal"""
        return ItemsSelection(self, count, destructive=True)

    def get_items(self: 'Container[T]', count: int) -> ItemsSelection[T]:
        """copy `count` items without modifying the container; finish with .from_(start)"""
        return ItemsSelection(self, count, destructive=False)

    def _resolve_start(self: 'Container[T]', start: Start) -> int:
        # bool is an int subclass but never a meaningful position
        if isinstance(start, int) and not isinstance(start, bool):
            return max(len(self._items) + start, 0) if start < 0 else start
        if callable(start):
            index = self.find_index(start)
            if index == -1:
                raise NotFoundError("no matching item found for the provided condition")
            return index
        raise InvalidArgumentError(
            f"invalid start parameter {start!r}: must be an int index or a predicate function")
