from __future__ import annotations
import logging
import typing
from .. import config
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)


class _SamplingOperations(Generic[T]):
    """random operations, all drawing from the shared source in rhey.config"""

    def shuffle(self: 'Container[T]') -> 'Container[T]':
        """fisher-yates shuffle in place; returns the container"""
        items = self._items
        for i in range(len(items) - 1, 0, -1):
            j = config.random_index(i + 1)
            items[i], items[j] = items[j], items[i]
        return self

    def pick_random(self: 'Container[T]', count: int = 1) -> Union[T, 'Container[T]', None]:
        """
        pick random elements without modifying the container.
        count == 1 returns a single element (None when empty); count > 1 returns a
        container of up to `count` distinct positions sampled without replacement.
        count <= 0 returns None.
        """
        if count <= 0:
            return None
        if count == 1:
            if not self._items:
                return None
            return self._items[config.random_index(len(self._items))]

        pool = list(self._items)
        result = []
        while len(result) < count and pool:
            result.append(pool.pop(config.random_index(len(pool))))
        return self._spawn(result)

    def remove_random(self: 'Container[T]', count: int = 1) -> Union[T, 'Container[T]', None]:
        """
        remove random elements, each draw over what is left.
        count == 1 returns the removed element (None when empty); count > 1 returns a
        container of removed elements in removal order. count <= 0 returns None.
        """
        if count <= 0:
            return None
        items = self._items
        removed = []
        while len(removed) < count and items:
            removed.append(items.pop(config.random_index(len(items))))
        logger.debug(f"removed {len(removed)} random items, {len(items)} left")

        if count == 1:
            return removed[0] if removed else None
        return self._spawn(removed)
