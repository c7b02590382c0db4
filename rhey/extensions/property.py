from __future__ import annotations
import typing
from ..types import *
from .set import distinct_by

if typing.TYPE_CHECKING:
    from ..container import Container


class _PropertyOperations(Generic[T]):
    """
    queries over containers of records.
    a record is a mapping (property read by key) or any object (property read
    by attribute); a missing property reads as None. matching uses ==.
    """

    def filter_by_property(self: 'Container[T]', prop: str, value: Any) -> 'Container[T]':
        return self._spawn(x for x in self._items if get_property(x, prop) == value)

    def remove_by_property(self: 'Container[T]', prop: str, value: Any) -> 'Container[T]':
        """new container without the elements whose property equals value"""
        return self._spawn(x for x in self._items if get_property(x, prop) != value)

    def update_by_property(self: 'Container[T]', prop: str, value: Any,
                           patch: Dict[str, Any]) -> 'Container[T]':
        """
        new container where each matching element is replaced by a shallow merge with patch.
        non-matching elements are carried over as the same objects.
        """
        return self._spawn(
            merge_properties(x, patch) if get_property(x, prop) == value else x
            for x in self._items
        )

    def find_by_property(self: 'Container[T]', prop: str, value: Any) -> Optional[T]:
        return next((x for x in self._items if get_property(x, prop) == value), None)

    def pluck(self: 'Container[T]', prop: str) -> 'Container[Any]':
        """container of the property's value for every element"""
        return self._spawn(get_property(x, prop) for x in self._items)

    def unique_by_property(self: 'Container[T]', prop: str) -> 'Container[T]':
        """keep the first element for each distinct property value"""
        return self._spawn(distinct_by(self._items, lambda x: get_property(x, prop)))

    def extract_subset(self: 'Container[T]', *props: str) -> 'Container[Dict[str, Any]]':
        """container of dicts holding only the named properties of each element"""
        return self._spawn({prop: get_property(x, prop) for prop in props} for x in self._items)

    def count_by_property_value(self: 'Container[T]', prop: str,
                                condition: Predicate[Any]) -> int:
        """number of elements whose property value satisfies condition"""
        return sum(1 for x in self._items if condition(get_property(x, prop)))
