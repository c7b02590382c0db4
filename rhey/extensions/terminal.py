from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..container import Container


class _TerminalOperations(Generic[T]):
    def to_list(self: 'Container[T]') -> List[T]:
        """shallow copy as a plain list"""
        return list(self._items)

    def to_array(self: 'Container[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._items)

    def to_series(self: 'Container[T]') -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._items)

    def to_df(self: 'Container[T]') -> pd.DataFrame:
        """convert a container of records to a pandas dataframe"""
        return pd.DataFrame(self._items)

    def to_object(self: 'Container[T]') -> Dict[Any, Any]:
        """build a dict from a container of (key, value) pairs"""
        return dict(self._items)
