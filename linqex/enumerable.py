from __future__ import annotations

import logging

import numpy as np
from abc import ABC, abstractmethod
from .config import get_options
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def _try_numpy_optimization(self, data: List[T], operation: str, func: Callable) -> Optional[List[Any]]:
        """vectorise where/select over homogeneous int or float data. returns none to fall back."""
        if not get_options().use_numpy or not data:
            return None
        first_type = type(data[0])
        if first_type not in (int, float) or any(type(x) is not first_type for x in data):
            return None
        try:
            arr = np.array(data)
            if operation == 'where':
                mask = np.vectorize(func, otypes=[bool])(arr)
                return arr[mask].tolist()
            if operation == 'select':
                # object output keeps variable width results (strings, tuples) intact
                results = np.vectorize(func, otypes=[object])(arr)
                return [x.item() if isinstance(x, np.generic) else x for x in results]
        except (TypeError, ValueError, AttributeError, OverflowError) as e:
            logger.debug("numpy %s fast path fell back to python: %s", operation, e)
        return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a linq-style wrapper over python iterables, computed lazily on first use"""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        state = f"{len(self._cached_result)} items" if self._is_cached else "pending"
        return f"Enumerable({state})"
