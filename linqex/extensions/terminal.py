from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from .. import sequences
from ..types import *

_MISSING = object()

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later elements overwrite earlier ones with the same key."""
        val_sel = value_selector or sequences.identity
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    def dict_inverse(self, key_selector: Callable[[T], Iterable[K]],
                     value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """
        dictionary keyed by every key each element maps to.
        raises KeyCollisionError if two elements (or one element twice) produce the same key.
        """
        return sequences.to_dictionary_inverse(self._enumerable._get_data(), key_selector, value_selector)

    def lookup_inverse(self, key_selector: Callable[[T], Iterable[K]],
                       value_selector: Optional[Selector[T, V]] = None) -> Dict[K, List[V]]:
        """like dict_inverse, but every key maps to the list of elements that produced it"""
        return sequences.to_lookup_inverse(self._enumerable._get_data(), key_selector, value_selector)

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        return not self.not_any(predicate)

    def not_any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check that no element satisfies condition (or that the sequence is empty)"""
        return sequences.not_any(self._enumerable._get_data(), predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._enumerable._get_data())

    def not_all(self, predicate: Predicate[T]) -> bool:
        """check if at least one element fails the condition"""
        return sequences.not_all(self._enumerable._get_data(), predicate)

    def is_singleton(self) -> bool:
        """check that the sequence has exactly one element"""
        return sequences.is_singleton(self._enumerable._get_data())

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        data = self._enumerable._get_data()
        if predicate is None:
            if not data: raise ValueError("sequence contains no elements")
            return data[0]
        for item in data:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default. errors from evaluation or the predicate propagate."""
        data = self._enumerable._get_data()
        found = next((x for x in data if predicate is None or predicate(x)), _MISSING)
        return default if found is _MISSING else found

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        data = [x for x in self._enumerable._get_data() if predicate(x)] if predicate else self._enumerable._get_data()
        if len(data) == 0: raise ValueError("sequence contains no matching elements")
        if len(data) > 1: raise ValueError("sequence contains more than one matching element")
        return data[0]

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """applies accumulator function over sequence"""
        data = self._enumerable._get_data()
        if not data and seed is None: raise ValueError("cannot aggregate empty sequence without seed")
        return reduce(accumulator, data, seed) if seed is not None else reduce(accumulator, data)

    async def aggregate_async(self, seed: U, accumulator: Callable[[U, T], Any],
                              selector: Optional[Selector[U, V]] = None) -> V:
        """aggregate with an async accumulator, awaiting one element at a time"""
        return await sequences.aggregate_async(self._enumerable._get_data(), seed, accumulator, selector)

    async def select_async(self, selector: Callable[[T], Any]) -> List[U]:
        """await an async projection of each element, in order"""
        return await sequences.select_async(self._enumerable._get_data(), selector)
