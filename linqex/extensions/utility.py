from __future__ import annotations
import typing
import numpy as np
from .. import sequences
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Callable[[T], Any]) -> 'Enumerable[T]':
        """
        performs the specified action on each element of a sequence for side-effects.
        this is an EAGER operation that executes immediately.
        returns the original enumerable to allow chaining.
        """
        sequences.for_each(self._enumerable._get_data(), action)
        return self._enumerable

    def shuffle(self, random: Union[None, int, np.random.Generator] = None) -> 'Enumerable[T]':
        """
        randomly permuted copy of the sequence.
        random may be a seed or a numpy generator; without one the configured default seed is used.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: sequences.shuffle(self._enumerable._get_data(), random))

    def cached(self) -> CachedEnumerable[T]:
        """
        replayable view that pulls from this enumerable only once, on first traversal.
        useful to hand the same lazily computed data to several consumers.
        """
        def source():
            yield from self._enumerable._get_data()
        return sequences.cached(source())

    def either(self, flag: bool) -> 'EitherEnumerable[T]':
        """
        decide up front whether the next step applies.
        ex: .util.either(descending).then(lambda e: e.select(negate))
        """
        return sequences.either(self._enumerable, flag)

    def apply_if(self, condition: bool, operation: Callable[['Enumerable[T]'], 'Enumerable[T]']) -> 'Enumerable[T]':
        """conditionally apply operation based on boolean condition"""
        return self.either(condition).then(operation)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the enumerable object into an external function. enables custom, chainable operations.
        example: .pipe(my_custom_report, title='my data')
        """
        return func(self._enumerable, *args, **kwargs)
