from __future__ import annotations
import typing
from itertools import chain
from .. import sequences
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        def filter_data():
            data = self._get_data()
            optimized = self._try_numpy_optimization(data, 'where', predicate)
            if optimized is not None: return optimized
            return [x for x in data if predicate(x)]
        return Enumerable(filter_data)

    def where_not(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """keep elements the predicate rejects"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.where_not(self._get_data(), predicate)))

    def where_not_null(self: 'Enumerable[Optional[T]]') -> 'Enumerable[T]':
        """drop none elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.where_not_null(self._get_data())))

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        def map_data():
            data = self._get_data()
            optimized = self._try_numpy_optimization(data, 'select', selector)
            if optimized is not None: return optimized
            return [selector(x) for x in data]
        return Enumerable(map_data)

    def select_not_null(self: 'Enumerable[T]', selector: Selector[T, Optional[U]]) -> 'Enumerable[U]':
        """project each element and drop the projections that are none"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.select_not_null(self._get_data(), selector)))

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [item for element in self._get_data() for item in selector(element)])

    def concat_selection(self: 'Enumerable[T]', selector: Callable[[T], Iterable[T]]) -> 'Enumerable[T]':
        """
        every element in order, followed by the expansion of each element grouped by source.
        unlike select_many the originals are kept and come first.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.concat_selection(self._get_data(), selector)))

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[:count])

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[count:])

    def take_while_aggregate(self: 'Enumerable[T]', seed: U, accumulator: Accumulator[U, T],
                             predicate: Callable[[U, T], bool]) -> 'Enumerable[T]':
        """take elements while a predicate over the running aggregate and the next element holds"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.take_while_aggregate(self._get_data(), seed, accumulator, predicate)))

    def index_from(self: 'Enumerable[T]', origin: int) -> 'Enumerable[Tuple[int, T]]':
        """pair each element with its index, counting from origin"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.index_from(self._get_data(), origin)))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data() + list(other))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(chain(self._get_data(), [element])))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(chain([element], self._get_data())))

    def append_if(self: 'Enumerable[T]', element: T, predicate: Predicate[T]) -> 'Enumerable[T]':
        """appends the value only if it satisfies the predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.append_if(self._get_data(), element, predicate)))

    def append_if_not_null(self: 'Enumerable[T]', element: Optional[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.append_if_not_null(self._get_data(), element)))

    def prepend_if(self: 'Enumerable[T]', element: T, predicate: Predicate[T]) -> 'Enumerable[T]':
        """prepends the value only if it satisfies the predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.prepend_if(self._get_data(), element, predicate)))

    def prepend_if_not_null(self: 'Enumerable[T]', element: Optional[T]) -> 'Enumerable[T]':
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.prepend_if_not_null(self._get_data(), element)))
