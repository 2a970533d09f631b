from __future__ import annotations
import typing
from .. import sequences
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    uniqueness and equality operations.
    distinct quietly drops repeats, throw_if_duplicates refuses them.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        def distinct_data():
            data = self._enumerable._get_data()
            if key_selector is None:
                return list(dict.fromkeys(data))
            seen = set()
            return [item for item in data if (key := key_selector(item)) not in seen and not seen.add(key)]
        return Enumerable(distinct_data)

    def throw_if_duplicates(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Enumerable[T]':
        """
        pass elements through unchanged, raising DuplicateElementError on the first repeated key.
        the error surfaces when the result is evaluated.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: list(sequences.throw_if_duplicates(self._enumerable._get_data(), key_selector)))

    def sequence_equal(self, other: Optional[Iterable[T]],
                       comparer: Optional[EqualityComparer[T]] = None) -> bool:
        """element-wise equality with another sequence. a none sequence is never equal to this one."""
        return sequences.nullable_sequence_equal(self._enumerable._get_data(), other, comparer)

    def sequence_hash(self, key_selector: Optional[KeySelector[T, K]] = None) -> int:
        """order sensitive hash, consistent with sequence_equal under the default comparer"""
        return sequences.sequence_hash(self._enumerable._get_data(), key_selector)
