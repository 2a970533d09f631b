import logging
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
EqualityComparer = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]

logger = logging.getLogger(__name__)


# --- errors ---

class DuplicateElementError(ValueError):
    """raised when a duplicate-rejecting pass meets a key it has already seen"""

    def __init__(self, key: Any, element: Any):
        super().__init__(f"sequence contains a duplicate key: {key!r}")
        self.key = key
        self.element = element


class KeyCollisionError(ValueError):
    """raised when two elements map to the same key of an inverse dictionary"""

    def __init__(self, key: Any, existing: Any, value: Any):
        super().__init__(f"an element with the same key has already been added: {key!r}")
        self.key = key
        self.existing = existing
        self.value = value


# --- memoizing sequence ---

class CachedEnumerable(Generic[T]):
    """
    replayable view over a single-use iterable.
    every element is pulled from the source at most once and kept in an append-only
    buffer. each traversal replays the buffer and then continues pulling from the
    shared source. not thread safe: concurrent traversals must be serialized by the caller.
    """

    def __init__(self, elements: Iterable[T]):
        self._source_iterator = iter(elements)
        self._cache: List[T] = []
        self._is_fully_enumerated = False

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    @property
    def is_exhausted(self) -> bool:
        return self._is_fully_enumerated

    def _pull(self) -> bool:
        """pull one element into the cache. returns false once the source is exhausted."""
        if self._is_fully_enumerated:
            return False
        try:
            item = next(self._source_iterator)
        except StopIteration:
            self._is_fully_enumerated = True
            logger.debug("cached source exhausted after %d elements", len(self._cache))
            return False
        except Exception:
            logger.debug("cached source failed after %d elements", len(self._cache), exc_info=True)
            raise
        self._cache.append(item)
        return True

    def _materialize_to_index(self, target_index: int):
        """materialize the cache up to (and including) the target index"""
        while len(self._cache) <= target_index and self._pull():
            pass

    def _materialize_all(self):
        while self._pull():
            pass

    def __iter__(self) -> Iterator[T]:
        # index based so that interleaved traversals see elements pulled by each other
        index = 0
        while True:
            if index < len(self._cache):
                yield self._cache[index]
                index += 1
            elif not self._pull():
                return

    def __getitem__(self, index):
        """support indexing by materializing up to the requested index"""
        if isinstance(index, slice):
            bounds = (index.start or 0, index.stop, index.step or 1)
            if bounds[1] is None or min(bounds[0], bounds[1], bounds[2]) < 0:
                self._materialize_all()
            else:
                self._materialize_to_index(index.stop - 1)
            return self._cache[index]

        if index < 0:
            self._materialize_all()
        else:
            self._materialize_to_index(index)

        if -len(self._cache) <= index < len(self._cache):
            return self._cache[index]
        raise IndexError("cached enumerable index out of range")

    def __len__(self):
        """get the length by fully materializing if necessary"""
        self._materialize_all()
        return len(self._cache)

    def __repr__(self) -> str:
        state = "exhausted" if self._is_fully_enumerated else "pending"
        return f"CachedEnumerable(cached={len(self._cache)}, {state})"


# --- self-extending accumulator ---

class _Cons(Generic[T]):
    """persistent singly linked list cell. lists are stored newest-first."""
    __slots__ = ('head', 'tail', 'length')

    def __init__(self, head: T, tail: Optional['_Cons[T]']):
        self.head = head
        self.tail = tail
        self.length = 1 if tail is None else tail.length + 1


def _oldest_first(cell: Optional[_Cons[T]]) -> List[T]:
    items = []
    while cell is not None:
        items.append(cell.head)
        cell = cell.tail
    items.reverse()
    return items


class ConcatSelectionAccumulate(Generic[T]):
    """
    immutable accumulator: the elements added so far (prefix) followed by the
    expansion of each of them (suffix). add() shares structure with the value it
    was called on, so folding n elements costs o(n).
    """
    __slots__ = ('_prefix', '_suffix', '_selector')

    def __init__(self, prefix: Optional[_Cons[T]], suffix: Optional[_Cons[Iterable[T]]],
                 selector: Callable[[T], Iterable[T]]):
        self._prefix = prefix
        self._suffix = suffix
        self._selector = selector

    @classmethod
    def empty(cls, selector: Callable[[T], Iterable[T]]) -> 'ConcatSelectionAccumulate[T]':
        return cls(None, None, selector)

    def add(self, element: T) -> 'ConcatSelectionAccumulate[T]':
        return ConcatSelectionAccumulate(
            _Cons(element, self._prefix),
            _Cons(self._selector(element), self._suffix),
            self._selector)

    def to_iterable(self) -> Iterator[T]:
        prefix = _oldest_first(self._prefix)
        expansions = _oldest_first(self._suffix)
        yield from prefix
        for expansion in expansions:
            yield from expansion

    def __iter__(self) -> Iterator[T]:
        return self.to_iterable()

    def __len__(self) -> int:
        return 0 if self._prefix is None else self._prefix.length

    def __repr__(self) -> str:
        return f"ConcatSelectionAccumulate(added={len(self)})"


# --- conditional pipeline ---

class EitherEnumerable(Generic[T]):
    """holds a sequence and decides, by a flag fixed up front, whether then() transforms it"""

    def __init__(self, elements: Iterable[T], flag: bool):
        self._elements = elements
        self._flag = flag

    def then(self, selector: Callable[[Iterable[T]], Iterable[T]]) -> Iterable[T]:
        return selector(self._elements) if self._flag else self._elements

    def __repr__(self) -> str:
        return f"EitherEnumerable(flag={self._flag})"
