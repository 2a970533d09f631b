"""
plain functions over any iterable.
the enumerable accessors delegate here, so everything in this module also works
on generators and other single-use or infinite sources where laziness allows it.
"""
import logging
import operator
from functools import reduce
from itertools import chain, islice

import numpy as np

from .config import get_options
from .types import *

logger = logging.getLogger(__name__)


def identity(element: T) -> T:
    return element


# --- memoization and accumulation ---

def cached(elements: Iterable[T]) -> CachedEnumerable[T]:
    """wrap a source so that it can be traversed any number of times while being pulled once"""
    return CachedEnumerable(elements)


def concat_selection(elements: Iterable[T], selector: Callable[[T], Iterable[T]]) -> Iterator[T]:
    """
    every element in source order, followed by the expansion of every element,
    grouped by the element that produced it. no deduplication takes place.
    ex: [1, 2, 3] with x -> [x * 10] -> [1, 2, 3, 10, 20, 30]
    """
    accumulate = reduce(lambda acc, element: acc.add(element),
                        elements,
                        ConcatSelectionAccumulate.empty(selector))
    return accumulate.to_iterable()


# --- equality and hashing ---

def nullable_sequence_equal(first: Optional[Iterable[T]], second: Optional[Iterable[T]],
                            comparer: Optional[EqualityComparer[T]] = None) -> bool:
    """element-wise equality where two absent sequences are equal and absent vs present is not"""
    if first is None:
        return second is None
    if second is None:
        return False
    equals = comparer or operator.eq
    sentinel = object()
    for a, b in zip(chain(first, [sentinel]), chain(second, [sentinel])):
        if a is sentinel or b is sentinel:
            return a is b
        if not equals(a, b):
            return False
    return True


def sequence_hash(elements: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> int:
    """
    order sensitive hash of a sequence, optionally hashing a projection of each element.
    agrees with nullable_sequence_equal under the default comparer only; to pair it with a
    custom comparer, pass a key_selector that maps comparer-equal elements to equal keys.
    """
    key = key_selector or identity
    return hash(tuple(key(element) for element in elements))


# --- uniqueness ---

def throw_if_duplicates(elements: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None) -> Iterator[T]:
    """
    lazy pass-through that raises DuplicateElementError as soon as a key repeats.
    elements seen before the duplicate have already been yielded by then.
    """
    key = key_selector or identity
    seen = set()
    for element in elements:
        element_key = key(element)
        if element_key in seen:
            logger.debug("duplicate key %r rejected", element_key)
            raise DuplicateElementError(element_key, element)
        seen.add(element_key)
        yield element


# --- inverse mappings ---

def _make_pairs(elements: Iterable[T], key_selector: Callable[[T], Iterable[K]],
                value_selector: Optional[Selector[T, V]]) -> Iterator[Tuple[K, V]]:
    value_of = value_selector or identity
    for element in elements:
        value = value_of(element)
        for key in key_selector(element):
            yield key, value


def to_dictionary_inverse(elements: Iterable[T], key_selector: Callable[[T], Iterable[K]],
                          value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
    """
    build a key -> element dictionary from a function mapping each element to zero or more keys.
    raises KeyCollisionError at the first key produced twice.
    """
    result = {}
    for key, value in _make_pairs(elements, key_selector, value_selector):
        if key in result:
            logger.debug("inverse dictionary key collision on %r", key)
            raise KeyCollisionError(key, result[key], value)
        result[key] = value
    return result


def to_lookup_inverse(elements: Iterable[T], key_selector: Callable[[T], Iterable[K]],
                      value_selector: Optional[Selector[T, V]] = None) -> Dict[K, List[V]]:
    """like to_dictionary_inverse, but groups every element sharing a key instead of failing"""
    result: Dict[K, List[V]] = {}
    for key, value in _make_pairs(elements, key_selector, value_selector):
        result.setdefault(key, []).append(value)
    return result


# --- randomness ---

def _resolve_generator(random: Union[None, int, np.random.Generator]) -> np.random.Generator:
    if isinstance(random, np.random.Generator):
        return random
    if random is None:
        return np.random.default_rng(get_options().default_seed)
    if isinstance(random, (int, np.integer)) and not isinstance(random, bool):
        return np.random.default_rng(random)
    raise TypeError(f"random must be a numpy Generator, an int seed or None, not {type(random).__name__}")


def shuffle(elements: Iterable[T], random: Union[None, int, np.random.Generator] = None) -> List[T]:
    """randomly permuted copy of the input. pass a seed or a generator for a repeatable permutation."""
    rng = _resolve_generator(random)
    data = list(elements)
    return [data[i] for i in rng.permutation(len(data))]


# --- conditional append / prepend ---

def append_if(elements: Iterable[T], element: T, predicate: Predicate[T]) -> Iterable[T]:
    return chain(elements, [element]) if predicate(element) else elements


def append_if_not_null(elements: Iterable[T], element: Optional[T]) -> Iterable[T]:
    return append_if(elements, element, lambda item: item is not None)


def prepend_if(elements: Iterable[T], element: T, predicate: Predicate[T]) -> Iterable[T]:
    return chain([element], elements) if predicate(element) else elements


def prepend_if_not_null(elements: Iterable[T], element: Optional[T]) -> Iterable[T]:
    return prepend_if(elements, element, lambda item: item is not None)


def either(elements: Iterable[T], flag: bool) -> EitherEnumerable[T]:
    """
    defers a conditional step of a pipeline.
    ex: either(items, reverse_wanted).then(reversed)
    """
    return EitherEnumerable(elements, flag)


# --- filtering and projection ---

def where_not(elements: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    return (element for element in elements if not predicate(element))


def where_not_null(elements: Iterable[Optional[T]]) -> Iterator[T]:
    return (element for element in elements if element is not None)


def select_not_null(elements: Iterable[T], selector: Selector[T, Optional[U]]) -> Iterator[U]:
    return where_not_null(map(selector, elements))


def index_from(elements: Iterable[T], origin: int) -> Iterator[Tuple[int, T]]:
    """pair each element with its position counted from origin"""
    return enumerate(elements, start=origin)


def take_while_aggregate(elements: Iterable[T], seed: U, accumulator: Accumulator[U, T],
                         predicate: Callable[[U, T], bool]) -> Iterator[T]:
    """
    yield elements while predicate(accumulate, element) holds, folding each yielded element in.
    ex: take elements while their running sum stays under a budget.
    """
    accumulate = seed
    for element in elements:
        if not predicate(accumulate, element):
            return
        accumulate = accumulator(accumulate, element)
        yield element


# --- quantifiers ---

def for_each(elements: Iterable[T], action: Callable[[T], Any]) -> None:
    for element in elements:
        action(element)


def is_singleton(elements: Iterable[T]) -> bool:
    """true if the sequence has exactly one element. pulls at most two."""
    return len(list(islice(elements, 2))) == 1


_MISSING = object()


def not_any(elements: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    if predicate is None:
        return next(iter(elements), _MISSING) is _MISSING
    return not any(predicate(element) for element in elements)


def not_all(elements: Iterable[T], predicate: Predicate[T]) -> bool:
    return any(not predicate(element) for element in elements)


# --- async ---

async def aggregate_async(elements: Iterable[T], seed: U,
                          accumulator: Callable[[U, T], Any],
                          selector: Optional[Selector[U, V]] = None) -> V:
    """fold with an awaitable accumulator. elements are processed one at a time, in order."""
    accumulate = seed
    for element in elements:
        accumulate = await accumulator(accumulate, element)
    return selector(accumulate) if selector else accumulate


async def select_async(elements: Iterable[T], selector: Callable[[T], Any]) -> List[U]:
    """await an async projection for each element in order"""
    async def append_result(results, element):
        results.append(await selector(element))
        return results

    return await aggregate_async(elements, [], append_result)
