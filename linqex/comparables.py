from .types import *


def _compare(value: T, other: T, comparer: Optional[Comparer[T]]) -> int:
    if comparer is not None:
        return comparer(value, other)
    return (value > other) - (value < other)


def is_less_than(value: T, other: T, comparer: Optional[Comparer[T]] = None) -> bool:
    return _compare(value, other, comparer) < 0


def is_less_than_or_equal(value: T, other: T, comparer: Optional[Comparer[T]] = None) -> bool:
    return _compare(value, other, comparer) <= 0


def is_greater_than(value: T, other: T, comparer: Optional[Comparer[T]] = None) -> bool:
    return _compare(value, other, comparer) > 0


def is_greater_than_or_equal(value: T, other: T, comparer: Optional[Comparer[T]] = None) -> bool:
    return _compare(value, other, comparer) >= 0
