import numbers


def is_successor(i: int, other: int) -> bool:
    """true if i is exactly one greater than other"""
    for value in (i, other):
        if not isinstance(value, numbers.Integral) or isinstance(value, bool):
            raise TypeError(f"is_successor expects integers, got {type(value).__name__}")
    return other + 1 == i
