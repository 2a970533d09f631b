from .types import *
from .reflection import every_base_type


def every_type(obj: Any) -> Iterator[type]:
    """every class the object is an instance of, most derived first, excluding object"""
    return every_base_type(type(obj))


def to_singleton_set(element: T) -> Set[T]:
    return {element}
