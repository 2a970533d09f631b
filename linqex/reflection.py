"""
reflection helpers: custom attribute lookups and base type walks.

custom attributes are plain marker objects. functions, methods, properties and
classes receive them through the @custom_attribute(...) decorator; parameters
receive them as typing.Annotated metadata:

    @dataclass(frozen=True)
    class Route:
        path: str

    @custom_attribute(Route("/users"))
    def list_users(limit: Annotated[int, Range(1, 100)]): ...

    has_custom_attribute(list_users, Route)                          # True
    has_custom_attribute(get_parameters(list_users)[0], Range)       # True
"""
import abc
import inspect
import types as builtin_types
import typing
from typing import Annotated, Literal, get_args, get_origin

from .types import *

_ATTRIBUTES = '__custom_attributes__'
_UNION_ORIGINS = (Union, builtin_types.UnionType)
# scaffolding classes that every hierarchy of their kind shares
_ROOT_TYPES = (object, abc.ABC, typing.Generic, typing.Protocol)


# --- custom attributes ---

def _unwrap(member: Any) -> Any:
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    if isinstance(member, property):
        return member.fget
    return member


def custom_attribute(*attributes: Any) -> Callable[[T], T]:
    """
    decorator attaching marker objects to a function, method, property or class.
    a decorated class starts from the markers of the nearest decorated class in its mro
    (normally its primary base chain); markers of other bases such as mixins are not merged.
    """
    def decorator(target: T) -> T:
        inner = _unwrap(target)
        # a class inherits markers only from the nearest decorated class of its mro
        existing = tuple(getattr(inner, _ATTRIBUTES, ()))
        setattr(inner, _ATTRIBUTES, existing + attributes)
        return target
    return decorator


def _annotated_metadata(annotation: Any) -> Tuple[Any, ...]:
    if get_origin(annotation) is Annotated:
        return tuple(annotation.__metadata__)
    return ()


def get_parameters(func: Callable) -> List[inspect.Parameter]:
    """parameters of a callable with string annotations resolved, so Annotated metadata is visible"""
    return list(inspect.signature(func, eval_str=True).parameters.values())


def get_custom_attributes(member: Any, attribute_type: Optional[Type[U]] = None) -> List[U]:
    """
    markers attached to a member, optionally only those that are instances of attribute_type.
    an undecorated class reports the markers of the nearest decorated class in its mro.
    """
    if isinstance(member, inspect.Parameter):
        markers = _annotated_metadata(member.annotation)
    else:
        markers = tuple(getattr(_unwrap(member), _ATTRIBUTES, ()))
    if attribute_type is None:
        return list(markers)
    return [marker for marker in markers if isinstance(marker, attribute_type)]


def has_custom_attribute(member: Any, attribute_type: Type[Any]) -> bool:
    return len(get_custom_attributes(member, attribute_type)) > 0


# --- types ---

def every_base_type(cls: type) -> Iterator[type]:
    """
    the class itself, then its primary base chain (first declared base at each level)
    from most to least derived, then every other class of the mro (mixins, abcs,
    protocols) in mro order. object and the abc / typing scaffolding
    classes (ABC, Generic, Protocol) are never included.
    """
    if not isinstance(cls, type):
        raise TypeError(f"every_base_type expects a class, got {type(cls).__name__}")
    return _walk_base_types(cls)


def _walk_base_types(cls: type) -> Iterator[type]:
    yield cls
    chain = {cls}
    parent = cls.__bases__[0] if cls.__bases__ else None
    while parent is not None and parent not in _ROOT_TYPES:
        yield parent
        chain.add(parent)
        parent = parent.__bases__[0] if parent.__bases__ else None
    for interface in cls.__mro__:
        if interface not in chain and interface not in _ROOT_TYPES:
            yield interface


def is_nullable(annotation: Any) -> bool:
    """true if a value annotated this way may be None"""
    if annotation is None or annotation is type(None) or annotation is Any:
        return True
    origin = get_origin(annotation)
    if origin is Annotated:
        return is_nullable(get_args(annotation)[0])
    if origin in _UNION_ORIGINS:
        return any(is_nullable(arg) for arg in get_args(annotation))
    if origin is Literal:
        return None in get_args(annotation)
    return False
