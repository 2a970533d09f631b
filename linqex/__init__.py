r"""
'    .__  .__
'    |  | |__| ____   ______ ____ ___  ___
'    |  | |  |/    \ / ____// __ \  \/  /
'    |  |_|  |   |  < <_|  \  ___/ >    <
'    |____/__|___|  /\__   |\___  >__/\_ \
'                 \/    |__|    \/      \/
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    linq,
    L
)

# expose supporting data classes and errors
from .types import (
    CachedEnumerable,
    ConcatSelectionAccumulate,
    EitherEnumerable,
    DuplicateElementError,
    KeyCollisionError
)

# expose the plain functions
from .sequences import (
    identity,
    cached,
    concat_selection,
    nullable_sequence_equal,
    sequence_hash,
    throw_if_duplicates,
    to_dictionary_inverse,
    to_lookup_inverse,
    shuffle,
    append_if,
    append_if_not_null,
    prepend_if,
    prepend_if_not_null,
    either,
    where_not,
    where_not_null,
    select_not_null,
    index_from,
    take_while_aggregate,
    for_each,
    is_singleton,
    not_any,
    not_all,
    aggregate_async,
    select_async
)
from .comparables import (
    is_less_than,
    is_less_than_or_equal,
    is_greater_than,
    is_greater_than_or_equal
)
from .integers import is_successor
from .reflection import (
    custom_attribute,
    get_custom_attributes,
    get_parameters,
    has_custom_attribute,
    every_base_type,
    is_nullable
)
from .objects import every_type, to_singleton_set
from .config import Options, configure, get_options, reset_options

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "linq",
    "L",
    "CachedEnumerable",
    "ConcatSelectionAccumulate",
    "EitherEnumerable",
    "DuplicateElementError",
    "KeyCollisionError",
    "identity",
    "cached",
    "concat_selection",
    "nullable_sequence_equal",
    "sequence_hash",
    "throw_if_duplicates",
    "to_dictionary_inverse",
    "to_lookup_inverse",
    "shuffle",
    "append_if",
    "append_if_not_null",
    "prepend_if",
    "prepend_if_not_null",
    "either",
    "where_not",
    "where_not_null",
    "select_not_null",
    "index_from",
    "take_while_aggregate",
    "for_each",
    "is_singleton",
    "not_any",
    "not_all",
    "aggregate_async",
    "select_async",
    "is_less_than",
    "is_less_than_or_equal",
    "is_greater_than",
    "is_greater_than_or_equal",
    "is_successor",
    "custom_attribute",
    "get_custom_attributes",
    "get_parameters",
    "has_custom_attribute",
    "every_base_type",
    "is_nullable",
    "every_type",
    "to_singleton_set",
    "Options",
    "configure",
    "get_options",
    "reset_options"
]
