from dataclasses import dataclass, fields, replace
from typing import Optional


@dataclass(frozen=True)
class Options:
    """library wide switches"""
    use_numpy: bool = True  # vectorised where/select for homogeneous numeric data
    default_seed: Optional[int] = None  # seed used by shuffle when none is given


_options = Options()


def get_options() -> Options:
    return _options


def configure(**changes) -> Options:
    """replace selected options, e.g. configure(use_numpy=False)"""
    global _options
    known = {f.name for f in fields(Options)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"unknown option(s): {', '.join(sorted(unknown))}")
    _options = replace(_options, **changes)
    return _options


def reset_options() -> Options:
    global _options
    _options = Options()
    return _options
