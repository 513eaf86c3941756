"""The two sweeps that turn decoded instructions into reflection tables."""

from .collect import (  # noqa: F401
    Collection,
    RawEntryPoint,
    RawVariable,
    collect_types_and_vars,
)
from .decorate import collect_decorations_and_names  # noqa: F401

__all__ = [
    "Collection",
    "RawEntryPoint",
    "RawVariable",
    "collect_types_and_vars",
    "collect_decorations_and_names",
]
