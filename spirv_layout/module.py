from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from . import model as t
from .classify import assemble_entry_points, classify_variables
from .config import LayoutConfig, load_config
from .constants import WORD_MASK
from .decoding import decode_module
from .errors import InvalidOp
from .passes import collect_decorations_and_names, collect_types_and_vars
from .sizes import type_size

logger = logging.getLogger(__name__)


def _as_words(words: Iterable[int]) -> Tuple[int, ...]:
    result = tuple(int(word) for word in words)
    for index, word in enumerate(result):
        if not 0 <= word <= WORD_MASK:
            raise InvalidOp(f"word {index} is not a 32-bit value: {word:#x}")
    return result


class Module:
    """Reflection info of a single SPIR-V module.

    Built once by :meth:`from_words`; afterwards it only answers queries, so
    one instance can be shared freely.
    """

    __slots__ = ("_types", "_entry_points")

    def __init__(
        self, types: Mapping[int, t.Type], entry_points: Sequence[t.EntryPoint]
    ) -> None:
        self._types = MappingProxyType(dict(types))
        self._entry_points = tuple(entry_points)

    @classmethod
    def from_words(
        cls, words: Iterable[int], config: Optional[LayoutConfig] = None
    ) -> "Module":
        """Generate reflection info from a stream of 32-bit words.

        Raises:
            InvalidHeader: the buffer is too short or the magic is wrong.
            InvalidOp: an instruction is malformed.
            InvalidId: a type declaration references an undeclared id.
            StringFormat: a literal string is not valid UTF-8.
            Other: an entry point uses an unsupported execution model.
        """
        if config is None:
            config = load_config()

        decoded = decode_module(_as_words(words), trace=config.trace)

        col = collect_types_and_vars(decoded)
        collect_decorations_and_names(decoded, col)

        classified = classify_variables(col)
        entry_points = assemble_entry_points(col.entries, classified)
        return cls(col.types, entry_points)

    @property
    def types(self) -> Mapping[int, t.Type]:
        return self._types

    @property
    def entry_points(self) -> Tuple[t.EntryPoint, ...]:
        return self._entry_points

    def get_type(self, type_id: int) -> Optional[t.Type]:
        return self._types.get(type_id)

    def get_entry_points(self) -> Tuple[t.EntryPoint, ...]:
        return self._entry_points

    def get_entry_point(self, name: str) -> Optional[t.EntryPoint]:
        for entry in self._entry_points:
            if entry.name == name:
                return entry
        return None

    def get_type_size(self, type_id: int, stride: Optional[int] = None) -> Optional[int]:
        return type_size(self._types, type_id, stride)

    def get_member_size(self, member: t.StructMember) -> Optional[int]:
        """Size of a struct member, using its matrix stride."""
        return type_size(self._types, member.type_id, member.stride)

    def get_var_size(self, var: t.Variable) -> Optional[int]:
        """Size of a uniform, push constant or stage variable, if known."""
        return type_size(self._types, var.type_id)

    def __repr__(self) -> str:
        names = ", ".join(entry.name for entry in self._entry_points)
        return f"<Module types={len(self._types)} entry_points=[{names}]>"
