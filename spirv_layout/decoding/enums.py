"""Closed enumerations read from instruction operands.

Codes this package does not model decode to an ``UNKNOWN`` member (or an
``UnknownDecoration``) instead of failing, so newer modules still parse.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, Tuple, Type, TypeVar

from .reader import OperandCtx


class _WireEnum(IntEnum):
    @classmethod
    def from_code(cls, code: int):
        try:
            return cls(code)
        except ValueError:
            return cls(-1)


class Dim(_WireEnum):
    UNKNOWN = -1
    D1 = 0
    D2 = 1
    D3 = 2
    CUBE = 3
    RECT = 4
    BUFFER = 5
    SUBPASS_DATA = 6


class StorageClass(_WireEnum):
    UNKNOWN = -1
    UNIFORM_CONSTANT = 0
    INPUT = 1
    UNIFORM = 2
    OUTPUT = 3
    PUSH_CONSTANT = 9


class ExecutionModel(_WireEnum):
    UNKNOWN = -1
    VERTEX = 0
    FRAGMENT = 4


class DecorationKind(IntEnum):
    ROW_MAJOR = 4
    COL_MAJOR = 5
    MATRIX_STRIDE = 7
    LOCATION = 30
    BINDING = 33
    DESCRIPTOR_SET = 34
    OFFSET = 35


class Decoration:
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class RowMajor(Decoration):
    pass


@dataclass(frozen=True, slots=True)
class ColMajor(Decoration):
    pass


@dataclass(frozen=True, slots=True)
class MatrixStride(Decoration):
    stride: int


@dataclass(frozen=True, slots=True)
class Location(Decoration):
    location: int


@dataclass(frozen=True, slots=True)
class Binding(Decoration):
    binding: int


@dataclass(frozen=True, slots=True)
class DescriptorSet(Decoration):
    set: int


@dataclass(frozen=True, slots=True)
class Offset(Decoration):
    offset: int


@dataclass(frozen=True, slots=True)
class UnknownDecoration(Decoration):
    code: int


# code -> (variant, number of literal payload words)
_DECORATIONS: Dict[int, Tuple[Type[Decoration], int]] = {
    DecorationKind.ROW_MAJOR: (RowMajor, 0),
    DecorationKind.COL_MAJOR: (ColMajor, 0),
    DecorationKind.MATRIX_STRIDE: (MatrixStride, 1),
    DecorationKind.LOCATION: (Location, 1),
    DecorationKind.BINDING: (Binding, 1),
    DecorationKind.DESCRIPTOR_SET: (DescriptorSet, 1),
    DecorationKind.OFFSET: (Offset, 1),
}

E = TypeVar("E", bound=_WireEnum)


def read_decoration(ctx: OperandCtx) -> Decoration:
    code = ctx.read_u32()
    known = _DECORATIONS.get(code)
    if known is None:
        return UnknownDecoration(code)
    variant, payload_words = known
    payload = [ctx.read_u32() for _ in range(payload_words)]
    return variant(*payload)  # type: ignore[call-arg]


def enum_reader(enum_cls: Type[E]) -> Callable[[OperandCtx], E]:
    def _read(ctx: OperandCtx) -> E:
        return enum_cls.from_code(ctx.read_u32())

    _read.__name__ = f"read_{enum_cls.__name__.lower()}"
    return _read


read_dim = enum_reader(Dim)
read_storage_class = enum_reader(StorageClass)
read_execution_model = enum_reader(ExecutionModel)
