"""Decoded instruction shapes.

One frozen dataclass per recognized opcode plus ``UnknownOp`` for every
opcode the reflector skips.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NewType, Optional, Tuple

if TYPE_CHECKING:
    from .enums import Decoration, Dim, ExecutionModel, StorageClass

Id = NewType("Id", int)


class Op:
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class UnknownOp(Op):
    opcode: int
    word_count: int


@dataclass(frozen=True, slots=True)
class OpName(Op):
    target: Id
    name: str


@dataclass(frozen=True, slots=True)
class OpMemberName(Op):
    target: Id
    member_index: int
    name: str


@dataclass(frozen=True, slots=True)
class OpEntryPoint(Op):
    execution_model: "ExecutionModel"
    func: Id
    name: str
    interface: Tuple[Id, ...]


@dataclass(frozen=True, slots=True)
class OpDecorate(Op):
    target: Id
    decoration: "Decoration"


@dataclass(frozen=True, slots=True)
class OpMemberDecorate(Op):
    target: Id
    member_index: int
    decoration: "Decoration"


@dataclass(frozen=True, slots=True)
class OpTypeVoid(Op):
    result: Id


@dataclass(frozen=True, slots=True)
class OpTypeBool(Op):
    result: Id


@dataclass(frozen=True, slots=True)
class OpTypeInt(Op):
    result: Id
    width: int
    signedness: int


@dataclass(frozen=True, slots=True)
class OpTypeFloat(Op):
    result: Id
    width: int


@dataclass(frozen=True, slots=True)
class OpTypeVector(Op):
    result: Id
    component_type: Id
    component_count: int


@dataclass(frozen=True, slots=True)
class OpTypeMatrix(Op):
    result: Id
    column_type: Id
    column_count: int


@dataclass(frozen=True, slots=True)
class OpTypeImage(Op):
    result: Id
    sampled_type: Id
    dim: "Dim"
    depth: int
    arrayed: int
    ms: int
    sampled: int
    format: int
    access: Optional[int] = None


@dataclass(frozen=True, slots=True)
class OpTypeSampler(Op):
    result: Id


@dataclass(frozen=True, slots=True)
class OpTypeSampledImage(Op):
    result: Id
    image_type: Id


@dataclass(frozen=True, slots=True)
class OpTypeArray(Op):
    result: Id
    element_type: Id
    length: Id


@dataclass(frozen=True, slots=True)
class OpTypeRuntimeArray(Op):
    result: Id
    element_type: Id


@dataclass(frozen=True, slots=True)
class OpTypeStruct(Op):
    result: Id
    member_types: Tuple[Id, ...]


@dataclass(frozen=True, slots=True)
class OpTypePointer(Op):
    result: Id
    storage_class: "StorageClass"
    pointed_type: Id


@dataclass(frozen=True, slots=True)
class OpConstant(Op):
    result_type: Id
    result: Id
    value: Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class OpVariable(Op):
    result_type: Id
    result: Id
    storage_class: "StorageClass"
    initializer: Optional[Id] = None
