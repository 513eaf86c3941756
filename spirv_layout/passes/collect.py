"""First sweep over the decoded instructions.

Builds the type graph, the constant table, the raw variables and the raw
entry points in stream order. A declaration may only consult ids declared
before it, so a missing vector component type or array length is an error
here rather than something to retry later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .. import model as t
from ..decoding import enums as wire
from ..decoding import ops
from ..errors import InvalidId, Other

logger = logging.getLogger(__name__)


@dataclass
class RawVariable:
    type_id: int  # the declared pointer type
    set: Optional[int] = None
    binding: Optional[int] = None
    location: Optional[int] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class RawEntryPoint:
    name: str
    execution_model: t.ExecutionModel
    interface: Tuple[int, ...]


@dataclass
class Collection:
    types: Dict[int, t.Type] = field(default_factory=dict)
    constants: Dict[int, int] = field(default_factory=dict)
    variables: Dict[int, RawVariable] = field(default_factory=dict)
    entries: List[RawEntryPoint] = field(default_factory=list)
    # struct id -> members, edited in place until the structs are frozen
    members: Dict[int, List[t.StructMember]] = field(default_factory=dict)


_STORAGE_CLASSES: Dict[wire.StorageClass, t.StorageClass] = {
    wire.StorageClass.UNIFORM_CONSTANT: t.StorageClass.UNIFORM,
    wire.StorageClass.UNIFORM: t.StorageClass.UNIFORM,
    wire.StorageClass.PUSH_CONSTANT: t.StorageClass.PUSH_CONSTANT,
    wire.StorageClass.INPUT: t.StorageClass.INPUT,
    wire.StorageClass.OUTPUT: t.StorageClass.OUTPUT,
}

_EXECUTION_MODELS: Dict[wire.ExecutionModel, t.ExecutionModel] = {
    wire.ExecutionModel.VERTEX: t.ExecutionModel.VERTEX,
    wire.ExecutionModel.FRAGMENT: t.ExecutionModel.FRAGMENT,
}

_VECTORS: Dict[int, t.Type] = {2: t.Vec2(), 3: t.Vec3(), 4: t.Vec4()}


def _int_type(op: ops.OpTypeInt) -> t.Type:
    if op.width != 32:
        return t.Unknown()
    if op.signedness == 0:
        return t.UInt32()
    return t.Int32()


def _float_type(op: ops.OpTypeFloat) -> t.Type:
    return t.Float32() if op.width == 32 else t.Unknown()


def _vector_type(op: ops.OpTypeVector, col: Collection) -> t.Type:
    component = col.types.get(op.component_type)
    if component is None:
        raise InvalidId(
            f"vector %{op.result} uses undeclared component type %{op.component_type}"
        )
    if not isinstance(component, t.Float32):
        return t.Unknown()
    return _VECTORS.get(op.component_count, t.Unknown())


def _matrix_type(op: ops.OpTypeMatrix, col: Collection) -> t.Type:
    column = col.types.get(op.column_type)
    if isinstance(column, t.Vec3) and op.column_count == 3:
        return t.Mat3()
    if isinstance(column, t.Vec4) and op.column_count == 4:
        return t.Mat4()
    return t.Unknown()


def _image_type(op: ops.OpTypeImage, col: Collection) -> t.Type:
    sampled_type = col.types.get(op.sampled_type)
    if not isinstance(sampled_type, t.Float32) or op.dim is not wire.Dim.D2:
        return t.Unknown()
    return t.Image2D(depth=op.depth != 0, sampled=op.sampled != 0, format=op.format)


def _sampled_image_type(op: ops.OpTypeSampledImage, col: Collection) -> t.Type:
    if isinstance(col.types.get(op.image_type), t.Image2D):
        return t.SampledImage(image_type_id=op.image_type)
    return t.Unknown()


def _array_type(op: ops.OpTypeArray, col: Collection) -> t.Type:
    length = col.constants.get(op.length)
    if length is None:
        raise InvalidId(
            f"array %{op.result} length %{op.length} is not a known u32 constant"
        )
    return t.Array(element_type_id=op.element_type, length=length)


def _struct_type(op: ops.OpTypeStruct) -> t.Type:
    return t.Struct(
        name=None,
        elements=tuple(
            t.StructMember(name=None, type_id=member) for member in op.member_types
        ),
    )


def _pointer_type(op: ops.OpTypePointer) -> t.Type:
    return t.Pointer(
        storage_class=_STORAGE_CLASSES.get(op.storage_class, t.StorageClass.UNKNOWN),
        pointed_type_id=op.pointed_type,
    )


def _collect_type(op: ops.Op, col: Collection) -> Optional[Tuple[int, t.Type]]:
    if isinstance(op, ops.OpTypeVoid):
        return op.result, t.Void()
    if isinstance(op, ops.OpTypeBool):
        return op.result, t.Bool()
    if isinstance(op, ops.OpTypeInt):
        return op.result, _int_type(op)
    if isinstance(op, ops.OpTypeFloat):
        return op.result, _float_type(op)
    if isinstance(op, ops.OpTypeVector):
        return op.result, _vector_type(op, col)
    if isinstance(op, ops.OpTypeMatrix):
        return op.result, _matrix_type(op, col)
    if isinstance(op, ops.OpTypeImage):
        return op.result, _image_type(op, col)
    if isinstance(op, ops.OpTypeSampler):
        return op.result, t.Sampler()
    if isinstance(op, ops.OpTypeSampledImage):
        return op.result, _sampled_image_type(op, col)
    if isinstance(op, ops.OpTypeArray):
        return op.result, _array_type(op, col)
    if isinstance(op, ops.OpTypeRuntimeArray):
        return op.result, t.Array(element_type_id=op.element_type, length=None)
    if isinstance(op, ops.OpTypeStruct):
        return op.result, _struct_type(op)
    if isinstance(op, ops.OpTypePointer):
        return op.result, _pointer_type(op)
    return None


def _collect_constant(op: ops.OpConstant, col: Collection) -> None:
    if isinstance(col.types.get(op.result_type), t.UInt32) and len(op.value) == 1:
        col.constants[op.result] = op.value[0]


def _collect_variable(op: ops.OpVariable, col: Collection) -> None:
    col.variables[op.result] = RawVariable(type_id=op.result_type)


def _collect_entry_point(op: ops.OpEntryPoint, col: Collection) -> None:
    model = _EXECUTION_MODELS.get(op.execution_model)
    if model is None:
        raise Other(f"unsupported execution model in entry point {op.name!r}")
    col.entries.append(
        RawEntryPoint(name=op.name, execution_model=model, interface=op.interface)
    )


_Collector = Callable[[ops.Op, Collection], None]

_COLLECTORS: Dict[type, _Collector] = {
    ops.OpConstant: _collect_constant,  # type: ignore[dict-item]
    ops.OpVariable: _collect_variable,  # type: ignore[dict-item]
    ops.OpEntryPoint: _collect_entry_point,  # type: ignore[dict-item]
}


def collect_types_and_vars(decoded: Sequence[ops.Op]) -> Collection:
    col = Collection()
    for op in decoded:
        declared = _collect_type(op, col)
        if declared is not None:
            result, ty = declared
            col.types[result] = ty
            if isinstance(ty, t.Struct):
                col.members[result] = list(ty.elements)
            else:
                col.members.pop(result, None)
            continue
        collector = _COLLECTORS.get(type(op))
        if collector is not None:
            collector(op, col)

    logger.debug(
        "collected %d types, %d constants, %d variables, %d entry points",
        len(col.types),
        len(col.constants),
        len(col.variables),
        len(col.entries),
    )
    return col
