"""Reflection-level description of a SPIR-V module's interface.

Types are declared in a hierarchy: a pointer, array, struct or sampled image
refers to other types by id, and ``Module.get_type`` resolves those ids.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .constants import DEFAULT_MATRIX_STRIDE


class StorageClass(str, Enum):
    """Where a pointer points to."""

    UNKNOWN = "unknown"
    UNIFORM = "uniform"  # uniform blocks, images and samplers
    UNIFORM_CONSTANT = "uniform_constant"  # never produced; folded into UNIFORM
    PUSH_CONSTANT = "push_constant"
    INPUT = "input"
    OUTPUT = "output"


class ExecutionModel(str, Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


class Type:
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Unknown(Type):
    """A type this package does not model."""


@dataclass(frozen=True, slots=True)
class Void(Type):
    pass


@dataclass(frozen=True, slots=True)
class Bool(Type):
    pass


@dataclass(frozen=True, slots=True)
class Int32(Type):
    pass


@dataclass(frozen=True, slots=True)
class UInt32(Type):
    pass


@dataclass(frozen=True, slots=True)
class Float32(Type):
    pass


@dataclass(frozen=True, slots=True)
class Vec2(Type):
    pass


@dataclass(frozen=True, slots=True)
class Vec3(Type):
    pass


@dataclass(frozen=True, slots=True)
class Vec4(Type):
    pass


@dataclass(frozen=True, slots=True)
class Mat3(Type):
    pass


@dataclass(frozen=True, slots=True)
class Mat4(Type):
    pass


@dataclass(frozen=True, slots=True)
class Image2D(Type):
    depth: bool
    sampled: bool
    format: int  # image format code, 0 (unknown) under Vulkan


@dataclass(frozen=True, slots=True)
class Sampler(Type):
    pass


@dataclass(frozen=True, slots=True)
class SampledImage(Type):
    """A combined image and sampler."""

    image_type_id: int


@dataclass(frozen=True, slots=True)
class Array(Type):
    element_type_id: int
    length: Optional[int] = None  # None for runtime arrays


@dataclass(frozen=True, slots=True)
class StructMember:
    name: Optional[str]
    type_id: int
    offset: Optional[int] = None
    row_major: bool = True
    stride: int = DEFAULT_MATRIX_STRIDE


@dataclass(frozen=True, slots=True)
class Struct(Type):
    """Members keep declaration order, which need not follow offsets."""

    name: Optional[str]
    elements: Tuple[StructMember, ...]


@dataclass(frozen=True, slots=True)
class Pointer(Type):
    storage_class: StorageClass
    pointed_type_id: int


@dataclass(frozen=True, slots=True)
class UniformVariable:
    set: int
    binding: int
    type_id: int  # the pointed-to type, not the pointer
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PushConstantVariable:
    type_id: int
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class LocationVariable:
    """A stage input or output (GLSL ``layout(location = N)``)."""

    location: int
    type_id: int
    name: Optional[str] = None


Variable = Union[UniformVariable, PushConstantVariable, LocationVariable]


@dataclass(frozen=True, slots=True)
class EntryPoint:
    """One shader stage declared by the module."""

    name: str
    execution_model: ExecutionModel
    uniforms: Tuple[UniformVariable, ...] = ()
    push_constants: Tuple[PushConstantVariable, ...] = ()
    inputs: Tuple[LocationVariable, ...] = ()
    outputs: Tuple[LocationVariable, ...] = ()


__all__ = [
    "StorageClass",
    "ExecutionModel",
    "Type",
    "Unknown",
    "Void",
    "Bool",
    "Int32",
    "UInt32",
    "Float32",
    "Vec2",
    "Vec3",
    "Vec4",
    "Mat3",
    "Mat4",
    "Image2D",
    "Sampler",
    "SampledImage",
    "Array",
    "StructMember",
    "Struct",
    "Pointer",
    "UniformVariable",
    "PushConstantVariable",
    "LocationVariable",
    "Variable",
    "EntryPoint",
]
