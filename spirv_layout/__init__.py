"""Reflection of SPIR-V shader interfaces.

``Module.from_words`` decodes a compiled shader and describes its types,
uniforms, push constants, stage inputs/outputs and entry points so pipeline
layouts can be generated without hand-written metadata.
"""

from .errors import (  # noqa: F401
    InvalidHeader,
    InvalidId,
    InvalidOp,
    Other,
    SpirvError,
    StringFormat,
)
from .model import (  # noqa: F401
    Array,
    Bool,
    EntryPoint,
    ExecutionModel,
    Float32,
    Image2D,
    Int32,
    LocationVariable,
    Mat3,
    Mat4,
    Pointer,
    PushConstantVariable,
    SampledImage,
    Sampler,
    StorageClass,
    Struct,
    StructMember,
    Type,
    UInt32,
    UniformVariable,
    Unknown,
    Variable,
    Vec2,
    Vec3,
    Vec4,
    Void,
)
from .module import Module  # noqa: F401

__all__ = [
    "Module",
    "SpirvError",
    "InvalidHeader",
    "InvalidOp",
    "InvalidId",
    "StringFormat",
    "Other",
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
    "Struct",
    "StructMember",
    "Pointer",
    "StorageClass",
    "ExecutionModel",
    "UniformVariable",
    "PushConstantVariable",
    "LocationVariable",
    "Variable",
    "EntryPoint",
]
