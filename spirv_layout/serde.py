from __future__ import annotations

import json
from typing import Any, Dict, Optional

from . import model as t
from .module import Module

_KIND = "kind"

_SIMPLE_KINDS = {
    t.Unknown: "unknown",
    t.Void: "void",
    t.Bool: "bool",
    t.Int32: "int32",
    t.UInt32: "uint32",
    t.Float32: "float32",
    t.Vec2: "vec2",
    t.Vec3: "vec3",
    t.Vec4: "vec4",
    t.Mat3: "mat3",
    t.Mat4: "mat4",
    t.Sampler: "sampler",
}


def _member_to_dict(module: Module, member: t.StructMember) -> Dict[str, Any]:
    return {
        "name": member.name,
        "type_id": member.type_id,
        "offset": member.offset,
        "row_major": member.row_major,
        "stride": member.stride,
        "size": module.get_member_size(member),
    }


def type_to_dict(module: Module, ty: t.Type) -> Dict[str, Any]:
    kind = _SIMPLE_KINDS.get(type(ty))
    if kind is not None:
        return {_KIND: kind}
    if isinstance(ty, t.Image2D):
        return {
            _KIND: "image2d",
            "depth": ty.depth,
            "sampled": ty.sampled,
            "format": ty.format,
        }
    if isinstance(ty, t.SampledImage):
        return {_KIND: "sampled_image", "image_type_id": ty.image_type_id}
    if isinstance(ty, t.Array):
        return {
            _KIND: "array",
            "element_type_id": ty.element_type_id,
            "length": ty.length,
        }
    if isinstance(ty, t.Struct):
        return {
            _KIND: "struct",
            "name": ty.name,
            "members": [_member_to_dict(module, m) for m in ty.elements],
        }
    if isinstance(ty, t.Pointer):
        return {
            _KIND: "pointer",
            "storage_class": ty.storage_class.value,
            "pointed_type_id": ty.pointed_type_id,
        }
    raise TypeError(f"Unsupported type: {ty!r}")


def _var_to_dict(module: Module, var: t.Variable) -> Dict[str, Any]:
    data: Dict[str, Any] = {"name": var.name, "type_id": var.type_id}
    if isinstance(var, t.UniformVariable):
        data["set"] = var.set
        data["binding"] = var.binding
    elif isinstance(var, t.LocationVariable):
        data["location"] = var.location
    data["size"] = module.get_var_size(var)
    return data


def entry_point_to_dict(module: Module, entry: t.EntryPoint) -> Dict[str, Any]:
    return {
        "name": entry.name,
        "execution_model": entry.execution_model.value,
        "uniforms": [_var_to_dict(module, v) for v in entry.uniforms],
        "push_constants": [_var_to_dict(module, v) for v in entry.push_constants],
        "inputs": [_var_to_dict(module, v) for v in entry.inputs],
        "outputs": [_var_to_dict(module, v) for v in entry.outputs],
    }


def module_to_dict(module: Module, entry: Optional[str] = None) -> Dict[str, Any]:
    entries = [
        e for e in module.get_entry_points() if entry is None or e.name == entry
    ]
    return {
        # JSON object keys are strings; ids stay decimal
        "types": {
            str(type_id): type_to_dict(module, ty)
            for type_id, ty in sorted(module.types.items())
        },
        "entry_points": [entry_point_to_dict(module, e) for e in entries],
    }


def to_json(
    module: Module, indent: Optional[int] = 2, entry: Optional[str] = None
) -> str:
    return json.dumps(module_to_dict(module, entry=entry), indent=indent)


__all__ = ["type_to_dict", "entry_point_to_dict", "module_to_dict", "to_json"]
