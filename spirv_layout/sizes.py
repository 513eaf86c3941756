"""Byte sizes of reflected types.

SPIR-V has no size decoration, so a struct's size is derived from the member
with the largest offset plus that member's own size. Matrix sizes depend on
the MatrixStride of the struct member holding them; without a stride the
size is unknown.
"""

from __future__ import annotations

from typing import Mapping, Optional, Set

from . import model as t

_SCALAR_SIZES = {
    t.Int32: 4,
    t.UInt32: 4,
    t.Float32: 4,
    t.Vec2: 8,
    t.Vec3: 12,
    t.Vec4: 16,
}


def last_member(struct: t.Struct) -> Optional[t.StructMember]:
    """Member with the highest known offset; ties go to the later one."""
    best: Optional[t.StructMember] = None
    for member in struct.elements:
        if member.offset is None:
            continue
        if best is None or member.offset >= best.offset:  # type: ignore[operator]
            best = member
    return best


def _leaf_size(ty: t.Type, stride: Optional[int]) -> Optional[int]:
    size = _SCALAR_SIZES.get(type(ty))
    if size is not None:
        return size
    if stride is None:
        return None
    if isinstance(ty, t.Mat3):
        # two columns at `stride` plus one trailing vec3
        return stride * 2 + 12
    if isinstance(ty, t.Mat4):
        return stride * 3 + 16
    return None


def type_size(
    types: Mapping[int, t.Type],
    type_id: int,
    stride: Optional[int] = None,
) -> Optional[int]:
    """Byte size of ``type_id``, or None when it cannot be derived.

    A struct only ever descends into its last member, so nested structs are
    followed as a chain of offsets rather than by recursion.
    """
    offset = 0
    visited: Set[int] = set()
    while True:
        ty = types.get(type_id)
        if ty is None:
            return None
        if not isinstance(ty, t.Struct):
            size = _leaf_size(ty, stride)
            return None if size is None else offset + size
        if type_id in visited:
            return None
        visited.add(type_id)
        member = last_member(ty)
        if member is None or member.offset is None:
            return None
        offset += member.offset
        type_id, stride = member.type_id, member.stride
