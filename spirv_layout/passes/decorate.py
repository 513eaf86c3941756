"""Second sweep: names and decorations.

Unlike the collection pass this one does not depend on instruction order; it
only updates entries the first pass already created. Targets that are not a
variable or struct, member indices out of range, and decorations that do not
matter for reflection are ignored.
"""

from __future__ import annotations

import dataclasses
from typing import Sequence

from .. import model as t
from ..decoding import enums as wire
from ..decoding import ops
from .collect import Collection


def _set_struct_name(col: Collection, target: int, name: str) -> None:
    struct = col.types.get(target)
    if isinstance(struct, t.Struct):
        col.types[target] = dataclasses.replace(struct, name=name)


def _update_member(col: Collection, target: int, index: int, **changes) -> None:
    members = col.members.get(target)
    if members is None or index >= len(members):
        return
    members[index] = dataclasses.replace(members[index], **changes)


def _freeze_members(col: Collection) -> None:
    for struct_id, members in col.members.items():
        struct = col.types[struct_id]
        col.types[struct_id] = dataclasses.replace(struct, elements=tuple(members))
    col.members.clear()


def _apply_name(op: ops.OpName, col: Collection) -> None:
    var = col.variables.get(op.target)
    if var is not None:
        var.name = op.name
    else:
        _set_struct_name(col, op.target, op.name)


def _apply_decoration(op: ops.OpDecorate, col: Collection) -> None:
    var = col.variables.get(op.target)
    if var is None:
        return
    decoration = op.decoration
    if isinstance(decoration, wire.Binding):
        var.binding = decoration.binding
    elif isinstance(decoration, wire.DescriptorSet):
        var.set = decoration.set
    elif isinstance(decoration, wire.Location):
        var.location = decoration.location


def _apply_member_decoration(op: ops.OpMemberDecorate, col: Collection) -> None:
    decoration = op.decoration
    if isinstance(decoration, wire.RowMajor):
        _update_member(col, op.target, op.member_index, row_major=True)
    elif isinstance(decoration, wire.ColMajor):
        _update_member(col, op.target, op.member_index, row_major=False)
    elif isinstance(decoration, wire.MatrixStride):
        _update_member(col, op.target, op.member_index, stride=decoration.stride)
    elif isinstance(decoration, wire.Offset):
        _update_member(col, op.target, op.member_index, offset=decoration.offset)


def collect_decorations_and_names(decoded: Sequence[ops.Op], col: Collection) -> None:
    for op in decoded:
        if isinstance(op, ops.OpName):
            _apply_name(op, col)
        elif isinstance(op, ops.OpMemberName):
            _update_member(col, op.target, op.member_index, name=op.name)
        elif isinstance(op, ops.OpDecorate):
            _apply_decoration(op, col)
        elif isinstance(op, ops.OpMemberDecorate):
            _apply_member_decoration(op, col)

    _freeze_members(col)
