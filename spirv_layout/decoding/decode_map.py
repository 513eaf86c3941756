from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence

from ..coding import Decoder
from ..constants import (
    HEADER_WORDS,
    MAGIC_NUMBER,
    MIN_MODULE_WORDS,
    OPCODE_MASK,
    WORD_COUNT_SHIFT,
    Opcode,
)
from ..errors import InvalidHeader, InvalidOp
from . import ops
from .enums import (
    read_decoration,
    read_dim,
    read_execution_model,
    read_storage_class,
)
from .reader import OperandCtx

logger = logging.getLogger(__name__)

DecoderFunc = Callable[[OperandCtx], ops.Op]


def _dec_name(ctx: OperandCtx) -> ops.Op:
    return ops.OpName(target=ctx.read_id(), name=ctx.read_string())


def _dec_member_name(ctx: OperandCtx) -> ops.Op:
    return ops.OpMemberName(
        target=ctx.read_id(),
        member_index=ctx.read_u32(),
        name=ctx.read_string(),
    )


def _dec_entry_point(ctx: OperandCtx) -> ops.Op:
    return ops.OpEntryPoint(
        execution_model=read_execution_model(ctx),
        func=ctx.read_id(),
        name=ctx.read_string(),
        interface=tuple(ctx.read_list(ctx.read_id)),
    )


def _dec_decorate(ctx: OperandCtx) -> ops.Op:
    return ops.OpDecorate(target=ctx.read_id(), decoration=read_decoration(ctx))


def _dec_member_decorate(ctx: OperandCtx) -> ops.Op:
    return ops.OpMemberDecorate(
        target=ctx.read_id(),
        member_index=ctx.read_u32(),
        decoration=read_decoration(ctx),
    )


def _dec_type_void(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeVoid(result=ctx.read_id())


def _dec_type_bool(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeBool(result=ctx.read_id())


def _dec_type_int(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeInt(
        result=ctx.read_id(), width=ctx.read_u32(), signedness=ctx.read_u32()
    )


def _dec_type_float(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeFloat(result=ctx.read_id(), width=ctx.read_u32())


def _dec_type_vector(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeVector(
        result=ctx.read_id(),
        component_type=ctx.read_id(),
        component_count=ctx.read_u32(),
    )


def _dec_type_matrix(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeMatrix(
        result=ctx.read_id(),
        column_type=ctx.read_id(),
        column_count=ctx.read_u32(),
    )


def _dec_type_image(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeImage(
        result=ctx.read_id(),
        sampled_type=ctx.read_id(),
        dim=read_dim(ctx),
        depth=ctx.read_u32(),
        arrayed=ctx.read_u32(),
        ms=ctx.read_u32(),
        sampled=ctx.read_u32(),
        format=ctx.read_u32(),
        access=ctx.read_optional(ctx.read_u32),
    )


def _dec_type_sampler(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeSampler(result=ctx.read_id())


def _dec_type_sampled_image(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeSampledImage(result=ctx.read_id(), image_type=ctx.read_id())


def _dec_type_array(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeArray(
        result=ctx.read_id(), element_type=ctx.read_id(), length=ctx.read_id()
    )


def _dec_type_runtime_array(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeRuntimeArray(result=ctx.read_id(), element_type=ctx.read_id())


def _dec_type_struct(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypeStruct(
        result=ctx.read_id(), member_types=tuple(ctx.read_list(ctx.read_id))
    )


def _dec_type_pointer(ctx: OperandCtx) -> ops.Op:
    return ops.OpTypePointer(
        result=ctx.read_id(),
        storage_class=read_storage_class(ctx),
        pointed_type=ctx.read_id(),
    )


def _dec_constant(ctx: OperandCtx) -> ops.Op:
    return ops.OpConstant(
        result_type=ctx.read_id(),
        result=ctx.read_id(),
        value=tuple(ctx.read_list(ctx.read_u32)),
    )


def _dec_variable(ctx: OperandCtx) -> ops.Op:
    return ops.OpVariable(
        result_type=ctx.read_id(),
        result=ctx.read_id(),
        storage_class=read_storage_class(ctx),
        initializer=ctx.read_optional(ctx.read_id),
    )


DECODERS: Dict[int, DecoderFunc] = {
    Opcode.OpName: _dec_name,
    Opcode.OpMemberName: _dec_member_name,
    Opcode.OpEntryPoint: _dec_entry_point,
    Opcode.OpDecorate: _dec_decorate,
    Opcode.OpMemberDecorate: _dec_member_decorate,
    Opcode.OpTypeVoid: _dec_type_void,
    Opcode.OpTypeBool: _dec_type_bool,
    Opcode.OpTypeInt: _dec_type_int,
    Opcode.OpTypeFloat: _dec_type_float,
    Opcode.OpTypeVector: _dec_type_vector,
    Opcode.OpTypeMatrix: _dec_type_matrix,
    Opcode.OpTypeImage: _dec_type_image,
    Opcode.OpTypeSampler: _dec_type_sampler,
    Opcode.OpTypeSampledImage: _dec_type_sampled_image,
    Opcode.OpTypeArray: _dec_type_array,
    Opcode.OpTypeRuntimeArray: _dec_type_runtime_array,
    Opcode.OpTypeStruct: _dec_type_struct,
    Opcode.OpTypePointer: _dec_type_pointer,
    Opcode.OpConstant: _dec_constant,
    Opcode.OpVariable: _dec_variable,
}


def decode_opcode(opcode: int, ctx: OperandCtx) -> ops.Op:
    decoder = DECODERS.get(opcode)
    if decoder is None:
        return ops.UnknownOp(opcode=opcode, word_count=ctx.remaining() + 1)
    return decoder(ctx)


def decode_instruction(stream: Decoder) -> ops.Op:
    """Frame and decode the instruction at the cursor, then advance past it."""
    start = stream.get_pos()
    first = stream.peek(0)
    opcode = first & OPCODE_MASK
    word_count = first >> WORD_COUNT_SHIFT
    if word_count == 0 or word_count > stream.remaining():
        raise InvalidOp(
            f"opcode {opcode} at word {start}: word count {word_count} "
            f"does not fit the {stream.remaining()} remaining words"
        )
    words = stream.take(word_count)
    return decode_opcode(opcode, OperandCtx(opcode=opcode, data=words[1:]))


def check_header(words: Sequence[int]) -> None:
    if len(words) < MIN_MODULE_WORDS or words[0] != MAGIC_NUMBER:
        raise InvalidHeader(
            f"expected at least {MIN_MODULE_WORDS} words starting with "
            f"{MAGIC_NUMBER:#010x}"
        )


def decode_module(words: Sequence[int], *, trace: bool = False) -> List[ops.Op]:
    """Validate the header and decode every instruction after it."""
    check_header(words)
    stream = Decoder(words)
    stream.take(HEADER_WORDS)

    decoded: List[ops.Op] = []
    while not stream.at_end():
        offset = stream.get_pos()
        op = decode_instruction(stream)
        if trace:
            logger.debug("word %d: %r", offset, op)
        decoded.append(op)

    logger.debug("decoded %d instructions", len(decoded))
    return decoded
