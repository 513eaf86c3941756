import pytest

from spirv_layout.coding import string_words
from spirv_layout.decoding.reader import OperandCtx
from spirv_layout.errors import InvalidOp, StringFormat


def test_read_u32_and_id() -> None:
    ctx = OperandCtx(opcode=0, data=[7, 9])
    assert ctx.read_u32() == 7
    assert ctx.read_id() == 9
    assert ctx.remaining() == 0
    with pytest.raises(InvalidOp):
        ctx.read_u32()


def test_read_string_consumes_terminator_word() -> None:
    ctx = OperandCtx(opcode=5, data=string_words("main") + [42])
    assert ctx.read_string() == "main"
    assert ctx.words_consumed() == 2
    assert ctx.read_u32() == 42


def test_read_string_across_words() -> None:
    ctx = OperandCtx(opcode=5, data=string_words("u_transform_block"))
    assert ctx.read_string() == "u_transform_block"
    assert ctx.remaining() == 0


def test_read_string_utf8() -> None:
    ctx = OperandCtx(opcode=5, data=string_words("größe"))
    assert ctx.read_string() == "größe"


def test_read_string_without_terminator_is_invalid_op() -> None:
    ctx = OperandCtx(opcode=5, data=[0x61616161, 0x62626262])
    with pytest.raises(InvalidOp):
        ctx.read_string()


def test_read_string_empty_slice_is_invalid_op() -> None:
    with pytest.raises(InvalidOp):
        OperandCtx(opcode=5, data=[]).read_string()


def test_read_string_invalid_utf8() -> None:
    # 0xFF can never start a UTF-8 sequence
    ctx = OperandCtx(opcode=5, data=[0x000000FF])
    with pytest.raises(StringFormat) as info:
        ctx.read_string()
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_read_optional() -> None:
    ctx = OperandCtx(opcode=59, data=[3])
    assert ctx.read_optional(ctx.read_id) == 3
    assert ctx.read_optional(ctx.read_id) is None


def test_read_list_is_greedy() -> None:
    ctx = OperandCtx(opcode=30, data=[1, 2, 3])
    assert ctx.read_list(ctx.read_id) == [1, 2, 3]
    assert ctx.read_list(ctx.read_id) == []


def test_read_list_propagates_errors() -> None:
    ctx = OperandCtx(opcode=15, data=[0x61616161])
    with pytest.raises(InvalidOp):
        ctx.read_list(ctx.read_string)
