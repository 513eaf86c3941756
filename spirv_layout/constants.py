"""Shared SPIR-V binary constants.

Only the opcodes needed for reflection are listed; everything else in the
instruction stream is skipped as an opaque record.
"""

from enum import IntEnum

# First word of every SPIR-V module, in host word order.
MAGIC_NUMBER = 0x07230203

# magic, version, generator, id bound, schema
HEADER_WORDS = 5

# A module needs the header plus at least one instruction word.
MIN_MODULE_WORDS = 6

WORD_MASK = 0xFFFFFFFF

OPCODE_MASK = 0xFFFF
WORD_COUNT_SHIFT = 16


class Opcode(IntEnum):
    OpName = 5
    OpMemberName = 6
    OpEntryPoint = 15
    OpTypeVoid = 19
    OpTypeBool = 20
    OpTypeInt = 21
    OpTypeFloat = 22
    OpTypeVector = 23
    OpTypeMatrix = 24
    OpTypeImage = 25
    OpTypeSampler = 26
    OpTypeSampledImage = 27
    OpTypeArray = 28
    OpTypeRuntimeArray = 29
    OpTypeStruct = 30
    OpTypePointer = 32
    OpConstant = 43
    OpVariable = 59
    OpDecorate = 71
    OpMemberDecorate = 72


# Default matrix stride of a struct member until a MatrixStride decoration
# says otherwise.
DEFAULT_MATRIX_STRIDE = 16
