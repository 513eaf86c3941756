"""
Typed decoding of SPIR-V instruction words.

Only the instructions that matter for reflection are decoded into their own
shapes; every other opcode is framed, validated and kept as ``UnknownOp``.
"""

from . import ops  # noqa: F401
from .decode_map import (  # noqa: F401
    check_header,
    decode_instruction,
    decode_module,
    decode_opcode,
)
from .reader import OperandCtx  # noqa: F401

__all__ = [
    "ops",
    "check_header",
    "decode_instruction",
    "decode_module",
    "decode_opcode",
    "OperandCtx",
]
