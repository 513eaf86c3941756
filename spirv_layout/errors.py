"""Exceptions raised while reflecting a SPIR-V module.

Every failure is terminal for the whole parse: ``Module.from_words`` either
returns a complete module or raises one of the classes below.
"""


class SpirvError(Exception):
    """Base class for all reflection failures."""


class InvalidHeader(SpirvError):
    """The buffer is too short or does not start with the SPIR-V magic."""


class InvalidOp(SpirvError):
    """An instruction is malformed (bad word count, missing operand, ...)."""


class InvalidId(SpirvError):
    """A type or constant id was referenced before it was declared."""


class StringFormat(SpirvError):
    """A literal string operand is not valid UTF-8."""


class Other(SpirvError):
    """Semantically fatal input that is not a framing error."""


__all__ = [
    "SpirvError",
    "InvalidHeader",
    "InvalidOp",
    "InvalidId",
    "StringFormat",
    "Other",
]
