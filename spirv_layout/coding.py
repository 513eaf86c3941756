# based on https://github.com/whitequark/binja-avnera/blob/main/mc/coding.py
"""Word-level decoding and encoding helpers used by multiple modules."""

from typing import List, Sequence, Union

from .constants import MAGIC_NUMBER, WORD_COUNT_SHIFT, WORD_MASK
from .errors import InvalidOp


class BufferTooShort(InvalidOp):
    """Raised when attempting to read past the end of the word buffer."""


class Decoder:
    """Cursor over a sequence of 32-bit words."""

    def __init__(self, words: Sequence[int]) -> None:
        self.words, self.pos = words, 0

    def get_pos(self) -> int:
        return self.pos

    def remaining(self) -> int:
        return len(self.words) - self.pos

    def at_end(self) -> bool:
        return self.pos >= len(self.words)

    def peek(self, offset: int = 0) -> int:
        if self.remaining() <= offset:
            raise BufferTooShort(
                f"word {self.pos + offset} is past the end of the stream"
            )
        return self.words[self.pos + offset]

    def word(self) -> int:
        value = self.peek(0)
        self.pos += 1
        return value

    def take(self, count: int) -> Sequence[int]:
        if count < 0 or self.remaining() < count:
            raise BufferTooShort(
                f"need {count} words at offset {self.pos}, "
                f"have {self.remaining()} remaining"
            )
        chunk = self.words[self.pos : self.pos + count]
        self.pos += count
        return chunk


Operand = Union[int, str]


def string_words(text: str) -> List[int]:
    """Pack ``text`` as a nul-terminated, word-padded literal string."""
    raw = text.encode("utf-8") + b"\x00"
    raw += b"\x00" * (-len(raw) % 4)
    return [
        int.from_bytes(raw[i : i + 4], "little") for i in range(0, len(raw), 4)
    ]


class Encoder:
    """Assembles SPIR-V words; used to build modules for tests and tools."""

    def __init__(self) -> None:
        self.words: List[int] = []

    def word(self, value: int) -> None:
        if not 0 <= value <= WORD_MASK:
            raise ValueError(f"word out of range: {value:#x}")
        self.words.append(int(value))

    def header(
        self,
        bound: int = 0x100,
        version: int = 0x00010000,
        generator: int = 0,
        magic: int = MAGIC_NUMBER,
    ) -> None:
        for value in (magic, version, generator, bound, 0):
            self.word(value)

    def instruction(self, opcode: int, *operands: Operand) -> None:
        body: List[int] = []
        for operand in operands:
            if isinstance(operand, str):
                body.extend(string_words(operand))
            else:
                body.append(operand)
        self.word(((len(body) + 1) << WORD_COUNT_SHIFT) | opcode)
        for value in body:
            self.word(value)
