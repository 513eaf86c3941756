from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TypeVar

from ..errors import InvalidOp, StringFormat
from .ops import Id

T = TypeVar("T")


@dataclass
class OperandCtx:
    """
    Sequential reader over the operand words of one instruction.

    `data` is already limited to the instruction's own operand slice, so every
    read is bounded by the instruction's declared word count.
    """

    opcode: int
    data: Sequence[int]
    idx: int = 0

    def _require(self, count: int) -> None:
        if self.idx + count > len(self.data):
            raise InvalidOp(
                f"opcode {self.opcode}: need {count} operand words, "
                f"have {len(self.data) - self.idx} remaining"
            )

    def remaining(self) -> int:
        return len(self.data) - self.idx

    def words_consumed(self) -> int:
        return self.idx

    def read_u32(self) -> int:
        self._require(1)
        value = self.data[self.idx]
        self.idx += 1
        return value

    def read_id(self) -> Id:
        return Id(self.read_u32())

    def read_string(self) -> str:
        raw = bytearray()
        for pos in range(self.idx, len(self.data)):
            chunk = self.data[pos].to_bytes(4, "little")
            nul = chunk.find(0)
            if nul < 0:
                raw += chunk
                continue
            raw += chunk[:nul]
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise StringFormat(
                    f"opcode {self.opcode}: literal string is not valid UTF-8"
                ) from exc
            self.idx = pos + 1
            return text
        raise InvalidOp(f"opcode {self.opcode}: unterminated literal string")

    def read_optional(self, read: Callable[[], T]) -> Optional[T]:
        if self.remaining() == 0:
            return None
        return read()

    def read_list(self, read: Callable[[], T]) -> List[T]:
        items: List[T] = []
        while self.remaining() > 0:
            items.append(read())
        return items
