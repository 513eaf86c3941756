"""Turning ``.spv`` files into the word arrays ``Module.from_words`` expects."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .config import LayoutConfig
from .constants import MAGIC_NUMBER
from .errors import InvalidHeader
from .module import Module

logger = logging.getLogger(__name__)


def words_from_bytes(data: bytes) -> np.ndarray:
    """Reinterpret ``data`` as 32-bit words in the module's own byte order.

    The magic number tells the byte order; modules written by a big-endian
    producer are byte-swapped so the first word reads ``0x07230203``.
    """
    if len(data) % 4:
        raise InvalidHeader(f"module size {len(data)} is not a multiple of 4 bytes")
    words = np.frombuffer(data, dtype="<u4")
    if words.size and words[0] != MAGIC_NUMBER:
        swapped = words.byteswap()
        if swapped[0] == MAGIC_NUMBER:
            logger.debug("module is big-endian, swapping %d words", words.size)
            return swapped
    return words


def load_module(
    path: Union[str, Path], config: Optional[LayoutConfig] = None
) -> Module:
    data = Path(path).read_bytes()
    return Module.from_words(words_from_bytes(data).tolist(), config=config)


__all__ = ["words_from_bytes", "load_module"]
