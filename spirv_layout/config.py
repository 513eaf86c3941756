from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping, Optional

_FALSE_WORDS = frozenset({"0", "false", "off", ""})


def _flag(environ: Mapping[str, str], name: str) -> bool:
    value = environ.get(name)
    return value is not None and value.strip().lower() not in _FALSE_WORDS


@dataclass(frozen=True)
class LayoutConfig:
    trace: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> LayoutConfig:
    """Read ``SPIRV_LAYOUT_*`` flags from ``environ`` (default: ``os.environ``)."""
    env = os.environ if environ is None else environ
    return LayoutConfig(trace=_flag(env, "SPIRV_LAYOUT_TRACE"))


__all__ = ["LayoutConfig", "load_config"]
