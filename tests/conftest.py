"""Shared pytest fixtures for the reflection tests."""

from __future__ import annotations

from typing import List

import pytest

from spirv_layout.coding import Encoder
from spirv_layout.config import LayoutConfig
from spirv_layout.constants import Opcode
from spirv_layout.decoding.enums import DecorationKind, ExecutionModel, StorageClass


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "nightly: long-running property campaigns")


@pytest.fixture
def asm() -> Encoder:
    """An encoder with a valid module header already written."""
    encoder = Encoder()
    encoder.header()
    return encoder


@pytest.fixture
def config() -> LayoutConfig:
    return LayoutConfig(trace=False)


@pytest.fixture
def fragment_output_words() -> List[int]:
    """float -> vec4 -> Output pointer -> variable %5, used by "main"."""
    encoder = Encoder()
    encoder.header()
    encoder.instruction(Opcode.OpEntryPoint, ExecutionModel.FRAGMENT, 1, "main", 5)
    encoder.instruction(Opcode.OpDecorate, 5, DecorationKind.LOCATION, 0)
    encoder.instruction(Opcode.OpTypeFloat, 2, 32)
    encoder.instruction(Opcode.OpTypeVector, 3, 2, 4)
    encoder.instruction(Opcode.OpTypePointer, 4, StorageClass.OUTPUT, 3)
    encoder.instruction(Opcode.OpVariable, 4, 5, StorageClass.OUTPUT)
    return encoder.words
