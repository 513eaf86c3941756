from __future__ import annotations

import itertools
import os

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from spirv_layout import Module, SpirvError
from spirv_layout.config import LayoutConfig

from .strategies import (
    deep_chain_module,
    instruction_streams,
    mutated_modules,
    seed_module,
    words,
)

FAST_MAX_EXAMPLES = int(os.getenv("SPIRV_LAYOUT_PROP_EXAMPLES", "300"))
NIGHTLY_MAX_EXAMPLES = int(os.getenv("SPIRV_LAYOUT_PROP_NIGHTLY_EXAMPLES", "20000"))

_CONFIG = LayoutConfig(trace=False)


def _reflect(data) -> None:
    """Either a complete module or one of the defined errors, nothing else."""
    try:
        module = Module.from_words(data, config=_CONFIG)
    except SpirvError:
        return
    for entry in module.get_entry_points():
        for var in (
            *entry.uniforms,
            *entry.push_constants,
            *entry.inputs,
            *entry.outputs,
        ):
            module.get_var_size(var)
    # sizing every type of a deep chain is quadratic
    for type_id in itertools.islice(module.types, 256):
        module.get_type_size(type_id, 16)


def test_seed_module_reflects() -> None:
    module = Module.from_words(seed_module(), config=_CONFIG)
    [entry] = module.get_entry_points()
    assert [u.binding for u in entry.uniforms] == [1]
    assert [i.location for i in entry.inputs] == [0]
    assert module.get_var_size(entry.uniforms[0]) == 64 + 16
    assert module.get_var_size(entry.push_constants[0]) == 80


def test_deep_chain_seed_reflects() -> None:
    module = Module.from_words(deep_chain_module(), config=_CONFIG)
    [entry] = module.get_entry_points()
    assert module.get_var_size(entry.uniforms[0]) == 4 * 1200 + 4


def test_every_single_bit_flip_terminates() -> None:
    seed = seed_module()
    for index in range(len(seed)):
        for bit in range(32):
            mutated = list(seed)
            mutated[index] ^= 1 << bit
            _reflect(mutated)


def test_every_truncation_terminates() -> None:
    seed = seed_module()
    for cut in range(len(seed) + 1):
        _reflect(seed[:cut])


@given(data=st.lists(words, max_size=64))
@settings(max_examples=FAST_MAX_EXAMPLES, deadline=None)
def test_arbitrary_words(data) -> None:
    _reflect(data)


@given(data=instruction_streams())
@settings(
    max_examples=FAST_MAX_EXAMPLES,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
def test_arbitrary_instruction_streams(data) -> None:
    _reflect(data)


@given(data=mutated_modules())
@settings(max_examples=FAST_MAX_EXAMPLES, deadline=None)
def test_mutated_modules(data) -> None:
    _reflect(data)


@pytest.mark.nightly
@given(data=mutated_modules() | instruction_streams())
@settings(
    max_examples=NIGHTLY_MAX_EXAMPLES,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
def test_robustness_nightly(data) -> None:
    if not os.getenv("SPIRV_LAYOUT_PROP_NIGHTLY"):
        pytest.skip(
            "Nightly fuzzing disabled (set SPIRV_LAYOUT_PROP_NIGHTLY=1 to enable)"
        )
    _reflect(data)
