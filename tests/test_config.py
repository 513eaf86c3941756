import pytest

from spirv_layout.config import LayoutConfig, load_config


@pytest.mark.parametrize("value", ["1", "true", "yes", " ON "])
def test_trace_enabled(value) -> None:
    assert load_config({"SPIRV_LAYOUT_TRACE": value}) == LayoutConfig(trace=True)


@pytest.mark.parametrize("value", ["0", "false", "OFF", "", "  "])
def test_trace_disabled(value) -> None:
    assert load_config({"SPIRV_LAYOUT_TRACE": value}).trace is False


def test_trace_unset() -> None:
    assert load_config({}).trace is False


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("SPIRV_LAYOUT_TRACE", "1")
    assert load_config().trace is True
    monkeypatch.delenv("SPIRV_LAYOUT_TRACE")
    assert load_config().trace is False
