import logging
import io

import pytest

from stackvm import config, Int, LoadConst, Print, Vm


@pytest.mark.parametrize("raw,expected", [("1", True), ("true", True), ("On", True), ("0", False), ("", False), ("no", False)])
def test_flag_from_env(monkeypatch, raw, expected):
    monkeypatch.setenv("STACKVM_TEST_FLAG", raw)
    assert config.flag_from_env("STACKVM_TEST_FLAG") is expected


def test_flag_default_when_unset(monkeypatch):
    monkeypatch.delenv("STACKVM_TEST_FLAG", raising=False)
    assert config.flag_from_env("STACKVM_TEST_FLAG", default=True) is True


def test_arithmetic_mode_defaults_to_standard():
    assert config.get_arithmetic_mode() == "standard"


def test_bad_arithmetic_mode_is_rejected(monkeypatch):
    monkeypatch.setenv("STACKVM_ARITHMETIC", "sideways")
    with pytest.raises(ValueError):
        config.get_arithmetic_mode()


def test_backend_follows_environment(backend_mode):
    assert config.get_vm_backend() == backend_mode
    assert Vm().backend == backend_mode


def test_trace_logs_each_instruction(monkeypatch, caplog):
    monkeypatch.setenv("STACKVM_TRACE", "1")
    vm = Vm(io.StringIO())
    assert vm.trace is True
    with caplog.at_level(logging.DEBUG, logger="stackvm.engine.vm"):
        vm.run([LoadConst(Int(1)), Print()])
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("0000 LoadConst") for m in messages)
    assert any(m.startswith("0001 Print") for m in messages)
    assert any("halted" in m for m in messages)
