import importlib

import pytest

# Every test runs twice:
# 1) with the pure-Python dispatch loop ["py"]
# 2) with the Cython dispatch loop from stackvm.engine.vm_cy (if it was built) ["cy"]
# Tests construct Vm() directly; an autouse fixture sets STACKVM_CY_VM so the
# default backend follows the parametrization without touching individual tests.


def _cy_available() -> bool:
    try:
        importlib.import_module("stackvm.engine.vm_cy")
    except ImportError:
        return False
    return True


@pytest.fixture(params=["py", "cy"])
def backend_mode(request):
    if request.param == "cy" and not _cy_available():
        pytest.skip("Cython VM extension not built")
    return request.param


@pytest.fixture(autouse=True)
def _force_vm_backend(backend_mode, monkeypatch):
    monkeypatch.setenv("STACKVM_CY_VM", "1" if backend_mode == "cy" else "0")
    # Keep the remaining knobs at their defaults regardless of the caller's shell
    for var in ("STACKVM_ARITHMETIC", "STACKVM_DISASM", "STACKVM_TRACE"):
        monkeypatch.delenv(var, raising=False)
