from __future__ import annotations
import os
from typing import Iterable

ARITHMETIC_MODES = ("standard", "legacy")
VM_BACKENDS = ("py", "cy")

_TRUE = {"1", "true", "yes", "on"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE


def choice_from_env(var: str, choices: Iterable[str], default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    value = raw.strip().lower()
    choices = tuple(choices)
    if value not in choices:
        raise ValueError(f"{var} must be one of {', '.join(choices)}; got {raw!r}")
    return value


def get_arithmetic_mode() -> str:
    return choice_from_env('STACKVM_ARITHMETIC', ARITHMETIC_MODES, 'standard')


def get_vm_backend() -> str:
    return 'cy' if flag_from_env('STACKVM_CY_VM') else 'py'


def disasm_enabled() -> bool:
    return flag_from_env('STACKVM_DISASM')


def trace_enabled() -> bool:
    return flag_from_env('STACKVM_TRACE')
