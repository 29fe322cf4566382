from __future__ import annotations

# Public surface for the engine package
from .opcodes import Opcode, BinaryOp
from .instructions import (
    Instruction,
    Jump,
    JumpIfFalse,
    Store,
    Load,
    BuildList,
    Binary,
    LoadConst,
    Print,
)
from .frame import Frame, CallStack
from .program import Program
from .disasm import disassemble
from .vm import Vm, VmState, run_program

__all__ = [
    "Opcode",
    "BinaryOp",
    "Instruction",
    "Jump",
    "JumpIfFalse",
    "Store",
    "Load",
    "BuildList",
    "Binary",
    "LoadConst",
    "Print",
    "Frame",
    "CallStack",
    "Program",
    "disassemble",
    "Vm",
    "VmState",
    "run_program",
]
