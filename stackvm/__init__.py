# A small stack-based bytecode virtual machine.
#
# Values are immutable dataclasses (Int, Float, Str, Bool, List); instructions
# are frozen dataclasses tagged with an Opcode; Vm runs a flat instruction
# list against a call stack of frames.

from stackvm.value import Int, Float, Str, Bool, List, Value, from_python, to_python
from stackvm.errors import (
    VmError,
    NotInScope,
    MismatchedType,
    EmptyStack,
    UnsupportedInstruction,
    DivisionByZero,
    IntegerOverflow,
)
from stackvm.engine import (
    Opcode,
    BinaryOp,
    Instruction,
    Jump,
    JumpIfFalse,
    Store,
    Load,
    BuildList,
    Binary,
    LoadConst,
    Print,
    Frame,
    CallStack,
    Program,
    disassemble,
    Vm,
    VmState,
    run_program,
)

__version__ = "0.1.0"
