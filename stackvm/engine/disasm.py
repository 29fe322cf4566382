from __future__ import annotations
from typing import Iterable

from .instructions import Instruction, Jump, JumpIfFalse, LoadConst, Binary


def disassemble(instructions: Iterable[Instruction]) -> str:
    out = []
    for i, instr in enumerate(instructions):
        try:
            opname = instr.opcode.name
        except AttributeError:
            out.append(f"{i:04d}: ?? {instr!r}")
            continue
        line = f"{i:04d}: {opname}"
        if isinstance(instr, (Jump, JumpIfFalse)):
            line += f" -> {instr.target}"
        elif isinstance(instr, LoadConst):
            line += f" {instr.value.debug()}"
        elif isinstance(instr, Binary):
            line += f" {instr.op.name}"
        elif instr.operand is not None:
            line += f" {instr.operand}"
        out.append(line)
    return "\n".join(out)
