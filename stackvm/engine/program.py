from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List

from stackvm.value import from_python

from .instructions import Instruction, Jump, JumpIfFalse, LoadConst


@dataclass
class Program:
    """An instruction sequence under construction.

    Jump targets are absolute instruction indices. Forward jumps are emitted
    with a placeholder target of 0 and fixed up with ``patch`` once the
    destination is known.
    """

    instructions: List[Instruction] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def here(self) -> int:
        """Index the next emitted instruction will get."""
        return len(self.instructions)

    # --- Emit helpers ---
    def emit(self, instr: Instruction) -> int:
        if not isinstance(instr, Instruction):
            raise TypeError(f"Cannot emit {type(instr).__name__}")
        self.instructions.append(instr)
        return len(self.instructions) - 1

    def emit_const(self, value: Any) -> int:
        return self.emit(LoadConst(from_python(value)))

    def emit_jump(self, kind: type = Jump) -> int:
        if kind not in (Jump, JumpIfFalse):
            raise TypeError(f"{kind.__name__} is not a jump instruction")
        return self.emit(kind(0))

    def patch(self, index: int, target: int) -> None:
        instr = self.instructions[index]
        if not isinstance(instr, (Jump, JumpIfFalse)):
            raise TypeError(f"instruction {index} is {type(instr).__name__}, not a jump")
        self.instructions[index] = type(instr)(target)
