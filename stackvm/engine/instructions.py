from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from stackvm.value import Value, is_value

from .opcodes import Opcode, BinaryOp


def _check_index(kind: str, v) -> None:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"{kind} operand must be an int, got {type(v).__name__}")
    if v < 0:
        raise ValueError(f"{kind} operand must be non-negative, got {v}")


def _check_name(kind: str, name) -> None:
    if not isinstance(name, str) or not name:
        raise TypeError(f"{kind} operand must be a non-empty str, got {name!r}")


@dataclass(frozen=True)
class Instruction:
    """Base class for everything the engine can dispatch."""

    opcode: ClassVar[Opcode]

    @property
    def operand(self):
        return None


@dataclass(frozen=True)
class Jump(Instruction):
    target: int
    opcode: ClassVar[Opcode] = Opcode.JUMP

    def __post_init__(self):
        _check_index("Jump", self.target)

    @property
    def operand(self):
        return self.target


@dataclass(frozen=True)
class JumpIfFalse(Instruction):
    target: int
    opcode: ClassVar[Opcode] = Opcode.JUMP_IF_FALSE

    def __post_init__(self):
        _check_index("JumpIfFalse", self.target)

    @property
    def operand(self):
        return self.target


@dataclass(frozen=True)
class Store(Instruction):
    name: str
    opcode: ClassVar[Opcode] = Opcode.STORE

    def __post_init__(self):
        _check_name("Store", self.name)

    @property
    def operand(self):
        return self.name


@dataclass(frozen=True)
class Load(Instruction):
    name: str
    opcode: ClassVar[Opcode] = Opcode.LOAD

    def __post_init__(self):
        _check_name("Load", self.name)

    @property
    def operand(self):
        return self.name


@dataclass(frozen=True)
class BuildList(Instruction):
    count: int
    opcode: ClassVar[Opcode] = Opcode.BUILD_LIST

    def __post_init__(self):
        _check_index("BuildList", self.count)

    @property
    def operand(self):
        return self.count


@dataclass(frozen=True)
class Binary(Instruction):
    op: BinaryOp
    opcode: ClassVar[Opcode] = Opcode.BINARY

    def __post_init__(self):
        if not isinstance(self.op, BinaryOp):
            raise TypeError(f"Binary operand must be a BinaryOp, got {self.op!r}")

    @property
    def operand(self):
        return self.op


@dataclass(frozen=True)
class LoadConst(Instruction):
    value: Value
    opcode: ClassVar[Opcode] = Opcode.LOAD_CONST

    def __post_init__(self):
        if not is_value(self.value):
            raise TypeError(f"LoadConst operand must be a value, got {type(self.value).__name__}")

    @property
    def operand(self):
        return self.value


@dataclass(frozen=True)
class Print(Instruction):
    opcode: ClassVar[Opcode] = Opcode.PRINT

