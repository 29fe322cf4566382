from __future__ import annotations

from enum import IntEnum


class Opcode(IntEnum):
    # Control flow
    JUMP = 0x20  # absolute target
    JUMP_IF_FALSE = 0x22  # absolute target

    # Locals
    LOAD = 0x10  # name
    STORE = 0x11  # name

    # Lists
    BUILD_LIST = 0x51  # element count

    # Arithmetic
    BINARY = 0x60  # BinaryOp tag

    # Constants
    LOAD_CONST = 0x05  # embedded value

    # Output
    PRINT = 0xA0


class BinaryOp(IntEnum):
    ADD = 0
    SUB = 1
    MULT = 2
    DIV = 3
