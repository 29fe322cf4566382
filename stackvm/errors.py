from __future__ import annotations

class VmError(Exception):
    """ Base class for all errors raised while executing instructions"""

    # Index of the instruction that failed; set by the engine before re-raising.
    pointer: int | None = None


class NotInScope(VmError):
    """ Raised when a name is loaded before it is bound in the current frame"""

    def __init__(self, name: str):
        super().__init__(f"'{name}' is not in scope")
        self.name = name


class MismatchedType(VmError):
    """ Raised when an operand's runtime type is not the one the instruction requires"""

    def __init__(self, expected: str, actual: str | None = None):
        message = f"expected {expected}"
        if actual is not None:
            message += f", got {actual}"
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class EmptyStack(VmError):
    """ Raised when popping from an operand stack that holds too few values"""

    def __init__(self, message: str = "operand stack is empty"):
        super().__init__(message)


class UnsupportedInstruction(VmError):
    """ Raised when the dispatch loop meets something it cannot execute"""

    def __init__(self, instruction):
        super().__init__(f"unsupported instruction: {instruction!r}")
        self.instruction = instruction


class DivisionByZero(VmError):
    """ Raised when the right-hand operand of a division is zero"""

    def __init__(self):
        super().__init__("division by zero")


class IntegerOverflow(VmError):
    """ Raised when an integer result does not fit in 64 bits"""

    def __init__(self, op: str):
        super().__init__(f"integer overflow in {op}")
        self.op = op
