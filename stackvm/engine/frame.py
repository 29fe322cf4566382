from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from stackvm.errors import EmptyStack
from stackvm.value import Value


@dataclass
class Frame:
    return_address: int
    locals: dict[str, Value] = field(default_factory=dict)
    operands: List[Value] = field(default_factory=list)


class CallStack:
    """Ordered frames; the last one is active and receives every operation.

    Values are immutable, so handing out the stored object from get_local is
    the same as handing out a copy.
    """

    def __init__(self):
        self.frames: List[Frame] = []

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def top(self) -> Frame:
        if not self.frames:
            raise RuntimeError("call stack has no frames")
        return self.frames[-1]

    def push_frame(self, return_address: int) -> Frame:
        frame = Frame(return_address=return_address)
        self.frames.append(frame)
        return frame

    def ret(self) -> int:
        """Drop the active frame and return the address it was entered from."""
        if len(self.frames) <= 1:
            raise RuntimeError("cannot return from the outermost frame")
        return self.frames.pop().return_address

    # --- Operand stack ---
    def push(self, v: Value) -> None:
        self.top.operands.append(v)

    def pop(self) -> Value:
        operands = self.top.operands
        if not operands:
            raise EmptyStack()
        return operands.pop()

    def pop2(self) -> Tuple[Value, Value]:
        # (former top, the value beneath it)
        first = self.pop()
        second = self.pop()
        return first, second

    def pop_n(self, n: int) -> List[Value]:
        operands = self.top.operands
        if n > len(operands):
            raise EmptyStack(f"need {n} operands, stack holds {len(operands)}")
        if n == 0:
            return []
        items = operands[-n:]
        del operands[-n:]
        return items

    def peek(self, n: int = 0) -> Value:
        operands = self.top.operands
        if n >= len(operands):
            raise EmptyStack()
        return operands[-1 - n]

    # --- Locals ---
    def store_local(self, name: str, v: Value) -> None:
        self.top.locals[name] = v

    def get_local(self, name: str) -> Value | None:
        return self.top.locals.get(name)
