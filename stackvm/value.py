"""Runtime values for the stack VM.

Every datum the engine touches is one of five immutable variants: Int, Float,
Str, Bool and List. Values are frozen, and List keeps its elements in a tuple,
so handing the same object to two places behaves exactly like copying it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Tuple, Union

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1


def _render_float(v: float) -> str:
    if math.isnan(v):
        return "NaN"
    return repr(v)


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


@dataclass(frozen=True)
class Int:
    value: int
    type_name: ClassVar[str] = "int"

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Int expects an int, got {type(self.value).__name__}")
        if not INT_MIN <= self.value <= INT_MAX:
            raise ValueError(f"{self.value} does not fit in a 64-bit signed integer")

    def __str__(self) -> str:
        return str(self.value)

    def debug(self) -> str:
        return str(self)


@dataclass(frozen=True)
class Float:
    value: float
    type_name: ClassVar[str] = "float"

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Float expects a real number, got {type(self.value).__name__}")
        # accept ints, always store a float
        object.__setattr__(self, "value", float(self.value))

    def __str__(self) -> str:
        """Shortest round-trip form, so large and tiny values print as 1e+100 or 1e-05."""
        return _render_float(self.value)

    def debug(self) -> str:
        return str(self)


@dataclass(frozen=True)
class Str:
    value: str
    type_name: ClassVar[str] = "string"

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"Str expects a str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return self.value

    def debug(self) -> str:
        return _quote(self.value)


@dataclass(frozen=True)
class Bool:
    value: bool
    type_name: ClassVar[str] = "boolean"

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise TypeError(f"Bool expects a bool, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def debug(self) -> str:
        return str(self)


@dataclass(frozen=True)
class List:
    items: Tuple["Value", ...] = ()
    type_name: ClassVar[str] = "list"

    def __post_init__(self):
        items = tuple(self.items)
        for item in items:
            if not is_value(item):
                raise TypeError(f"List elements must be values, got {type(item).__name__}")
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def __str__(self) -> str:
        return "[" + ", ".join(item.debug() for item in self.items) + "]"

    def debug(self) -> str:
        return str(self)


Value = Union[Int, Float, Str, Bool, List]

VALUE_TYPES = (Int, Float, Str, Bool, List)


def is_value(obj: Any) -> bool:
    return isinstance(obj, VALUE_TYPES)


def from_python(obj: Any) -> Value:
    """Convert plain Python data into a Value.

    Values pass through unchanged. bool is checked before int since bool is an
    int subclass in Python; lists and tuples convert recursively.
    """
    if is_value(obj):
        return obj
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, (list, tuple)):
        return List(tuple(from_python(x) for x in obj))
    raise TypeError(f"Cannot convert {type(obj).__name__} to a VM value")


def to_python(value: Value) -> Any:
    if isinstance(value, List):
        return [to_python(x) for x in value.items]
    return value.value


def make_list(values: Iterable[Value]) -> List:
    return List(tuple(values))
