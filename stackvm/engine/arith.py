"""Numeric rules for the Binary instruction.

Operands arrive as ``(top, second)``: the value on top of the stack and the
one beneath it.

``standard`` mode computes ``second OP top`` with each opcode doing what its
name says, so ``push 7, push 2, SUB`` leaves 5.

``legacy`` mode keeps the older engine's observable results: ``SUB`` computes
``top - second``, the ``MULT`` opcode divides and the ``DIV`` opcode
multiplies, and for a mixed Int/Float pair the Int is always the left operand.
"""

from __future__ import annotations

from typing import Callable, Tuple

from stackvm.errors import DivisionByZero, IntegerOverflow, MismatchedType
from stackvm.value import Float, Int, INT_MAX, INT_MIN, Value

from .opcodes import BinaryOp


def _int_div(x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZero()
    q = abs(x) // abs(y)
    return -q if (x < 0) != (y < 0) else q


def _float_div(x: float, y: float) -> float:
    if y == 0.0:
        raise DivisionByZero()
    return x / y


# name -> (int rule, float rule)
_RULES: dict[str, Tuple[Callable[[int, int], int], Callable[[float, float], float]]] = {
    "add": (lambda x, y: x + y, lambda x, y: x + y),
    "sub": (lambda x, y: x - y, lambda x, y: x - y),
    "mul": (lambda x, y: x * y, lambda x, y: x * y),
    "div": (_int_div, _float_div),
}

_STANDARD = {
    BinaryOp.ADD: "add",
    BinaryOp.SUB: "sub",
    BinaryOp.MULT: "mul",
    BinaryOp.DIV: "div",
}

# MULT divides and DIV multiplies in this table.
_LEGACY = {
    BinaryOp.ADD: "add",
    BinaryOp.SUB: "sub",
    BinaryOp.MULT: "div",
    BinaryOp.DIV: "mul",
}


def _is_number(v: Value) -> bool:
    return isinstance(v, (Int, Float))


def compute(rule: str, left: Value, right: Value) -> Value:
    """Apply the named rule to ``left`` and ``right`` with Int -> Float widening."""
    if not (_is_number(left) and _is_number(right)):
        raise MismatchedType("number", f"{left.type_name} and {right.type_name}")
    int_fn, float_fn = _RULES[rule]
    if isinstance(left, Int) and isinstance(right, Int):
        result = int_fn(left.value, right.value)
        if not INT_MIN <= result <= INT_MAX:
            raise IntegerOverflow(rule)
        return Int(result)
    return Float(float_fn(float(left.value), float(right.value)))


def apply_standard(op: BinaryOp, pair: Tuple[Value, Value]) -> Value:
    top, second = pair
    return compute(_STANDARD[op], second, top)


def apply_legacy(op: BinaryOp, pair: Tuple[Value, Value]) -> Value:
    top, second = pair
    left, right = top, second
    if isinstance(second, Int) and isinstance(top, Float):
        left, right = second, top
    return compute(_LEGACY[op], left, right)


ARITHMETIC = {
    "standard": apply_standard,
    "legacy": apply_legacy,
}
