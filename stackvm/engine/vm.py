from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Callable, Iterable, List, TextIO

from stackvm import config
from stackvm.errors import MismatchedType, NotInScope, UnsupportedInstruction, VmError
from stackvm.value import Bool, Value, make_list

from .arith import ARITHMETIC
from .disasm import disassemble
from .frame import CallStack
from .instructions import (
    Binary,
    BuildList,
    Instruction,
    Jump,
    JumpIfFalse,
    Load,
    LoadConst,
    Print,
    Store,
)
from .opcodes import Opcode

logger = logging.getLogger(__name__)


class VmState(Enum):
    RUNNING = "running"
    HALTED = "halted"
    FAILED = "failed"


class Vm:
    """Fetch-decode-execute engine over a flat instruction sequence.

    Every ``run`` starts from a fresh call stack holding one frame whose
    return address is the sequence length, with the pointer at 0. The first
    VmError stops the run and propagates to the caller; ``state`` and
    ``error`` describe how the last run ended.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        *,
        arithmetic: str | None = None,
        backend: str | None = None,
        trace: bool | None = None,
    ):
        self.out = out
        self.arithmetic = arithmetic or config.get_arithmetic_mode()
        if self.arithmetic not in ARITHMETIC:
            raise ValueError(f"Unknown arithmetic mode: {self.arithmetic!r}")
        self.backend = backend or config.get_vm_backend()
        if self.backend not in config.VM_BACKENDS:
            raise ValueError(f"Unknown VM backend: {self.backend!r}")
        self.trace = config.trace_enabled() if trace is None else trace
        self._loop = self._run_loop
        if self.backend == "cy":
            # fails here, before any run, when the extension was not built
            from stackvm.engine import vm_cy
            self._loop = lambda instructions: vm_cy.run_loop(self, instructions)
        self._apply_binary = ARITHMETIC[self.arithmetic]
        self.call_stack = CallStack()
        self.pointer = 0
        self.state: VmState | None = None
        self.error: VmError | None = None
        # Opcode dispatch table
        self._dispatch: dict[int, Callable[[Instruction], None]] = {}
        self._init_dispatch()

    def _init_dispatch(self) -> None:
        d = self._dispatch
        # Control flow
        d[Opcode.JUMP] = self.op_jump
        d[Opcode.JUMP_IF_FALSE] = self.op_jump_if_false
        # Locals
        d[Opcode.STORE] = self.op_store
        d[Opcode.LOAD] = self.op_load
        # Lists
        d[Opcode.BUILD_LIST] = self.op_build_list
        # Arithmetic
        d[Opcode.BINARY] = self.op_binary
        # Constants / output
        d[Opcode.LOAD_CONST] = self.op_load_const
        d[Opcode.PRINT] = self.op_print

    # --- Per-op handlers ---
    # Control flow
    def op_jump(self, instr: Jump) -> None:
        self.pointer = instr.target

    def op_jump_if_false(self, instr: JumpIfFalse) -> None:
        v = self.call_stack.pop()
        if not isinstance(v, Bool):
            raise MismatchedType("boolean", v.type_name)
        if not v.value:
            self.pointer = instr.target

    # Locals
    def op_store(self, instr: Store) -> None:
        self.call_stack.store_local(instr.name, self.call_stack.pop())

    def op_load(self, instr: Load) -> None:
        v = self.call_stack.get_local(instr.name)
        if v is None:
            raise NotInScope(instr.name)
        self.call_stack.push(v)

    # Lists
    def op_build_list(self, instr: BuildList) -> None:
        items = self.call_stack.pop_n(instr.count)
        self.call_stack.push(make_list(items))

    # Arithmetic
    def op_binary(self, instr: Binary) -> None:
        pair = self.call_stack.pop2()
        self.call_stack.push(self._apply_binary(instr.op, pair))

    # Constants / output
    def op_load_const(self, instr: LoadConst) -> None:
        self.call_stack.push(instr.value)

    def op_print(self, instr: Print) -> None:
        v = self.call_stack.pop()
        print(v, file=self.out)

    # --- Execution ---
    def handler_for(self, instr) -> Callable[[Instruction], None]:
        handler = None
        if isinstance(instr, Instruction):
            handler = self._dispatch.get(getattr(instr, "opcode", None))
        if handler is None:
            raise UnsupportedInstruction(instr)
        return handler

    def step(self, instructions: List[Instruction]) -> None:
        """Execute the instruction at the pointer, advancing it first."""
        ip = self.pointer
        instr = instructions[ip]
        self.pointer = ip + 1
        if self.trace:
            logger.debug("%04d %r depth=%d", ip, instr, len(self.call_stack.top.operands))
        try:
            self.handler_for(instr)(instr)
        except VmError as err:
            err.pointer = ip
            raise

    def _run_loop(self, instructions: List[Instruction]) -> None:
        n = len(instructions)
        while self.pointer < n:
            self.step(instructions)

    def run(self, instructions: Iterable[Instruction]) -> List[Value]:
        """Run ``instructions`` to completion and return the final operand stack."""
        instructions = list(instructions)
        if config.disasm_enabled():
            print("=== DISASM ===", file=sys.stderr)
            print(disassemble(instructions), file=sys.stderr)
            print("=== END DISASM ===", file=sys.stderr)

        self.call_stack = CallStack()
        self.call_stack.push_frame(len(instructions))
        self.pointer = 0
        self.error = None
        self.state = VmState.RUNNING
        logger.debug("run: %d instructions, backend=%s, arithmetic=%s",
                     len(instructions), self.backend, self.arithmetic)
        try:
            self._loop(instructions)
        except VmError as err:
            self.state = VmState.FAILED
            self.error = err
            logger.debug("run failed at %s: %s", err.pointer, err)
            raise
        except BaseException:
            # host-level failure (interrupt, broken output stream): still not running
            self.state = VmState.FAILED
            logger.debug("run aborted at pointer %d", self.pointer, exc_info=True)
            raise
        self.state = VmState.HALTED
        logger.debug("run halted at pointer %d", self.pointer)
        return list(self.call_stack.top.operands)


def run_program(instructions: Iterable[Instruction], out: TextIO | None = None, **kwargs) -> Vm:
    vm = Vm(out, **kwargs)
    vm.run(instructions)
    return vm
