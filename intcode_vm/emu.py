"""
Intcode VM - Main Machine Class

This is the top-level class that integrates:
  - Registers (cpu/regs.py)
  - Memory (mem/memory.py)
  - Instruction decode + parameter resolution (cpu/decoder.py)
  - ALU (cpu/alu.py)

Execution model, one step:
  1. Fetch the word at PC
  2. Decode opcode and parameter modes
  3. Resolve read parameters / write targets
  4. Execute the handler: update memory, outputs, RB, PC
  5. Advance the step counter

Stop reasons:
  - HALT:     opcode 99 reached, mem[0] is the return value
  - BREAK:    breakpoint address hit (debugging aid)
  - TIMEOUT:  max_steps exceeded (debugging aid, off by default)

Faults (unknown opcode or mode, immediate write target, input
exhaustion, negative address) are raised as IntcodeError subclasses and
end the run. There is no recovery.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Set, Union

from .cpu.regs import Registers
from .cpu.decoder import (
    Opcode, ALU_OPCODES, INSTRUCTION_WIDTH, decode, resolve_read,
    resolve_write_address,
)
from .cpu.alu import alu
from .disassembler import IntcodeDisassembler
from .errors import IntcodeError, InputExhausted, UnknownOpcode
from .mem.memory import Memory

logger = logging.getLogger(__name__)


class StopReason(Enum):
    HALT = 'HALT'
    BREAK = 'BREAK'
    TIMEOUT = 'TIMEOUT'


@dataclass
class ExecutionResult:
    """Everything a finished run produced."""
    return_value: int
    outputs: List[int]
    memory: List[int]
    steps: int


class IntcodeMachine:
    """Intcode virtual machine.

    Usage:
        vm = IntcodeMachine([3, 0, 4, 0, 99], inputs=[42])
        vm.run()              # StopReason.HALT
        vm.outputs            # [42]
        vm.return_value       # 42
    """

    DEFAULT_MAX_STEPS = None

    def __init__(self, program: Iterable[int], inputs: Iterable[int] = (),
                 on_output: Optional[Callable[[int], None]] = None):
        self.regs = Registers()
        self.mem = Memory(program)
        self.inputs: List[int] = list(inputs)
        self.outputs: List[int] = []
        self.on_output = on_output
        self.halted = False

        # Breakpoints: set of PC addresses that trigger BREAK
        self._breakpoints: Set[int] = set()
        self._break_pc: Optional[int] = None

        # Trace output
        self._trace = False
        self._trace_output: List[str] = []

        self._dispatch = self._build_dispatch()

    @property
    def return_value(self) -> int:
        """The value at address 0 (the program's result once halted)."""
        return self.mem.read(0)

    # ══════════════════════════════════════════════
    # Execution
    # ══════════════════════════════════════════════

    def step(self) -> Optional[StopReason]:
        """Execute one instruction. Returns StopReason.HALT on opcode 99,
        else None. Faults propagate to the caller.
        """
        pc = self.regs.PC
        opcode, mode1, mode2, mode3 = decode(self.mem.read(pc))

        if self._trace:
            line = IntcodeDisassembler(
                show_memory=True, relative_base=self.regs.RB,
            ).decode_one(self.mem, pc).format()
            self._trace_output.append(f"{line}    {self.regs.display()}")
            logger.debug("trace %s", line)

        if opcode == Opcode.TERMINATE:
            self.halted = True
            return StopReason.HALT

        handler = self._dispatch.get(opcode)
        if handler is None:
            raise UnknownOpcode(opcode, pc)
        handler(opcode, (mode1, mode2, mode3))
        self.regs.steps += 1
        return None

    def run(self, max_steps: int = None) -> StopReason:
        """Run until halt, breakpoint or step limit.

        Args:
            max_steps: Instructions to execute before TIMEOUT; None runs
                until the program halts.

        Returns:
            StopReason indicating why execution stopped
        """
        if max_steps is None:
            max_steps = self.DEFAULT_MAX_STEPS
        logger.debug("run: %d words, %d input(s), pc=%d",
                     len(self.mem), len(self.inputs), self.regs.PC)

        # Resuming from a breakpoint steps over it once
        skip_break = self._break_pc == self.regs.PC
        self._break_pc = None
        try:
            while max_steps is None or self.regs.steps < max_steps:
                if self.regs.PC in self._breakpoints and not skip_break:
                    self._break_pc = self.regs.PC
                    return StopReason.BREAK
                skip_break = False
                reason = self.step()
                if reason is not None:
                    logger.debug("halt after %d steps, mem[0]=%d, %d output(s)",
                                 self.regs.steps, self.return_value,
                                 len(self.outputs))
                    return reason
        except IntcodeError as e:
            logger.error("machine fault: %s (%s)", e, self.regs.display())
            raise
        return StopReason.TIMEOUT

    # ══════════════════════════════════════════════
    # Parameter access
    # ══════════════════════════════════════════════

    def _read_param(self, n: int, mode: int) -> int:
        """Value of parameter n (1-based) of the current instruction."""
        return resolve_read(self.mem, mode, self.regs.PC + n, self.regs.RB)

    def _write_param(self, n: int, mode: int) -> int:
        """Target address of parameter n (1-based) of the current instruction."""
        return resolve_write_address(self.mem, mode, self.regs.PC + n, self.regs.RB)

    # ══════════════════════════════════════════════
    # Instruction handlers
    # ══════════════════════════════════════════════
    # Handler signature: handler(opcode, modes)

    def _build_dispatch(self) -> dict:
        """Build opcode → handler dispatch table."""
        table = {op: self._op_alu for op in ALU_OPCODES}
        table.update({
            Opcode.INPUT:                self._op_input,
            Opcode.OUTPUT:               self._op_output,
            Opcode.JUMP_IF_TRUE:         self._op_jump,
            Opcode.JUMP_IF_FALSE:        self._op_jump,
            Opcode.ADJUST_RELATIVE_BASE: self._op_adjust_relative_base,
        })
        return table

    def _op_alu(self, opcode, modes):
        a = self._read_param(1, modes[0])
        b = self._read_param(2, modes[1])
        dest = self._write_param(3, modes[2])
        self.mem.write(dest, alu(opcode, a, b))
        self.regs.PC += INSTRUCTION_WIDTH[opcode]

    def _op_input(self, opcode, modes):
        dest = self._write_param(1, modes[0])
        if self.regs.input_pos >= len(self.inputs):
            raise InputExhausted(self.regs.PC, self.regs.input_pos)
        self.mem.write(dest, self.inputs[self.regs.input_pos])
        self.regs.input_pos += 1
        self.regs.PC += INSTRUCTION_WIDTH[opcode]

    def _op_output(self, opcode, modes):
        value = self._read_param(1, modes[0])
        self.outputs.append(value)
        if self.on_output is not None:
            self.on_output(value)
        self.regs.PC += INSTRUCTION_WIDTH[opcode]

    def _op_jump(self, opcode, modes):
        """JmpIfTrue / JmpIfFalse: PC is overwritten, not advanced."""
        a = self._read_param(1, modes[0])
        target = self._read_param(2, modes[1])
        if (opcode == Opcode.JUMP_IF_TRUE) == (a != 0):
            self.regs.PC = target
        else:
            self.regs.PC += INSTRUCTION_WIDTH[opcode]

    def _op_adjust_relative_base(self, opcode, modes):
        self.regs.RB += self._read_param(1, modes[0])
        self.regs.PC += INSTRUCTION_WIDTH[opcode]

    # ══════════════════════════════════════════════
    # Breakpoint API
    # ══════════════════════════════════════════════

    def add_breakpoint(self, addr: int):
        """Stop before the instruction at addr executes."""
        self._breakpoints.add(addr)

    def remove_breakpoint(self, addr: int):
        self._breakpoints.discard(addr)

    def clear_breakpoints(self):
        self._breakpoints.clear()

    # ══════════════════════════════════════════════
    # Trace / Debug
    # ══════════════════════════════════════════════

    def enable_trace(self, enable: bool = True):
        """Enable per-instruction trace with resolved parameter values."""
        self._trace = enable

    def get_trace(self) -> str:
        return '\n'.join(self._trace_output)

    def clear_trace(self):
        self._trace_output.clear()


# ══════════════════════════════════════════════
# Entry points
# ══════════════════════════════════════════════

def run_program(initial_memory: Sequence[int], inputs: Sequence[int] = (),
                on_output: Optional[Callable[[int], None]] = None) -> ExecutionResult:
    """Run a fresh machine to halt and collect everything it produced."""
    vm = IntcodeMachine(initial_memory, inputs, on_output=on_output)
    vm.run()
    return ExecutionResult(
        return_value=vm.return_value,
        outputs=list(vm.outputs),
        memory=vm.mem.snapshot(),
        steps=vm.regs.steps,
    )


def execute(initial_memory: Sequence[int], inputs: Sequence[int] = ()) -> int:
    """Run a program to halt and return the value at address 0."""
    return run_program(initial_memory, inputs).return_value


def parse_program(text: str) -> List[int]:
    """Parse comma-separated Intcode text into a list of ints."""
    text = text.strip()
    if not text:
        return []
    program = []
    for i, token in enumerate(text.split(',')):
        token = token.strip()
        if not token:
            raise ValueError(f"Empty value at position {i}")
        try:
            program.append(int(token))
        except ValueError:
            raise ValueError(f"Bad value {token!r} at position {i}") from None
    return program


def load_program(path_or_text: Union[str, Path]) -> List[int]:
    """Load an Intcode program from a file path or literal text."""
    if isinstance(path_or_text, Path):
        return parse_program(path_or_text.read_text())
    p = Path(path_or_text)
    try:
        is_file = p.is_file()
    except OSError:
        is_file = False
    if is_file:
        return parse_program(p.read_text())
    return parse_program(path_or_text)
