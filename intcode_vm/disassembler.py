"""
Intcode Disassembler
====================
Linear listing of an Intcode memory image, built on the same decode and
parameter-resolution helpers as the execute loop (cpu/decoder.py).

API Usage:
    from intcode_vm.disassembler import IntcodeDisassembler, disassemble

    for line in disassemble([1, 0, 0, 0, 99]):
        print(line)     # "0000 Add mem[0], mem[0], mem[0]"

    dis = IntcodeDisassembler(show_memory=True)
    inst = dis.decode_one(memory, pc=0)

Limitation: the scan advances by instruction width and never follows
jumps, so data words mixed into the instruction stream are listed as
(usually unknown) instructions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .cpu.decoder import (
    Opcode, Mode, ALU_OPCODES, INSTRUCTION_WIDTH, MNEMONICS, VALID_MODES,
    decode, resolve_read,
)
from .mem.memory import Memory


@dataclass
class DisassembledInstruction:
    """One decoded instruction with all formatting data."""
    address: int
    words: List[int]
    opcode: int
    mnemonic: str
    operands: List[str] = field(default_factory=list)
    length: int = 0

    def __post_init__(self):
        self.length = len(self.words)

    @property
    def text(self) -> str:
        """Instruction text without the address column."""
        if self.mnemonic == 'Unknown':
            return f"Unknown opcode {self.opcode:x}, pc {self.address:x}"
        if not self.operands:
            return self.mnemonic
        return f"{self.mnemonic} {', '.join(self.operands)}"

    def format(self) -> str:
        """Format as a single listing line."""
        return f"{self.address:04d} {self.text}"


class IntcodeDisassembler:
    """
    Intcode disassembler.

    With show_memory set, read parameters are suffixed with the value they
    resolve to against the current memory and relative_base, the way the
    execute loop would read them at this moment.

    Usage:
        dis = IntcodeDisassembler()
        results = dis.disassemble([1101, 2, 3, 0, 99])
        single  = dis.decode_one(memory, pc=0)
    """

    def __init__(self, show_memory: bool = False, relative_base: int = 0):
        self.show_memory = show_memory
        self.relative_base = relative_base

    # ── public API ──

    def disassemble(self, memory: Union[Memory, Sequence[int]],
                    max_instructions: int = 0) -> List[DisassembledInstruction]:
        """Disassemble from address 0 to the end of the supplied memory."""
        memory = _as_memory(memory)
        results: List[DisassembledInstruction] = []
        pc = 0
        while pc < len(memory):
            inst = self.decode_one(memory, pc)
            results.append(inst)
            pc += inst.length
            if max_instructions and len(results) >= max_instructions:
                break
        return results

    def decode_one(self, memory: Union[Memory, Sequence[int]],
                   pc: int) -> DisassembledInstruction:
        """Decode exactly one instruction at pc."""
        memory = _as_memory(memory)
        opcode, mode1, mode2, mode3 = decode(memory.read(pc))

        if opcode not in MNEMONICS:
            return DisassembledInstruction(
                address=pc, words=[memory.read(pc)],
                opcode=opcode, mnemonic='Unknown')

        width = INSTRUCTION_WIDTH[opcode]
        words = [memory.read(pc + i) for i in range(width)]

        if opcode in ALU_OPCODES:
            operands = [
                self._format_param(memory, mode3, pc + 3, is_write=True),
                self._format_param(memory, mode1, pc + 1),
                self._format_param(memory, mode2, pc + 2),
            ]
        elif opcode == Opcode.INPUT:
            operands = [self._format_param(memory, mode1, pc + 1, is_write=True)]
        elif opcode in (Opcode.OUTPUT, Opcode.ADJUST_RELATIVE_BASE):
            operands = [self._format_param(memory, mode1, pc + 1)]
        elif opcode in (Opcode.JUMP_IF_TRUE, Opcode.JUMP_IF_FALSE):
            operands = [
                self._format_param(memory, mode1, pc + 1),
                self._format_param(memory, mode2, pc + 2),
            ]
        else:  # TERMINATE
            operands = []

        return DisassembledInstruction(
            address=pc, words=words, opcode=opcode,
            mnemonic=MNEMONICS[opcode], operands=operands)

    # ── operand formatting ──

    def _format_param(self, memory: Memory, mode: int, addr: int,
                      is_write: bool = False) -> str:
        """Render one parameter, optionally suffixed with its value."""
        param = memory.read(addr)
        if mode == Mode.POSITION:
            s = f"mem[{param}]"
        elif mode == Mode.RELATIVE:
            s = f"mem[relative_base+{param}]"
        elif mode == Mode.IMMEDIATE:
            s = f"{param}"
        else:
            s = "Unknown"
        if not self.show_memory or is_write:
            return s
        value = self._peek(memory, mode, addr)
        return f"{s}={'?' if value is None else value}"

    def _peek(self, memory: Memory, mode: int, addr: int) -> Optional[int]:
        """Resolve a read parameter, or None where the machine would fault."""
        if mode not in VALID_MODES:
            return None
        param = memory.read(addr)
        target = param + self.relative_base if mode == Mode.RELATIVE else param
        if mode != Mode.IMMEDIATE and target < 0:
            return None
        return resolve_read(memory, mode, addr, self.relative_base)


def _as_memory(memory: Union[Memory, Sequence[int]]) -> Memory:
    if isinstance(memory, Memory):
        return memory
    return Memory(memory)


# ═══════════════════════════════════════════════════════════════════════
# CONVENIENCE
# ═══════════════════════════════════════════════════════════════════════

def disassemble(memory: Union[Memory, Sequence[int]], show_memory: bool = False,
                relative_base: int = 0) -> List[str]:
    """Module-level convenience function: one listing line per instruction."""
    dis = IntcodeDisassembler(show_memory=show_memory, relative_base=relative_base)
    return [inst.format() for inst in dis.disassemble(memory)]
