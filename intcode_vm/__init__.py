"""
Intcode VM
==========
A virtual machine for Intcode: programs are flat integer arrays run by a
fetch-decode-execute loop over an auto-growing memory, with position,
immediate and relative parameter modes.

Architecture:
    ┌──────────┐    ┌──────────┐    ┌──────────┐    ┌──────────┐
    │  Memory  │───>│ Decoder  │───>│   ALU    │───>│ Machine  │
    │ (words)  │    │ (modes)  │    │ (1,2,7,8)│    │ (run)    │
    └──────────┘    └──────────┘    └──────────┘    └──────────┘
                         │
                         └────────> Disassembler (read-only listing)

    - mem/memory.py:    zero-extending integer address space
    - cpu/decoder.py:   word decode and parameter resolution, shared by
                        the machine and the disassembler
    - cpu/alu.py:       add, multiply, less-than, equals
    - emu.py:           IntcodeMachine, execute(), run_program()
    - disassembler.py:  linear listing, no control-flow following
    - search.py:        noun/verb search over the day 2 program
"""

__version__ = "0.1.0"

from .errors import (
    IntcodeError, UnknownOpcode, UnknownParameterMode, UnsupportedWriteMode,
    InputExhausted, NegativeAddress,
)
from .mem.memory import Memory
from .cpu.decoder import Opcode, Mode, decode, resolve_read, resolve_write_address
from .cpu.alu import alu
from .emu import (
    IntcodeMachine, StopReason, ExecutionResult, execute, run_program,
    parse_program, load_program,
)
from .disassembler import IntcodeDisassembler, DisassembledInstruction, disassemble
from .programs import PROGRAMS, DAY2_PROGRAM, DAY5_PROGRAM, DAY9_PROGRAM
from .search import set_parameters, find_noun_verb, search_answer
