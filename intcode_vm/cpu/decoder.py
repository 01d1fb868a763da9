"""
Intcode VM - Instruction Decode + Parameter Resolution

Shared by the execute loop (emu.py) and the disassembler, so both read
instruction words the same way.

Instruction word layout (decimal digits):

    ABCDE
     |||+-- DE  opcode (word mod 100)
     ||+--- C   mode of parameter 1
     |+---- B   mode of parameter 2
     +----- A   mode of parameter 3

Parameter modes:
  POSITION   0  parameter is an address
  IMMEDIATE  1  parameter is the value (never a write target)
  RELATIVE   2  parameter + relative base is an address
"""

from enum import IntEnum
from typing import Dict, Tuple

from ..errors import UnknownParameterMode, UnsupportedWriteMode


class Opcode(IntEnum):
    ADD = 1
    MUL = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_RELATIVE_BASE = 9
    TERMINATE = 99


class Mode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


# Binary opcodes computed by the ALU: a, b (read), dest (write)
ALU_OPCODES = frozenset((Opcode.ADD, Opcode.MUL, Opcode.LESS_THAN, Opcode.EQUALS))

# Words per instruction, opcode word included
INSTRUCTION_WIDTH: Dict[int, int] = {
    Opcode.ADD:                  4,
    Opcode.MUL:                  4,
    Opcode.INPUT:                2,
    Opcode.OUTPUT:               2,
    Opcode.JUMP_IF_TRUE:         3,
    Opcode.JUMP_IF_FALSE:        3,
    Opcode.LESS_THAN:            4,
    Opcode.EQUALS:               4,
    Opcode.ADJUST_RELATIVE_BASE: 2,
    Opcode.TERMINATE:            1,
}

MNEMONICS: Dict[int, str] = {
    Opcode.ADD:                  'Add',
    Opcode.MUL:                  'Mul',
    Opcode.INPUT:                'Input',
    Opcode.OUTPUT:               'Output',
    Opcode.JUMP_IF_TRUE:         'JmpIfTrue',
    Opcode.JUMP_IF_FALSE:        'JmpIfFalse',
    Opcode.LESS_THAN:            'Lt',
    Opcode.EQUALS:               'Eq',
    Opcode.ADJUST_RELATIVE_BASE: 'AdjustRelativeBase',
    Opcode.TERMINATE:            'Terminate',
}

VALID_MODES = frozenset(int(m) for m in Mode)


def decode(word: int) -> Tuple[int, int, int, int]:
    """Split an instruction word into (opcode, mode1, mode2, mode3).

    Never fails. Digits of a negative word are taken with truncating
    division and keep the word's sign, so they never alias a valid opcode
    or mode.
    """
    sign = -1 if word < 0 else 1
    w = abs(word)
    opcode = sign * (w % 100)
    mode1 = sign * ((w // 100) % 10)
    mode2 = sign * ((w // 1000) % 10)
    mode3 = sign * ((w // 10000) % 10)
    return opcode, mode1, mode2, mode3


def resolve_read(memory, mode: int, addr: int, relative_base: int) -> int:
    """Value of the parameter stored at addr, interpreted per mode."""
    param = memory.read(addr)
    if mode == Mode.POSITION:
        return memory.read(param)
    if mode == Mode.IMMEDIATE:
        return param
    if mode == Mode.RELATIVE:
        return memory.read(param + relative_base)
    raise UnknownParameterMode(mode)


def resolve_write_address(memory, mode: int, addr: int, relative_base: int) -> int:
    """Target address of the write parameter stored at addr."""
    param = memory.read(addr)
    if mode == Mode.POSITION:
        return param
    if mode == Mode.RELATIVE:
        return param + relative_base
    if mode == Mode.IMMEDIATE:
        raise UnsupportedWriteMode(mode, addr)
    raise UnknownParameterMode(mode)
