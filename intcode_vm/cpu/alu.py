"""
Intcode VM - Arithmetic/Logic Unit

Scalar results for the four binary opcodes. Python ints do not overflow,
so products past the 64-bit range are exact.
"""

from .decoder import Opcode
from ..errors import UnknownOpcode


def alu(opcode: int, a: int, b: int) -> int:
    """Compute the result of a binary opcode.

    ADD        a + b
    MUL        a * b
    LESS_THAN  1 if a < b else 0
    EQUALS     1 if a == b else 0
    """
    if opcode == Opcode.ADD:
        return a + b
    if opcode == Opcode.MUL:
        return a * b
    if opcode == Opcode.LESS_THAN:
        return 1 if a < b else 0
    if opcode == Opcode.EQUALS:
        return 1 if a == b else 0
    raise UnknownOpcode(opcode)
