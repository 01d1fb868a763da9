"""
Intcode VM - Machine Faults

Every fault is fatal: the execute loop raises and never resumes. Callers
catch ``IntcodeError`` when they only care that the run failed.
"""

__all__ = [
    'IntcodeError', 'UnknownOpcode', 'UnknownParameterMode',
    'UnsupportedWriteMode', 'InputExhausted', 'NegativeAddress',
]


class IntcodeError(Exception):
    """Base class for all machine faults."""
    pass


class UnknownOpcode(IntcodeError):
    """Raised when a decoded opcode has no handler."""
    def __init__(self, opcode: int, pc: int = None):
        self.opcode = opcode
        self.pc = pc
        if pc is None:
            super().__init__(f"Unknown opcode {opcode}")
        else:
            super().__init__(f"Unknown opcode {opcode} at pc {pc}")


class UnknownParameterMode(IntcodeError):
    """Raised for a mode digit outside {0, 1, 2}."""
    def __init__(self, mode: int):
        self.mode = mode
        super().__init__(f"Unknown parameter mode {mode}")


class UnsupportedWriteMode(IntcodeError):
    """Raised when an immediate-mode parameter is used as a write target."""
    def __init__(self, mode: int, addr: int):
        self.mode = mode
        self.addr = addr
        super().__init__(
            f"Parameter mode {mode} cannot be a write target (parameter at {addr})")


class InputExhausted(IntcodeError):
    """Raised when an Input instruction runs with no values left."""
    def __init__(self, pc: int, consumed: int):
        self.pc = pc
        self.consumed = consumed
        super().__init__(
            f"Input exhausted at pc {pc} after {consumed} value(s)")


class NegativeAddress(IntcodeError):
    """Raised when any resolved address is below zero."""
    def __init__(self, addr: int):
        self.addr = addr
        super().__init__(f"Negative address {addr}")
