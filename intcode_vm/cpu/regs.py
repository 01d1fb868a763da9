"""
Intcode VM - Machine Register Set

Register model:
  PC            program counter, always at the start of an instruction
  RB            relative base, offset for relative-mode parameters
  steps         executed instruction counter
  input_pos     index of the next unread input value
"""


class Registers:
    """Intcode machine registers."""

    __slots__ = ('PC', 'RB', 'steps', 'input_pos')

    def __init__(self):
        self.PC: int = 0         # Program counter
        self.RB: int = 0         # Relative base
        self.steps: int = 0      # Instructions executed
        self.input_pos: int = 0  # Next input index

    def display(self) -> str:
        """Format register state for traces."""
        return (f"PC={self.PC:04d} RB={self.RB} "
                f"IN={self.input_pos} STEPS={self.steps}")

    def reset(self):
        """Reset to the power-on state."""
        self.PC = 0
        self.RB = 0
        self.steps = 0
        self.input_pos = 0
