"""
Intcode VM - Auto-growing Integer Memory

Memory model:
  - Zero-indexed list of Python ints (no width limit, so values past the
    64-bit range stay exact).
  - Reads past the current extent return 0 and do NOT grow memory.
  - The first write at or past the extent appends zeros up to and
    including the target address. Memory never shrinks.
  - Negative addresses are a fatal fault on both read and write.

Each machine owns exactly one Memory; the initial image is copied in.
"""

from typing import Iterable, List

from ..errors import NegativeAddress


class Memory:
    """Sparse-looking, list-backed Intcode address space."""

    def __init__(self, image: Iterable[int] = ()):
        self._mem: List[int] = [int(v) for v in image]

    def __len__(self) -> int:
        return len(self._mem)

    # --- Core read/write ---

    def read(self, addr: int) -> int:
        """Read the word at addr, or 0 beyond the current extent."""
        if addr < 0:
            raise NegativeAddress(addr)
        if addr < len(self._mem):
            return self._mem[addr]
        return 0

    def write(self, addr: int, value: int):
        """Write value at addr, zero-extending memory first if needed."""
        if addr < 0:
            raise NegativeAddress(addr)
        if addr >= len(self._mem):
            self._mem.extend([0] * (addr + 1 - len(self._mem)))
        self._mem[addr] = value

    # --- Inspection ---

    def snapshot(self) -> List[int]:
        """Copy of the current contents, for comparing before/after a run."""
        return list(self._mem)

    def dump(self, start: int = 0, length: int = 40, width: int = 10) -> str:
        """Produce a decimal dump of memory for debugging."""
        lines = []
        for offset in range(0, length, width):
            addr = start + offset
            words = ' '.join(str(self.read(addr + i))
                             for i in range(min(width, length - offset)))
            lines.append(f'{addr:04d}  {words}')
        return '\n'.join(lines)
