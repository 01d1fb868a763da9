"""
Intcode VM - Memory Tests

Zero-fill on read, zero-extension on write, and the negative address
fault.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from intcode_vm.mem.memory import Memory
from intcode_vm.errors import NegativeAddress, IntcodeError


class TestRead:
    def test_reads_initial_image(self):
        mem = Memory([1, 2, 3])
        assert [mem.read(a) for a in range(3)] == [1, 2, 3]

    def test_unwritten_address_reads_zero(self):
        mem = Memory([1, 2, 3])
        for addr in (3, 4, 100, 10**9):
            assert mem.read(addr) == 0

    def test_read_does_not_grow(self):
        """Reading past the extent must not allocate."""
        mem = Memory([7])
        mem.read(5000)
        assert len(mem) == 1

    def test_negative_read_faults(self):
        mem = Memory([1, 2, 3])
        with pytest.raises(NegativeAddress) as exc:
            mem.read(-1)
        assert exc.value.addr == -1


class TestWrite:
    def test_write_in_range(self):
        mem = Memory([1, 2, 3])
        mem.write(1, 42)
        assert mem.read(1) == 42
        assert len(mem) == 3

    def test_write_past_extent_zero_fills(self):
        """Old extent up to the target (exclusive) reads 0 after growth."""
        mem = Memory([1, 2, 3])
        mem.write(8, 9)
        assert len(mem) == 9
        assert mem.read(8) == 9
        assert [mem.read(a) for a in range(3, 8)] == [0] * 5
        assert [mem.read(a) for a in range(3)] == [1, 2, 3]

    def test_write_to_empty_memory(self):
        mem = Memory()
        mem.write(0, -5)
        assert len(mem) == 1
        assert mem.read(0) == -5

    def test_memory_never_shrinks(self):
        mem = Memory()
        mem.write(20, 1)
        mem.write(3, 1)
        assert len(mem) == 21

    def test_large_values_are_exact(self):
        mem = Memory()
        big = 34463338 * 34463338
        mem.write(0, big)
        mem.write(1, -(2**70))
        assert mem.read(0) == 1187721666102244
        assert mem.read(1) == -(2**70)

    def test_negative_write_faults(self):
        mem = Memory([1])
        with pytest.raises(IntcodeError):
            mem.write(-3, 1)
        assert mem.snapshot() == [1]


class TestInspection:
    def test_image_is_copied(self):
        image = [1, 2, 3]
        mem = Memory(image)
        mem.write(0, 99)
        image[1] = 50
        assert image == [1, 50, 3]
        assert mem.snapshot() == [99, 2, 3]

    def test_snapshot_is_a_copy(self):
        mem = Memory([1, 2])
        snap = mem.snapshot()
        mem.write(0, 5)
        assert snap == [1, 2]

    def test_dump(self):
        mem = Memory(list(range(12)))
        assert mem.dump(0, 12) == "0000  0 1 2 3 4 5 6 7 8 9\n0010  10 11"

    def test_dump_past_extent(self):
        mem = Memory([4])
        assert mem.dump(0, 3) == "0000  4 0 0"
