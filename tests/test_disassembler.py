"""
Intcode Disassembler Tests

Listing lines are checked against hand-decoded programs.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from intcode_vm.disassembler import (
    IntcodeDisassembler, DisassembledInstruction, disassemble,
)
from intcode_vm.cpu.decoder import Opcode
from intcode_vm.mem.memory import Memory
from intcode_vm.programs import DAY5_PROGRAM


QUINE = [109, 1, 204, -1, 1001, 100, 1, 100, 1008, 100, 16, 101, 1006, 101, 0, 99]


class TestListing:
    def test_add_and_terminate(self):
        assert disassemble([1, 0, 0, 0, 99]) == [
            "0000 Add mem[0], mem[0], mem[0]",
            "0004 Terminate",
        ]

    def test_destination_printed_first(self):
        assert disassemble([1101, 2, 3, 0, 99])[0] == "0000 Add mem[0], 2, 3"

    def test_every_mode_and_width(self):
        assert disassemble(QUINE) == [
            "0000 AdjustRelativeBase 1",
            "0002 Output mem[relative_base+-1]",
            "0004 Add mem[100], mem[100], 1",
            "0008 Eq mem[101], mem[100], 16",
            "0012 JmpIfFalse mem[101], 0",
            "0015 Terminate",
        ]

    def test_input_mul_lt_jumps(self):
        program = [3, 0, 1002, 0, 3, 5, 21107, 1, 2, 7, 1105, 1, 0, 99]
        assert disassemble(program) == [
            "0000 Input mem[0]",
            "0002 Mul mem[5], mem[0], 3",
            "0006 Lt mem[relative_base+7], 1, 2",
            "0010 JmpIfTrue 1, 0",
            "0013 Terminate",
        ]

    def test_unknown_opcode_advances_one_word(self):
        assert disassemble([42, 99]) == [
            "0000 Unknown opcode 2a, pc 0",
            "0001 Terminate",
        ]

    def test_unknown_mode_rendered(self):
        assert disassemble([304, 0, 99])[0] == "0000 Output Unknown"

    def test_jumps_are_not_followed(self):
        """Word 3 is data reached by straight-line scan; the Terminate
        at 4 is swallowed as one of its parameters."""
        assert disassemble([1105, 1, 4, 7, 99]) == [
            "0000 JmpIfTrue 1, 4",
            "0003 Lt mem[0], mem[99], mem[0]",
        ]

    def test_empty_memory(self):
        assert disassemble([]) == []

    def test_whole_bundled_program(self):
        lines = disassemble(DAY5_PROGRAM)
        assert lines[0] == "0000 Input mem[225]"
        assert lines[1] == "0002 Add mem[6], mem[225], mem[6]"
        assert all(line[:4].isdigit() for line in lines)


class TestShowMemory:
    def test_position_values(self):
        lines = disassemble([1, 5, 6, 0, 99, 7, 8], show_memory=True)
        assert lines[0] == "0000 Add mem[0], mem[5]=7, mem[6]=8"

    def test_immediate_values(self):
        lines = disassemble([1101, 2, 3, 0, 99], show_memory=True)
        assert lines[0] == "0000 Add mem[0], 2=2, 3=3"

    def test_relative_values_use_relative_base(self):
        program = [204, 3, 99, 42]
        assert disassemble(program, show_memory=True)[0] == \
            "0000 Output mem[relative_base+3]=42"
        assert disassemble(program, show_memory=True, relative_base=1)[0] == \
            "0000 Output mem[relative_base+3]=0"

    def test_write_targets_not_resolved(self):
        assert disassemble([3, 1, 99], show_memory=True)[0] == "0000 Input mem[1]"

    def test_unresolvable_parameters(self):
        assert disassemble([304, 0, 99], show_memory=True)[0] == "0000 Output Unknown=?"
        assert disassemble([4, -5, 99], show_memory=True)[0] == "0000 Output mem[-5]=?"


class TestDecodeOne:
    def test_fields(self):
        inst = IntcodeDisassembler().decode_one([1002, 4, 3, 4, 33], 0)
        assert isinstance(inst, DisassembledInstruction)
        assert inst.address == 0
        assert inst.opcode == Opcode.MUL
        assert inst.mnemonic == "Mul"
        assert inst.words == [1002, 4, 3, 4]
        assert inst.length == 4
        assert inst.operands == ["mem[4]", "mem[4]", "3"]
        assert inst.text == "Mul mem[4], mem[4], 3"

    def test_words_past_extent_read_zero(self):
        inst = IntcodeDisassembler().decode_one([1], 0)
        assert inst.words == [1, 0, 0, 0]

    def test_max_instructions(self):
        results = IntcodeDisassembler().disassemble(QUINE, max_instructions=2)
        assert [r.address for r in results] == [0, 2]

    def test_never_mutates_memory(self):
        mem = Memory([1101, 2, 3, 0, 99])
        before = mem.snapshot()
        IntcodeDisassembler(show_memory=True).disassemble(mem)
        assert mem.snapshot() == before
        assert len(mem) == 5
