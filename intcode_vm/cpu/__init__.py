"""Intcode VM - decode, registers and ALU."""
