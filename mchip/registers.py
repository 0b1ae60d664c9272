#!/usr/bin/env python3

"""
Register File

Holds the 16 general purpose 8-bit [V] registers, the index register [I] and
the program counter.  Register Vf doubles as the carry, borrow and collision
flag, so the CPU never keeps anything of its own in it.

Writes are masked to their declared width here rather than relying on the
storage type.  A bytearray raises on an out-of-range value instead of
truncating it, so every write to [V] must go through write() or set_flag().
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import ADDR_MASK, PROGRAM_START

FLAG = 0xF  # Vf


class Registers:
    def __init__(self):
        self.v = memoryview(bytearray(16))
        self.i = 0
        self.pc = PROGRAM_START

    def read(self, reg):
        return self.v[reg]

    def write(self, reg, value):
        self.v[reg] = value & 0xFF

    def set_flag(self, flag):
        self.v[FLAG] = 1 if flag else 0

    def set_index(self, addr):
        self.i = addr & ADDR_MASK

    def jump(self, addr):
        self.pc = addr & ADDR_MASK

    def advance(self):
        self.pc = (self.pc + 2) & ADDR_MASK
