#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes, plus
loading the built-in glyphs and a program image into their fixed locations.

There is no bounds-checked failure on access.  Addresses wrap around the end
of the bank (4096 bytes for system memory, so effectively a 12-bit mask) and
values are masked to a byte before being stored.  Programs in the wild rely on
this wrapping, so trapping here would break them.  The only error reported is
a program image which cannot fit above the program start address.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, GLYPHS, GLYPH_START, PROGRAM_START


class RAMError(Exception):
    pass


class OutOfRangeAddress(RAMError):
    pass


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.resize(mem_size)

    def resize(self, mem_size):
        self.mem = memoryview(bytearray(b"\x00" * mem_size))
        self.mem_size = mem_size

    def read(self, location):
        return self.mem[location % self.mem_size]

    def read_block(self, location, size=1):
        mem_size = self.mem_size
        return bytes(self.mem[(location + offset) % mem_size] for offset in range(size))

    def write(self, location, byte):
        self.mem[location % self.mem_size] = byte & 0xFF

    def write_block(self, location, block):
        mem_size = self.mem_size

        for offset, byte in enumerate(block):
            self.mem[(location + offset) % mem_size] = byte & 0xFF

    def load_builtin_glyphs(self):
        # Safe to call more than once, the table is simply rewritten
        self.write_block(GLYPH_START, GLYPHS)

    def load_program(self, data):
        if PROGRAM_START + len(data) > self.mem_size:
            raise OutOfRangeAddress(
                "Program is {} bytes, but only {} bytes are available from 0x{:03x}".format(
                    len(data), self.mem_size - PROGRAM_START, PROGRAM_START
                )
            )

        self.mem[PROGRAM_START:PROGRAM_START + len(data)] = bytes(data)

    def clear(self):
        # We could reallocate the entire array instead
        for i in range(self.mem_size):
            self.mem[i] = 0x00
