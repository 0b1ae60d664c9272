#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.constants import GLYPHS
from mchip.ram import RAM, RAMError, OutOfRangeAddress


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM()
        self.small_ram = RAM(5)

    def test_ram_init(self):
        self.assertEqual(0x1000, len(self.ram.mem))
        self.assertEqual("0000000000", self.small_ram.mem.hex())

    def test_ram_write(self):
        self.small_ram.write(1, 255)
        self.assertEqual("00ff000000", self.small_ram.mem.hex())

    def test_ram_write_masks_value(self):
        self.small_ram.write(0, 0x1FE)
        self.assertEqual(0xFE, self.small_ram.read(0))

    def test_ram_write_block(self):
        self.small_ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.small_ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.small_ram.mem.hex())

    def test_ram_address_wrap(self):
        self.ram.write(0x1001, 0x12)
        self.assertEqual(0x12, self.ram.read(0x001))
        self.assertEqual(0x12, self.ram.read(0x2001))

    def test_ram_block_wrap(self):
        self.small_ram.write_block(4, bytearray(b"\xFE\xFF"))
        self.assertEqual("ff000000fe", self.small_ram.mem.hex())
        self.assertEqual(b"\xFE\xFF", self.small_ram.read_block(4, 2))

    def test_ram_load_builtin_glyphs(self):
        self.ram.load_builtin_glyphs()
        self.assertEqual(80, len(GLYPHS))
        self.assertEqual(GLYPHS, bytes(self.ram.mem[:80]))
        self.assertEqual(bytes(0x1000 - 80), bytes(self.ram.mem[80:]))

        # Loading again changes nothing
        self.ram.load_builtin_glyphs()
        self.assertEqual(GLYPHS, bytes(self.ram.mem[:80]))

    def test_ram_glyph_zero(self):
        self.ram.load_builtin_glyphs()
        self.assertEqual(b"\xF0\x90\x90\x90\xF0", self.ram.read_block(0, 5))
        self.assertEqual(b"\xF0\x80\xF0\x80\x80", self.ram.read_block(75, 5))

    def test_ram_load_program(self):
        self.ram.load_program(b"\x00\xE0\x12\x00")
        self.assertEqual(b"\x00\xE0\x12\x00", self.ram.read_block(0x200, 4))
        self.assertEqual(0, self.ram.read(0x1FF))
        self.assertEqual(0, self.ram.read(0x204))

    def test_ram_load_program_fills_memory(self):
        self.ram.load_program(b"\xAA" * (0x1000 - 0x200))
        self.assertEqual(0xAA, self.ram.read(0xFFF))
        self.assertEqual(0x00, self.ram.read(0x000))

    def test_ram_load_program_too_large(self):
        self.assertRaises(OutOfRangeAddress, self.ram.load_program, b"\xAA" * (0x1000 - 0x200 + 1))
        self.assertTrue(issubclass(OutOfRangeAddress, RAMError))

    def test_ram_clear(self):
        self.small_ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.assertEqual("00fdfe0000", self.small_ram.mem.hex())
        self.small_ram.clear()
        self.assertEqual("0000000000", self.small_ram.mem.hex())
