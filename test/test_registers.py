#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.registers import Registers


class TestRegisters(unittest.TestCase):
    def setUp(self):
        self.registers = Registers()

    def test_registers_init(self):
        self.assertEqual(bytes(16), bytes(self.registers.v))
        self.assertEqual(0, self.registers.i)
        self.assertEqual(0x200, self.registers.pc)

    def test_registers_write_masks(self):
        self.registers.write(0x3, 0x123)
        self.assertEqual(0x23, self.registers.read(0x3))
        self.registers.write(0x3, -1)
        self.assertEqual(0xFF, self.registers.read(0x3))

    def test_registers_set_flag(self):
        self.registers.set_flag(0x80)
        self.assertEqual(1, self.registers.v[0xF])
        self.registers.set_flag(0)
        self.assertEqual(0, self.registers.v[0xF])

    def test_registers_set_index_wrap(self):
        self.registers.set_index(0x1005)
        self.assertEqual(0x005, self.registers.i)

    def test_registers_jump_wrap(self):
        self.registers.jump(0x1234)
        self.assertEqual(0x234, self.registers.pc)

    def test_registers_advance(self):
        self.registers.advance()
        self.assertEqual(0x202, self.registers.pc)
        self.registers.pc = 0xFFE
        self.registers.advance()
        self.assertEqual(0x000, self.registers.pc)

    def test_registers_isolated(self):
        other = Registers()
        self.registers.write(0x1, 0x55)
        self.assertEqual(0, other.read(0x1))
