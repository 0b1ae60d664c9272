#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.decoder import (
    OPERATIONS, CPUError, UnknownInstruction, decode, disassemble, fetch_word, lookup_key
)
from mchip.ram import RAM


class TestDecoder(unittest.TestCase):
    def test_decoder_operation_count(self):
        self.assertEqual(34, len(OPERATIONS))

    def test_decoder_fields(self):
        ins = decode(0xD12F)
        self.assertEqual(0xD12F, ins.opcode)
        self.assertEqual(0xD000, ins.key)
        self.assertEqual(0xD, ins.family)
        self.assertEqual(0x1, ins.x)
        self.assertEqual(0x2, ins.y)
        self.assertEqual(0x2F, ins.kk)
        self.assertEqual(0xF, ins.n)
        self.assertEqual(0x12F, ins.nnn)
        self.assertEqual("DRW V1, V2, 0xf", ins.mnemonic)

    def test_decoder_lookup_keys(self):
        self.assertEqual(0x00E0, lookup_key(0x00E0))
        self.assertEqual(0x1000, lookup_key(0x1ABC))
        self.assertEqual(0x5000, lookup_key(0x5AB0))
        self.assertEqual(0x800E, lookup_key(0x8ABE))
        self.assertEqual(0x9000, lookup_key(0x9AB0))
        self.assertEqual(0xE09E, lookup_key(0xE39E))
        self.assertEqual(0xF065, lookup_key(0xFA65))

    def test_decoder_fetch_word(self):
        ram = RAM()
        ram.write_block(0x200, bytearray(b"\xFF\xFE"))
        self.assertEqual(0xFFFE, fetch_word(ram, 0x200))

    def test_decoder_fetch_word_wrap(self):
        ram = RAM()
        ram.write(0xFFF, 0x12)
        ram.write(0x000, 0x34)
        self.assertEqual(0x1234, fetch_word(ram, 0xFFF))

    def test_decoder_all_known(self):
        for opcode in 0x00E0, 0x00EE, 0x1234, 0x2FFF, 0x8AB6, 0xC0FF, 0xE1A1, 0xF00A, 0xFF1E, 0xF129:
            self.assertIn(decode(opcode).key, OPERATIONS)

    def test_decoder_unknown(self):
        for opcode in 0x0000, 0x0123, 0x00E1, 0x5001, 0x8008, 0x800F, 0x9001, 0xE09F, 0xE0A2, 0xF100, 0xFFFF:
            self.assertRaises(UnknownInstruction, decode, opcode)

    def test_decoder_unknown_details(self):
        with self.assertRaises(CPUError) as context:
            decode(0xFFFF, 0x234)

        self.assertEqual(0xFFFF, context.exception.opcode)
        self.assertEqual(0x234, context.exception.address)
        self.assertIn("0xffff", str(context.exception))
        self.assertIn("0x234", str(context.exception))

    def test_decoder_disassemble(self):
        self.assertEqual("CLS", disassemble(0x00E0))
        self.assertEqual("ADD V1, 0x05", disassemble(0x7105))
        self.assertEqual("DRW V0, V1, 0x5", disassemble(0xD015))
        self.assertEqual("LD I, 0x2a0", disassemble(0xA2A0))
        self.assertEqual("???", disassemble(0xFFFF))
