#!/usr/bin/env python3

"""
Instruction Decoder

Every instruction is 2 bytes long, stored most-significant byte first.  The
top nibble selects the operation family, and the remaining fields are always in
the same position across all instructions:

    n   = lowest nibble
    kk  = lowest byte
    nnn = lowest 12 bits (address)
    x/y = second and third nibbles (register 0-15)

Some families need more than the top nibble to identify the operation.  The
lookup key is the opcode masked down to the bits that matter for its family,
exactly matching one of the entries in OPERATIONS.  Anything else is a
malformed program, and decoding is the only place that can be detected.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple

CPU_ENDIAN = "big"

# Bitmask applied to the whole opcode to build the lookup key, by family
FAMILY_MASKS = {
    0x0: 0xFFFF,  # Exact match
    0x5: 0xF00F,
    0x8: 0xF00F,
    0x9: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

# Masked opcode -> assembly template
OPERATIONS = {
    0x00E0: "CLS",
    0x00EE: "RET",
    0x1000: "JP 0x{nnn:03x}",
    0x2000: "CALL 0x{nnn:03x}",
    0x3000: "SE V{x:01x}, 0x{kk:02x}",
    0x4000: "SNE V{x:01x}, 0x{kk:02x}",
    0x5000: "SE V{x:01x}, V{y:01x}",
    0x6000: "LD V{x:01x}, 0x{kk:02x}",
    0x7000: "ADD V{x:01x}, 0x{kk:02x}",
    0x8000: "LD V{x:01x}, V{y:01x}",
    0x8001: "OR V{x:01x}, V{y:01x}",
    0x8002: "AND V{x:01x}, V{y:01x}",
    0x8003: "XOR V{x:01x}, V{y:01x}",
    0x8004: "ADD V{x:01x}, V{y:01x}",
    0x8005: "SUB V{x:01x}, V{y:01x}",
    0x8006: "SHR V{x:01x}",
    0x8007: "SUBN V{x:01x}, V{y:01x}",
    0x800E: "SHL V{x:01x}",
    0x9000: "SNE V{x:01x}, V{y:01x}",
    0xA000: "LD I, 0x{nnn:03x}",
    0xB000: "JP V0, 0x{nnn:03x}",
    0xC000: "RND V{x:01x}, 0x{kk:02x}",
    0xD000: "DRW V{x:01x}, V{y:01x}, 0x{n:01x}",
    0xE09E: "SKP V{x:01x}",
    0xE0A1: "SKNP V{x:01x}",
    0xF007: "LD V{x:01x}, DT",
    0xF00A: "LD V{x:01x}, K",
    0xF015: "LD DT, V{x:01x}",
    0xF018: "LD ST, V{x:01x}",
    0xF01E: "ADD I, V{x:01x}",
    0xF029: "LD F, V{x:01x}",
    0xF033: "LD B, V{x:01x}",
    0xF055: "LD [I], V{x:01x}",
    0xF065: "LD V{x:01x}, [I]"
}


class CPUError(Exception):
    pass


class UnknownInstruction(CPUError):
    def __init__(self, opcode, address=None, detail=None):
        self.opcode = opcode
        self.address = address

        if address is None:
            message = "Opcode 0x{:04x} is not a recognised instruction.".format(opcode)
        else:
            message = "Opcode 0x{:04x} at address 0x{:03x} is not a recognised instruction.".format(opcode, address)

        if detail:
            message = "{}\n\n{}".format(detail, message)

        super().__init__(message)


Instruction = namedtuple("Instruction", ["opcode", "key", "family", "x", "y", "kk", "n", "nnn", "mnemonic"])


def fetch_word(ram, location):
    return int.from_bytes(ram.read_block(location, 2), CPU_ENDIAN, signed=False)


def lookup_key(opcode):
    family = (opcode & 0xF000) >> 12
    return opcode & FAMILY_MASKS.get(family, 0xF000)


def decode(opcode, address=None):
    key = lookup_key(opcode)

    if key not in OPERATIONS:
        raise UnknownInstruction(opcode, address)

    return Instruction(
        opcode=opcode,
        key=key,
        family=(opcode & 0xF000) >> 12,
        x=(opcode & 0xF00) >> 8,
        y=(opcode & 0xF0) >> 4,
        kk=opcode & 0xFF,
        n=opcode & 0xF,
        nnn=opcode & 0xFFF,
        mnemonic=disassemble(opcode)
    )


def disassemble(opcode):
    # Used for crash reports, so never raises
    template = OPERATIONS.get(lookup_key(opcode))

    if template is None:
        return "???"

    return template.format(
        x=(opcode & 0xF00) >> 8, y=(opcode & 0xF0) >> 4, kk=opcode & 0xFF, n=opcode & 0xF, nnn=opcode & 0xFFF
    )
