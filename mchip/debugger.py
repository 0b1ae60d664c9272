#!/usr/bin/env python3

"""
CPU State Report

Produced when emulation halts on an instruction it cannot execute:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * PC - Program counter
    * OP - OpCode number
    * IN - Decoded instruction
    * Stack - Stack contents
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .decoder import disassemble


def state_report(cpu, opcode):
    registers = cpu.registers
    timers = cpu.timers

    report = (
        "V: 0x" + ("{:02x}" * 16) + " I: 0x{:03x} DT: 0x{:02x} ST: 0x{:02x} PC: 0x{:03x} OP: 0x{:04x} IN: {}"
    ).format(
        *[registers.v[reg_num] for reg_num in range(15, -1, -1)] +
        [registers.i, timers.delay, timers.sound, registers.pc, opcode, disassemble(opcode)]
    )

    stack_items = cpu.stack.get_items()
    stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
    report += "\nStack:{}".format(stack_str or " (Empty)")

    return report
