#!/usr/bin/env python3

"""
CPU Emulator

Like a real computer, this is where most of the processing happens.  Each call
to step() fetches, decodes and executes exactly one instruction, and each call
to tick() decays the timers.  How often either is called is up to the host, so
nothing in here knows about real time.

All state belongs to the instance or to the components plugged into it, so
several machines can run side by side without interfering with each other.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import Random
from .constants import GLYPH_START, GLYPH_SIZE
from .debugger import state_report
from .decoder import CPUError, UnknownInstruction, decode, fetch_word  # noqa: F401
from .registers import Registers


class CPU:
    def __init__(self, ram, stack, framebuffer, timers, inputs, registers=None, rng=None):
        self.ram = ram
        self.stack = stack
        self.framebuffer = framebuffer
        self.timers = timers
        self.inputs = inputs
        self.registers = Registers() if registers is None else registers
        self.rng = Random() if rng is None else rng

        # Map the decoder's masked opcodes onto their implementations
        self.instructions = {
            0x00E0: self._00E0,
            0x00EE: self._00EE,
            0x1000: self._1nnn,
            0x2000: self._2nnn,
            0x3000: self._3xkk,
            0x4000: self._4xkk,
            0x5000: self._5xy0,
            0x6000: self._6xkk,
            0x7000: self._7xkk,
            0x8000: self._8xy0,
            0x8001: self._8xy1,
            0x8002: self._8xy2,
            0x8003: self._8xy3,
            0x8004: self._8xy4,
            0x8005: self._8xy5,
            0x8006: self._8xy6,
            0x8007: self._8xy7,
            0x800E: self._8xyE,
            0x9000: self._9xy0,
            0xA000: self._Annn,
            0xB000: self._Bnnn,
            0xC000: self._Cxkk,
            0xD000: self._Dxyn,
            0xE09E: self._Ex9E,
            0xE0A1: self._ExA1,
            0xF007: self._Fx07,
            0xF00A: self._Fx0A,
            0xF015: self._Fx15,
            0xF018: self._Fx18,
            0xF01E: self._Fx1E,
            0xF029: self._Fx29,
            0xF033: self._Fx33,
            0xF055: self._Fx55,
            0xF065: self._Fx65
        }

        # Register waiting for a keypress (see Fx0A), or None when running normally
        self.pending_key_register = None

    @property
    def awaiting_key(self):
        return self.pending_key_register is not None

    def step(self):
        if self.pending_key_register is not None:
            self._resolve_keypress()
            return

        registers = self.registers
        pc = registers.pc
        opcode = fetch_word(self.ram, pc)

        try:
            instruction = decode(opcode, pc)
        except UnknownInstruction:
            # Nothing has been touched yet, so the machine can still be inspected as it was
            raise UnknownInstruction(opcode, pc, state_report(self, opcode)) from None

        registers.advance()  # Program counter updates after decode, but before execute
        self.instructions[instruction.key](instruction)

    def tick(self):
        # Returns whether the tone should be playing
        return self.timers.tick()

    def _resolve_keypress(self):
        key = self.inputs.get_keypress()

        if key is None:
            return

        self.registers.write(self.pending_key_register, key)
        self.pending_key_register = None

    def _00E0(self, ins):  # CLS
        self.framebuffer.clear()

    def _00EE(self, ins):  # RET
        self.registers.jump(self.stack.pop())

    def _1nnn(self, ins):  # JP addr
        self.registers.jump(ins.nnn)

    def _2nnn(self, ins):  # CALL addr
        self.stack.push(self.registers.pc)
        self.registers.jump(ins.nnn)

    def _3xkk(self, ins):  # SE Vx, byte
        if self.registers.v[ins.x] == ins.kk:
            self.registers.advance()

    def _4xkk(self, ins):  # SNE Vx, byte
        if self.registers.v[ins.x] != ins.kk:
            self.registers.advance()

    def _5xy0(self, ins):  # SE Vx, Vy
        v = self.registers.v

        if v[ins.x] == v[ins.y]:
            self.registers.advance()

    def _6xkk(self, ins):  # LD Vx, byte
        self.registers.write(ins.x, ins.kk)

    def _7xkk(self, ins):  # ADD Vx, byte
        # Carry is not reported for this one
        self.registers.write(ins.x, self.registers.v[ins.x] + ins.kk)

    def _8xy0(self, ins):  # LD Vx, Vy
        self.registers.write(ins.x, self.registers.v[ins.y])

    def _8xy1(self, ins):  # OR Vx, Vy
        v = self.registers.v
        self.registers.write(ins.x, v[ins.x] | v[ins.y])

    def _8xy2(self, ins):  # AND Vx, Vy
        v = self.registers.v
        self.registers.write(ins.x, v[ins.x] & v[ins.y])

    def _8xy3(self, ins):  # XOR Vx, Vy
        v = self.registers.v
        self.registers.write(ins.x, v[ins.x] ^ v[ins.y])

    # For the arithmetic instructions below, the flag is always written AFTER Vx, as sometimes Vf is specified in the
    # parameters.  Both values are worked out from the registers before either is written.

    def _8xy4(self, ins):  # ADD Vx, Vy
        v = self.registers.v
        val = v[ins.x] + v[ins.y]
        self.registers.write(ins.x, val)
        self.registers.set_flag(val > 0xFF)  # Vf is set when carrying

    def _8xy5(self, ins):  # SUB Vx, Vy
        v = self.registers.v
        vx = v[ins.x]
        vy = v[ins.y]
        self.registers.write(ins.x, vx - vy)
        self.registers.set_flag(vx > vy)  # Vf is set when NOT borrowing

    def _8xy6(self, ins):  # SHR Vx
        val = self.registers.v[ins.x]
        self.registers.write(ins.x, val >> 1)
        self.registers.set_flag(val & 0x01)

    def _8xy7(self, ins):  # SUBN Vx, Vy
        v = self.registers.v
        vx = v[ins.x]
        vy = v[ins.y]
        self.registers.write(ins.x, vy - vx)
        self.registers.set_flag(vy > vx)

    def _8xyE(self, ins):  # SHL Vx
        val = self.registers.v[ins.x]
        self.registers.write(ins.x, val << 1)
        self.registers.set_flag(val & 0x80)  # Flag is 0 or 1, never the masked bit itself

    def _9xy0(self, ins):  # SNE Vx, Vy
        v = self.registers.v

        if v[ins.x] != v[ins.y]:
            self.registers.advance()

    def _Annn(self, ins):  # LD I, addr
        self.registers.set_index(ins.nnn)

    def _Bnnn(self, ins):  # JP V0, addr
        self.registers.jump(ins.nnn + self.registers.v[0x0])

    def _Cxkk(self, ins):  # RND Vx, byte
        # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
        self.registers.write(ins.x, self.rng.randint(0, 0xFF) & ins.kk)

    def _Dxyn(self, ins):  # DRW Vx, Vy, nibble
        v = self.registers.v
        vx_pos = v[ins.x]
        vy_pos = v[ins.y]
        i = self.registers.i
        ram = self.ram
        framebuffer = self.framebuffer
        collided = False

        for y in range(ins.n):
            spr_data = ram.read(i + y)

            for x in range(8):
                if spr_data & (0x80 >> x):
                    # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                    if framebuffer.toggle_pixel(vx_pos + x, vy_pos + y):
                        collided = True

        self.registers.set_flag(collided)

    def _Ex9E(self, ins):  # SKP Vx
        if self.inputs.is_key_down(self.registers.v[ins.x] & 0xF):
            self.registers.advance()

    def _ExA1(self, ins):  # SKNP Vx
        if not self.inputs.is_key_down(self.registers.v[ins.x] & 0xF):
            self.registers.advance()

    def _Fx07(self, ins):  # LD Vx, DT
        self.registers.write(ins.x, self.timers.delay)

    def _Fx0A(self, ins):  # LD Vx, K
        # This opcode waits for a keypress, but since the timers still need to expire correctly, and the framebuffer
        # still needs presenting, control goes back to the host.  Until a key arrives, step() does nothing else.
        self.inputs.setup_keypress()  # Forget any previously pressed keys
        self.pending_key_register = ins.x

    def _Fx15(self, ins):  # LD DT, Vx
        self.timers.set_delay(self.registers.v[ins.x])

    def _Fx18(self, ins):  # LD ST, Vx
        self.timers.set_sound(self.registers.v[ins.x])

    def _Fx1E(self, ins):  # ADD I, Vx
        self.registers.set_index(self.registers.i + self.registers.v[ins.x])

    def _Fx29(self, ins):  # LD F, Vx
        self.registers.set_index(GLYPH_START + GLYPH_SIZE * self.registers.v[ins.x])

    def _Fx33(self, ins):  # LD B, Vx
        val = self.registers.v[ins.x]
        i = self.registers.i
        self.ram.write(i, val // 100)           # Most-significant digit
        self.ram.write(i + 1, (val // 10) % 10)  # Middle digit
        self.ram.write(i + 2, val % 10)          # Least-significant digit

    def _Fx55(self, ins):  # LD [I], Vx
        i = self.registers.i
        v = self.registers.v

        for reg in range(ins.x + 1):
            self.ram.write(i + reg, v[reg])

    def _Fx65(self, ins):  # LD Vx, [I]
        i = self.registers.i

        for reg in range(ins.x + 1):
            self.registers.write(reg, self.ram.read(i + reg))
