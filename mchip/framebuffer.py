#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only drawn to the actual display (the host
rendering system) once per frame.  The host takes a snapshot of the grid and
hands it to a renderer, so the CPU never talks to a rendering framework.

Unlike other computers, programs for this system cannot write directly into
video RAM.  Instead, sprites are drawn to the screen using an XOR method, so
the only mutations are a pixel toggle and a full clear.

Coordinates wrap around to the opposite edge in both directions, however far
out of range they are.  Collisions (where a set pixel was unset by an XOR)
are reported back to the caller.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT
from .ram import RAM


class Framebuffer():
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.ram_bank = RAM(self.vid_size)
        self.dirty = True  # Present the blank screen at least once

    def clear(self):
        self.ram_bank.clear()
        self.dirty = True

    def _vram_loc(self, x, y):
        return (y % self.vid_height) * self.vid_width + (x % self.vid_width)

    def toggle_pixel(self, x, y):
        # Returns whether the pixel was erased
        vram_loc = self._vram_loc(x, y)
        pixel = self.ram_bank.read(vram_loc)
        self.ram_bank.write(vram_loc, pixel ^ 1)
        self.dirty = True
        return pixel == 1

    def read_pixel(self, x, y):
        return self.ram_bank.read(self._vram_loc(x, y))

    def snapshot(self):
        mem = self.ram_bank.mem
        vid_width = self.vid_width

        return tuple(
            tuple(mem[row * vid_width:(row + 1) * vid_width]) for row in range(self.vid_height)
        )

    def mark_presented(self):
        self.dirty = False

    def get_vid_size(self):
        return self.vid_width, self.vid_height
