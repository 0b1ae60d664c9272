#!/usr/bin/env python3

"""
Curses Renderer Plugin

Draws framebuffer snapshots in a standard Linux-style TTY Terminal, the
Windows Command Prompt, or PowerShell, using inverted spaces to represent each
set pixel.  The top line of the terminal is used for the title.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import curses
import _curses
from .r_null import Renderer as RendererBase


class Renderer(RendererBase):
    def __init__(self, scale=None, curses_cursor_mode=0, **kwargs):
        if scale is None:
            scale = 2  # Default horizontal stretch if not supplied, or set to default

        self.pixel_char = " " * scale
        self.pad = None
        self.pad_size = None
        self.last_screen_height = -1
        self.last_screen_width = -1
        self.cursor_mode = curses_cursor_mode
        self.screen = curses.initscr()
        curses.curs_set(self.cursor_mode)
        curses.noecho()
        curses.cbreak()
        super().__init__(scale)

    def _ensure_pad(self, width, height):
        # We have to allow one extra character, presumably for the cursor, otherwise we can't write the furthest
        # bottom-right pixel.  The extra row at the top holds the title.
        if self.pad_size != (width, height):
            self.pad = curses.newpad(height + 2, width * self.scale + 1)
            self.pad_size = (width, height)
            self._draw_title()

    def render(self, grid):
        height = len(grid)
        width = len(grid[0]) if height else 0
        self._ensure_pad(width, height)

        for y, row in enumerate(grid):
            for x, pixel in enumerate(row):
                self.pad.addstr(y + 1, x * self.scale, self.pixel_char, curses.A_REVERSE if pixel else curses.A_NORMAL)

        screen_height, screen_width = self.screen.getmaxyx()  # This doesn't seem to ever change/work on Windows?!

        if screen_height != self.last_screen_height or screen_width != self.last_screen_width:
            # Screen resolution changed, redraw everything
            self.screen.clear()

            if hasattr(curses, "resizeterm"):
                # This doesn't work on Windows
                curses.resizeterm(screen_height, screen_width)

            self.screen.refresh()
            self.last_screen_height = screen_height
            self.last_screen_width = screen_width

        self.pad.refresh(0, 0, 0, 0, screen_height - 1, screen_width - 1)
        super().render(grid)

    def _draw_title(self):
        if self.pad:
            pad_width = self.pad_size[0] * self.scale
            title = self.title[:pad_width]
            self.pad.addstr(0, 0, title + " " * (pad_width - len(title)), curses.A_REVERSE)

    def set_title(self, title):
        super().set_title(title)
        self._draw_title()

    def shutdown(self):
        curses.nocbreak()
        curses.echo()

        if self.cursor_mode != 1:
            try:
                curses.curs_set(1)
            except _curses.error:
                pass

        curses.endwin()
        super().shutdown()

    # No Superclass for these Curses-specific methods

    def get_curses_screen(self):
        return self.screen
